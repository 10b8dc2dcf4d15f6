"""
Configuration management for the bookgraph backend
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./bookgraph.db"
    database_pool_size: int = 10
    database_max_overflow: int = 20

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5500
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    sql_echo: bool = False
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def graphiql_enabled(self) -> bool:
        """GraphiQL is never served in production, whatever `graphiql` says."""
        return self.graphiql and not self.is_production

    class Config:
        env_file = ".env"
        env_prefix = "BOOKGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()
