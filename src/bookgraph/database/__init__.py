"""
Database connection and session management
"""

from .connection import create_tables, get_async_session, get_engine, init_database

__all__ = ["create_tables", "get_async_session", "get_engine", "init_database"]
