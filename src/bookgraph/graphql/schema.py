"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..config import settings
from ..logging import get_logger
from .errors import BookGraphError
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class BookGraphSchema(strawberry.Schema):
    """Schema that reports resolver errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        operation = execution_context.operation_name if execution_context else None
        for error in errors:
            original = error.original_error
            if isinstance(original, BookGraphError):
                logger.info(
                    "GraphQL field failed",
                    code=original.kind.value,
                    error=original.message,
                    path=error.path,
                    operation=operation,
                )
            elif original is None:
                # Document validation and variable coercion errors
                logger.info("GraphQL request rejected", error=error.message, operation=operation)
            else:
                logger.error(
                    "Unhandled GraphQL resolver error",
                    error=str(original),
                    path=error.path,
                    operation=operation,
                    exc_info=original,
                )


schema = BookGraphSchema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Fails fast if a type reference cannot be resolved instead of failing on
    the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=settings.graphiql_enabled,
        context_getter=get_context,
    )
