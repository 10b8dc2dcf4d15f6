"""
Error taxonomy for GraphQL resolvers.

Resolvers raise these instead of returning error payloads. graphql-core
copies the ``extensions`` attribute of the original exception onto the
located error, so each entry in the response ``errors`` list carries
``extensions.code``.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    UNIMPLEMENTED = "UNIMPLEMENTED"


class BookGraphError(Exception):
    """Base class for expected resolver failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.kind.value}


class NotFoundError(BookGraphError):
    kind = ErrorKind.NOT_FOUND


class ValidationFailureError(BookGraphError):
    kind = ErrorKind.VALIDATION_FAILURE


class UnimplementedError(BookGraphError):
    kind = ErrorKind.UNIMPLEMENTED
