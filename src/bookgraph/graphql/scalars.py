"""
Custom GraphQL scalars
"""

from datetime import UTC, datetime, timedelta
from typing import Any, NewType

import strawberry
from graphql import IntValueNode, ValueNode

from .errors import ValidationFailureError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MILLISECOND = timedelta(milliseconds=1)


def from_timestamp_ms(value: int) -> datetime:
    return EPOCH + timedelta(milliseconds=value)


def to_timestamp_ms(value: datetime) -> int:
    # SQLite hands back naive datetimes; everything is stored as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - EPOCH) // ONE_MILLISECOND


def parse_date_value(value: Any) -> datetime:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationFailureError(
            f"Date must be an integer millisecond timestamp, got {value!r}"
        )
    return from_timestamp_ms(value)


def parse_date_literal(ast: ValueNode, _variables: dict[str, Any] | None = None) -> datetime | None:
    """Accept integer literals; any other literal kind silently becomes null."""
    if isinstance(ast, IntValueNode):
        return from_timestamp_ms(int(ast.value, 10))
    return None


Date = strawberry.scalar(
    NewType("Date", datetime),
    name="Date",
    description="Date custom scalar type, transmitted as integer milliseconds since the epoch",
    serialize=to_timestamp_ms,
    parse_value=parse_date_value,
    parse_literal=parse_date_literal,
)
