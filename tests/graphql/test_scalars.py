"""
Tests for the Date scalar codec
"""

from datetime import UTC, datetime

import pytest
from graphql import IntValueNode, StringValueNode

from bookgraph.graphql.errors import ErrorKind, ValidationFailureError
from bookgraph.graphql.scalars import (
    from_timestamp_ms,
    parse_date_literal,
    parse_date_value,
    to_timestamp_ms,
)


class TestParseDateValue:
    def test_integer_timestamp(self):
        assert parse_date_value(123456000) == datetime(1970, 1, 2, 10, 17, 36, tzinfo=UTC)

    def test_epoch(self):
        assert parse_date_value(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_negative_timestamp(self):
        assert parse_date_value(-1000) == datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["1999", 1.5, True, None, {"ms": 1}])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationFailureError) as exc_info:
            parse_date_value(value)
        assert exc_info.value.kind is ErrorKind.VALIDATION_FAILURE


class TestParseDateLiteral:
    def test_int_literal(self):
        assert parse_date_literal(IntValueNode(value="86400000")) == datetime(
            1970, 1, 2, tzinfo=UTC
        )

    def test_other_literal_kinds_become_null(self):
        assert parse_date_literal(StringValueNode(value="86400000")) is None


class TestSerialize:
    def test_aware_datetime(self):
        assert to_timestamp_ms(datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)) == 1000

    def test_naive_datetime_is_utc(self):
        assert to_timestamp_ms(datetime(1970, 1, 1, 0, 0, 1)) == 1000

    def test_millisecond_precision_is_exact(self):
        timestamp = 1_700_000_000_123
        assert to_timestamp_ms(from_timestamp_ms(timestamp)) == timestamp
