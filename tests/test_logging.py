"""
Tests for the request log context
"""

import logging

import pytest

from bookgraph.logging import (
    RequestContextFilter,
    _resolve_level,
    clear_request_context,
    graphql_operation_ctx,
    request_id_ctx,
    set_graphql_operation,
    set_request_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_request_context()
    yield
    clear_request_context()


def test_filter_adds_request_id_and_operation():
    set_request_context("req-1")
    set_graphql_operation("mutation:CreateBook")

    event = RequestContextFilter()(None, "info", {"event": "Book created"})

    assert event == {
        "event": "Book created",
        "request_id": "req-1",
        "graphql_operation": "mutation:CreateBook",
    }


def test_filter_leaves_events_alone_outside_a_request():
    event = RequestContextFilter()(None, "info", {"event": "Database initialized"})

    assert event == {"event": "Database initialized"}


def test_explicit_operation_is_not_overwritten():
    set_request_context("req-1")
    set_graphql_operation("GetBooks")

    event = RequestContextFilter()(None, "info", {"event": "x", "graphql_operation": "Other"})

    assert event["graphql_operation"] == "Other"


def test_new_request_starts_without_an_operation():
    set_request_context("req-1")
    set_graphql_operation("GetBooks")

    generated = set_request_context()

    assert request_id_ctx.get() == generated
    assert len(generated) == 12
    assert graphql_operation_ctx.get() is None


def test_clear_request_context():
    set_request_context("req-1")
    set_graphql_operation("GetBooks")

    clear_request_context()

    assert request_id_ctx.get() is None
    assert graphql_operation_ctx.get() is None


@pytest.mark.parametrize(
    "debug,level,expected",
    [
        (True, "warning", logging.DEBUG),
        (False, None, logging.INFO),
        (False, "warning", logging.WARNING),
        (False, "ERROR", logging.ERROR),
        (False, "chatty", logging.INFO),
    ],
)
def test_resolve_level(debug, level, expected):
    assert _resolve_level(debug, level) == expected
