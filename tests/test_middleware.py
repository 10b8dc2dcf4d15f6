"""
Tests for request logging helpers
"""

import pytest

from bookgraph.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_query_params_redacts_sensitive_keys():
    params = {"password": "hunter2", "X-Api-Key": "abc", "page": "2"}

    assert sanitize_query_params(params) == {
        "password": "[REDACTED]",
        "X-Api-Key": "[REDACTED]",
        "page": "2",
    }


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"operationName": "GetBooks", "query": "query Other { getBooks { id } }"}, "GetBooks"),
        ({"query": "query FindAuthor($id: ID) { findAuthorById(id: $id) { id } }"}, "FindAuthor"),
        ({"query": "mutation CreateBook { createBook { id } }"}, "mutation:CreateBook"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({"query": "{ getBooks { id } }"}, "unnamed_operation"),
        ({"operationName": None, "query": ""}, None),
        ({}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected
