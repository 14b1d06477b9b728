"""
Tests for request logging helpers
"""

import pytest

from appcatalog.middleware import operation_name_from_payload, sanitize_query_params


def test_sanitize_query_params():
    params = {"query": "{ app(id: 1) { id } }", "access_token": "abc", "API_KEY": "x"}

    assert sanitize_query_params(params) == {
        "query": "{ app(id: 1) { id } }",
        "access_token": "[REDACTED]",
        "API_KEY": "[REDACTED]",
    }


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        (
            {"operationName": "AppDetails", "query": "query Other { app(id: 1) { id } }"},
            "AppDetails",
        ),
        ({"query": "query AppDetails { app(id: 1) { id } }"}, "AppDetails"),
        ({"query": "mutation Touch { touch }"}, "mutation:Touch"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({"query": "{ categories { id } }"}, "unnamed_operation"),
        ({"query": ""}, None),
        ({}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected
