"""
Request logging middleware

Every request gets a request id (taken from ``X-Request-ID`` when the caller
sends one) that is bound into the logging context, echoed back in the response
headers, and attached to the start and completion log events together with
the GraphQL operation name.
"""

import json
import re
import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import bind_request_id, clear_request_context, get_logger

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
REQUEST_ID_HEADER = "X-Request-ID"
REDACTED = "[REDACTED]"

# Substrings that mark a query parameter as sensitive
_SENSITIVE_FRAGMENTS = (
    "password",
    "token",
    "secret",
    "auth",
    "key",
    "jwt",
    "session",
    "cookie",
    "credential",
)
# GraphQL GET parameters carry the document and its inputs
_GRAPHQL_PAYLOAD_PARAMS = ("query", "variables", "extensions")

_OPERATION_PATTERN = re.compile(r"\b(query|mutation)\s+(\w+)")


def sanitize_query_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of ``params`` with sensitive-looking values replaced by ``[REDACTED]``."""
    return {
        key: REDACTED if any(f in key.lower() for f in _SENSITIVE_FRAGMENTS) else value
        for key, value in params.items()
    }


def operation_name_from_payload(payload: Mapping[str, Any]) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload.

    Prefers an explicit ``operationName``. Otherwise the document is scanned
    for the first named operation; mutations are prefixed with ``mutation:``,
    introspection becomes ``__introspection`` and anonymous documents become
    ``unnamed_operation``. Returns ``None`` when there is no document.
    """
    name = payload.get("operationName")
    if isinstance(name, str) and name:
        return name

    document = payload.get("query")
    if not isinstance(document, str) or not document:
        return None
    if "__schema" in document or "IntrospectionQuery" in document:
        return "__introspection"

    match = _OPERATION_PATTERN.search(document)
    if match is None:
        return "unnamed_operation"
    kind, name = match.groups()
    return f"mutation:{name}" if kind == "mutation" else name


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        return operation_name_from_payload(request.query_params)

    if request.method != "POST":
        return None
    body = await request.body()
    if not body:
        return None
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return operation_name_from_payload(payload) if isinstance(payload, dict) else None


def _loggable_query_params(request: Request) -> dict[str, Any] | None:
    if not request.query_params:
        return None
    params = sanitize_query_params(request.query_params)
    if request.url.path == GRAPHQL_PATH:
        for name in _GRAPHQL_PAYLOAD_PARAMS:
            if name in params:
                params[name] = REDACTED
    return params


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id and log the start and end of every request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = bind_request_id(request.headers.get(REQUEST_ID_HEADER))
        started = time.perf_counter()
        try:
            operation = await extract_graphql_operation_name(request)
            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=_loggable_query_params(request),
                graphql_operation=operation,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                )
                raise

            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                graphql_operation=operation,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_request_context()
