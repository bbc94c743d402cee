"""
Hauge API — Request ID Middleware
==================================

What:  Assigns a short correlation id to each request and echoes it back.
How:   Reuses a client-supplied X-Request-ID when it is a plain token
       (1-64 characters of letters, digits, '.', '_' or '-'), otherwise
       generates one. The id goes into a ContextVar for loggers and onto
       request.state for handlers, and is set as the X-Request-ID response
       header.
When:  Outermost application middleware; runs before access logging.

The id is interpolated into every log line of the request, so a client
value with spaces, newlines or unbounded length is never trusted.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
CLIENT_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,64}")

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(supplied: str) -> str:
    """The client's id if it is a safe token, else a fresh 8-character one."""
    if supplied and CLIENT_REQUEST_ID.fullmatch(supplied):
        return supplied
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id shared by its log lines and its response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER, ""))
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
