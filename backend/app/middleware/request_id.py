"""
Memos Backend — Request ID Middleware
======================================

What:  Assigns a correlation id to each request and echoes it back.
Why:   Error responses carry `request_id`; the same id appears in the
       access log and in every log line the handlers emit for that request.
How:   Reuse the client's X-Request-ID if present, otherwise generate a
       short UUID. The id is stored in a ContextVar (coroutine-local) and
       on request.state.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# ContextVar, not threading.local: concurrent requests share one thread
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets `request_id_var` for the duration of the request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
