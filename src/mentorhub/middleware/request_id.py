"""Correlation ids for MentorHub requests.

Learn: A client or proxy may send its own X-Request-ID. It is reused only
when it looks like an id (letters, digits, '.', '_' or '-', at most 128
characters). Anything else is replaced with a fresh UUID. The id is bound to
structlog's contextvars, so the auth gate, the services, the access log
and the 500 handler all log it, and the client gets it back in the
response to quote when reporting a problem.
"""

import re
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_ID = re.compile(r"[A-Za-z0-9._-]{1,128}")


def resolve_request_id(incoming: str | None) -> str:
    if incoming and _VALID_ID.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response: Response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
