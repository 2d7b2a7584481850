"""Last-resort handler for unexpected exceptions.

Learn: An exception handler registered for plain Exception runs outside
every user middleware, so its 500 would lose X-Request-ID and the
security headers. This middleware is added first, which makes it the
innermost one: the failure is logged with its traceback (and the bound
request_id), turned into the generic internal error body, and the
response still passes back out through the rest of the stack.
MentorHubError and validation errors never get here; FastAPI's own
handlers answer those earlier.
"""

import structlog
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from mentorhub.errors import Internal

logger = structlog.get_logger()


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "mentorhub.unhandled_error",
                method=request.method,
                path=request.url.path,
            )
            error = Internal()
            return JSONResponse(status_code=error.status_code, content=error.to_dict())
