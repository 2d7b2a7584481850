"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan reports startup/shutdown (and warns loudly about the
insecure default secret). Middleware, CORS, error handlers and routers
are all registered here.

Error boundary: every MentorHubError becomes {"error", "message"} with
its status code. Body validation failures become bad_request 400. Any
other exception is caught by UnexpectedErrorMiddleware, innermost in the
stack, and answered with a generic 500 that still carries the request id
and security headers. Nothing internal reaches the client.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mentorhub import __version__
from mentorhub.api import api_router
from mentorhub.config import settings
from mentorhub.errors import BadRequest, MentorHubError

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info(
        "mentorhub.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )
    if settings.uses_insecure_secret:
        logger.warning(
            "mentorhub.insecure_jwt_secret",
            hint="Set MENTORHUB_JWT_SECRET; tokens signed with the default "
            "secret can be forged by anyone.",
        )

    yield

    logger.info("mentorhub.shutdown")


# ─── Error handlers ──────────────────────────────────────


async def handle_app_error(request: Request, exc: MentorHubError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    detail = "Invalid request body."
    if errors and errors[0].get("type") == "json_invalid":
        detail = "Request body is not valid JSON."
    elif errors:
        first = errors[0]
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        detail = f"Invalid value for '{field}': {first.get('msg')}" if field else detail
    return await handle_app_error(request, BadRequest(detail))


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="MentorHub",
        description="Mentorship platform backend — accounts, sessions and feedback",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Middleware stack ──────────────────────────────────────
    # Note: Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → RequestId → AccessLog → Security → UnexpectedError → handler

    from mentorhub.middleware.access_log import AccessLogMiddleware
    from mentorhub.middleware.errors import UnexpectedErrorMiddleware
    from mentorhub.middleware.request_id import RequestIdMiddleware
    from mentorhub.middleware.security import SecurityHeadersMiddleware

    app.add_middleware(UnexpectedErrorMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware, exclude_paths=("/api/test",))
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(MentorHubError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: mentorhub.main:app)
app = create_app()
