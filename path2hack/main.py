"""
Path2Hack Backend: FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers;
       uvicorn serves the module-level `app` (uvicorn path2hack.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                       FastAPI App                        │
    │                                                          │
    │  Middleware: Request ID → Access Log → GZip → CORS       │
    │                                                          │
    │  Routes:                                                 │
    │   POST /api/register              POST /api/projectIdea  │
    │   POST /api/githubProjectIdea     POST /api/createProject│
    │   POST /api/scrapeAndReviewProject       GET /health     │
    │                                                          │
    │  Exception Handlers:                                     │
    │   ConflictError→400 │ Path2HackError, invalid body, *→500│
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration check, upload directory
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from path2hack import __version__
from path2hack.config import settings
from path2hack.database import dispose_engine
from path2hack.exceptions import ConflictError, Path2HackError
from path2hack.middleware.logging import RequestLoggingMiddleware
from path2hack.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from path2hack.routes import health, ideas, projects, review, users
from path2hack.services.idea_service import GITHUB_IDEA_ERROR, PROJECT_IDEA_ERROR
from path2hack.services.project_service import CREATE_PROJECT_ERROR
from path2hack.services.review_service import REVIEW_ERROR
from path2hack.services.user_service import REGISTER_ERROR

logger = logging.getLogger(__name__)

# Public failure message of each API route, also used when its body is unusable
ROUTE_FAILURE_MESSAGES = {
    "/api/register": REGISTER_ERROR,
    "/api/githubProjectIdea": GITHUB_IDEA_ERROR,
    "/api/projectIdea": PROJECT_IDEA_ERROR,
    "/api/scrapeAndReviewProject": REVIEW_ERROR,
    "/api/createProject": CREATE_PROJECT_ERROR,
}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout
    (containers capture stdout).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party libraries that log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup runs before the listener accepts traffic; shutdown after it stops.

    A missing API key is logged but not fatal: registration and project
    submission still work without the model.
    """
    setup_logging()
    logger.info("Path2Hack Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Upload directory: %s", upload_dir.resolve())

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Path2Hack Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to `{"error": <message>, "request_id": <id>}` responses.

    Handler hierarchy:
        ConflictError           → 400, logged at INFO (a normal business outcome)
        Path2HackError (base)   → exc.status_code, context logged server-side
        RequestValidationError  → 500 with the route's own failure message
        Exception (fallback)    → 500, stack trace logged server-side

    Responses never include the context dict, stack traces or upstream errors.
    """

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        rid = request_id_var.get("")
        logger.info("[%s] Conflict: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "request_id": rid},
        )

    @app.exception_handler(Path2HackError)
    async def handle_app_error(request: Request, exc: Path2HackError):
        rid = request_id_var.get("")
        cause = exc.__cause__
        logger.error(
            "[%s] %s: %s | Context: %s | Cause: %r",
            rid,
            type(exc).__name__,
            exc.message,
            exc.context,
            cause,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "request_id": rid},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_request(request: Request, exc: RequestValidationError):
        # A body the handler cannot unpack fails like any other step of that route
        message = ROUTE_FAILURE_MESSAGES.get(request.url.path)
        if message is None:
            return await request_validation_exception_handler(request, exc)

        rid = request_id_var.get("")
        logger.warning(
            "[%s] Invalid request to %s: %s",
            rid,
            request.url.path,
            [".".join(str(part) for part in err["loc"]) for err in exc.errors()],
        )
        return JSONResponse(
            status_code=500,
            content={"error": message, "request_id": rid},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        # Served by the outermost middleware, after RequestIDMiddleware has unwound
        headers = {REQUEST_ID_HEADER: rid} if rid else None
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred", "request_id": rid},
            headers=headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Path2Hack API",
        description=(
            "Backend for the Path2Hack hackathon portal: user registration, project "
            "submissions, AI project ideas and AI reviews of published project pages."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(ideas.router)
    app.include_router(review.router)
    app.include_router(projects.router)
    app.include_router(health.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "path2hack.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
    )
