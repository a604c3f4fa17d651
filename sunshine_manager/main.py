"""
Main entry point for the Sunshine Manager application.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.cors import CORSMiddleware

from .config import HOST, LOG_LEVEL, PORT, STATIC_DIR, SUNSHINE_APPS_JSON
from .exceptions import ManagerError
from .games import games_router
from .launcher import launcher_router

# Set up logging
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown."""
    logger.info(f"Starting Sunshine Manager, editing {SUNSHINE_APPS_JSON}")
    yield
    logger.info("Shutting down Sunshine Manager...")


async def manager_error_handler(request: Request, exc: ManagerError) -> PlainTextResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return PlainTextResponse(str(exc), status_code=exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    # Malformed bodies are bad requests, reported as text like every other error.
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.warning(f"{request.method} {request.url.path} rejected: {problems}")
    return PlainTextResponse(f"Invalid request: {problems}", status_code=400)


def create_app(static_dir: str = STATIC_DIR) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Sunshine Manager",
        description="Manage Sunshine game entries and launch streaming companions",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ManagerError, manager_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(games_router, prefix="/api", tags=["Games"])
    app.include_router(launcher_router, tags=["Launcher"])

    # Mounted last so the API routes take precedence over the web UI.
    if Path(static_dir).is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info(f"Static directory {static_dir} not found, web UI disabled")

    return app


def main():
    """Main entry point for running the application."""
    import uvicorn

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=HOST, port=PORT)


# Export the app for uvicorn
app = create_app()

if __name__ == "__main__":
    main()
