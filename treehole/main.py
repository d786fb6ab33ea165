"""
Treehole API - FastAPI Application
Anonymous message board: JSON API plus the static browser client
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from treehole.api import messages
from treehole.core.config import Settings, settings as default_settings
from treehole.core.database import Database
from treehole.core.exceptions import TreeholeError
from treehole.core.logging_config import setup_logging
from treehole.schemas.common import HealthResponse
from treehole.services.message_service import MessageService
from treehole.utils.responses import error_response, format_validation_errors

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def register_exception_handlers(app: FastAPI) -> None:
    """Map every failure onto the {ok: false, error, detail} envelope"""

    @app.exception_handler(TreeholeError)
    async def treehole_error_handler(request: Request, exc: TreeholeError):
        return error_response(exc.message, detail=exc.detail, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        detail = format_validation_errors(exc.errors())
        logger.info(f"Rejected {request.method} {request.url.path}: {detail}")
        return error_response("Invalid request", detail=detail, status_code=400)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc
        )
        return error_response(
            "Internal Server Error",
            detail="Please try again later",
            status_code=500
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application with its own store handle and services

    Args:
        settings: Configuration; defaults to the environment-derived settings

    Returns:
        Configured FastAPI instance
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    database = Database(settings.DATABASE_URL, timeout=settings.DB_TIMEOUT, echo=settings.DEBUG)
    message_service = MessageService(database, time_format=settings.TIME_FORMAT)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Prepare the schema on startup, release connections on shutdown"""
        database.init_schema()
        logger.info(f"{settings.APP_NAME} ready at {settings.PATH_PREFIX}/")
        yield
        database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Anonymous message board API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.message_service = message_service

    register_exception_handlers(app)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", include_in_schema=False)
    async def root():
        """Send browsers to the client page"""
        return RedirectResponse(url=f"{settings.PATH_PREFIX}/")

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "environment": settings.APP_ENV
        }

    @app.get("/health/db", tags=["Health"])
    def db_health_check(request: Request):
        """Database connection health check"""
        result = {"connection_test": False, "error": None}
        try:
            result["connection_test"] = request.app.state.database.ping()
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            result["error"] = str(e)
        return result

    app.include_router(messages.router, prefix=settings.api_prefix, tags=["Messages"])

    # Mounted last so the API routes above take precedence under the prefix
    app.mount(settings.PATH_PREFIX, StaticFiles(directory=STATIC_DIR, html=True), name="static")

    return app


def run() -> None:
    """Serve the app with uvicorn using the environment settings"""
    import uvicorn
    uvicorn.run(
        create_app(),
        host=default_settings.HOST,
        port=default_settings.PORT,
    )


if __name__ == "__main__":
    run()
