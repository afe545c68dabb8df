"""
FastAPI entrypoint for the Exercise Tracker application.
"""
import logging
import os
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from exercise_tracker.core.config import Settings, settings as default_settings
from exercise_tracker.core.exceptions import ExerciseTrackerException, NotFoundError
from exercise_tracker.core.logging import configure_logging, log_requests
from exercise_tracker.db.session import create_db_engine, create_session_factory, init_db
from exercise_tracker.api.router import api_router

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _text_error(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def register_exception_handlers(app: FastAPI):
    """Funnel every failure into a plain-text response."""

    @app.exception_handler(ExerciseTrackerException)
    async def application_exception_handler(request: Request, exc: ExerciseTrackerException):
        """Handle custom application exceptions."""
        logger.warning(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}")
        return _text_error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Report the first validation problem as a bad request."""
        errors = exc.errors()
        message = errors[0]["msg"] if errors else "Bad Request"
        logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
        return _text_error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Unknown routes and unsupported methods are both reported as not found."""
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _text_error(status.HTTP_404_NOT_FOUND, NotFoundError.default_message)
        return _text_error(exc.status_code, str(exc.detail) or INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}", exc_info=exc)
        return _text_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
        return _text_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and its context.

    The database engine and session factory are created here, stored on
    ``app.state`` and reached by handlers through the ``get_db`` dependency.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Exercise tracking API: users, exercise entries and filtered logs",
        version="1.0.0",
        debug=settings.DEBUG
    )

    engine = create_db_engine(settings)
    init_db(engine)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    # Mount static assets if the directory is present
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/public", StaticFiles(directory=settings.STATIC_DIR), name="public")

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def index():
        """Serve the static index page."""
        index_path = os.path.join(settings.VIEWS_DIR, "index.html")
        if not os.path.isfile(index_path):
            raise NotFoundError()
        return FileResponse(index_path, media_type="text/html")

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
