"""
Main FastAPI application entry point.
Configures the application, middleware, error handlers and routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlmodel import Session

from portfolio_api.api.routes import about, auth, contact, experience, health, home, projects, skills
from portfolio_api.core.config import settings
from portfolio_api.core.exceptions import (
    AppError,
    AuthenticationError,
    ConflictError,
    UnexpectedError,
    ValidationError,
)
from portfolio_api.core.logging import get_logger, setup_logging
from portfolio_api.db.session import create_db_and_tables, engine
from portfolio_api.models.user import UserRole
from portfolio_api.services.user_service import UserService

setup_logging()
logger = get_logger(__name__)


def bootstrap_admin() -> None:
    """Create the first admin from settings if that email is not registered yet."""
    with Session(engine) as session:
        email = UserService.normalize_email(settings.FIRST_SUPERUSER_EMAIL)
        if UserService.get_by_email(session, email):
            return
        logger.info("Creating first admin user...")
        try:
            UserService.register(
                session,
                name=settings.FIRST_SUPERUSER_NAME,
                email=email,
                password=settings.FIRST_SUPERUSER_PASSWORD,
                role=UserRole.ADMIN,
            )
        except (ValidationError, ConflictError) as e:
            logger.error(f"Failed to create first admin: {e.message}")
            return
        logger.info(f"First admin created: {email}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Runs startup and shutdown logic.
    """
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")

    logger.info("Creating database tables...")
    create_db_and_tables()

    if not settings.DISABLE_BOOTSTRAP_USERS:
        bootstrap_admin()
    else:
        logger.info("User bootstrapping disabled (DISABLE_BOOTSTRAP_USERS=true)")

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["authorization", "content-type", "accept"],
)


@app.exception_handler(AppError)
def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map expected errors to their fixed status and message."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


@app.exception_handler(RequestValidationError)
def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters are client errors (400)."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": ValidationError.default_message, "errors": jsonable_encoder(errors)},
    )


@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the full error server-side; the client only sees a generic message."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    error = UnexpectedError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(home.router, prefix=settings.API_PREFIX)
app.include_router(about.router, prefix=settings.API_PREFIX)
app.include_router(projects.router, prefix=settings.API_PREFIX)
app.include_router(skills.router, prefix=settings.API_PREFIX)
app.include_router(experience.router, prefix=settings.API_PREFIX)
app.include_router(contact.router, prefix=settings.API_PREFIX)

# Serve uploaded images and resumes publicly
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
