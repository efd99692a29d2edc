"""
FastAPI application entry point for the portfolio CMS.

Serves the authentication API, the CMS content API and the guarded CMS pages.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api import api_router
from app.core.config import settings
from app.core.dependencies import get_auth_config
from app.core.session import CMSGuardMiddleware
from app.web import pages

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.environment})")
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_application() -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging(settings.log_level)

    # Refuse to start in production without a signing secret
    get_auth_config()

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## Portfolio CMS

        Content-management backend for a personal portfolio site.

        - **Authentication**: single admin account, signed session cookie
        - **CMS API**: public reads, admin-only writes
        - **CMS pages**: `/cms/*` redirects to `/cms/login` without a session
        """,
        version=settings.app_version,
        debug=settings.debug,
        openapi_url=f"{settings.api_prefix}/openapi.json",
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        lifespan=lifespan,
    )

    @app.exception_handler(RequestValidationError)
    async def login_validation_handler(request: Request, exc: RequestValidationError):
        """Keep the {success, message} envelope for unparseable login bodies."""
        if request.url.path == f"{settings.api_prefix}/auth/login":
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"success": False, "message": "Username and password are required"},
            )
        return await request_validation_exception_handler(request, exc)

    app.add_middleware(CMSGuardMiddleware)

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(pages.router)

    return app


# Create application instance
app = create_application()


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": f"{settings.api_prefix}/docs",
        "openapi": f"{settings.api_prefix}/openapi.json",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="localhost", port=8000, reload=settings.debug)
