"""
ASGI entry point.
Builds the FastAPI app: logging, CORS, the error boundary and the API routers.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskmanager import __version__
from taskmanager.config import settings
from taskmanager.infrastructure.db.database import create_all_tables
from taskmanager.infrastructure.web.middleware.error_handler import register_exception_handlers
from taskmanager.infrastructure.web.routers import attachments, auth, comments, projects, tasks

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# (router, path below the API prefix, OpenAPI tag)
ROUTERS = (
    (auth.router, "/auth", "Authentication"),
    (tasks.router, "/tasks", "Tasks"),
    (comments.router, "", "Comments"),
    (attachments.router, "", "Attachments"),
    (projects.router, "/projects", "Projects"),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and the upload directory before serving."""
    logger.info(f"{settings.api_title} {settings.api_version} starting ({settings.environment})")

    create_all_tables()
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    logger.info(f"Attachments stored under {settings.upload_dir}")

    yield

    logger.info(f"{settings.api_title} stopped")


def create_application() -> FastAPI:
    """Application factory."""
    docs_enabled = settings.debug
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if docs_enabled else None,
        redoc_url=f"{settings.api_prefix}/redoc" if docs_enabled else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if docs_enabled else None,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router, path, tag in ROUTERS:
        app.include_router(router, prefix=f"{settings.api_prefix}{path}", tags=[tag])

    @app.get("/", include_in_schema=False)
    async def index() -> Dict[str, Any]:
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "api": settings.api_prefix,
            "health": f"{settings.api_prefix}/health"
        }

    @app.get(f"{settings.api_prefix}/health", tags=["Health"])
    async def health() -> Dict[str, Any]:
        """Liveness check."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": __version__
        }

    return app


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "taskmanager.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
