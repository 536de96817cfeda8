"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from datetime import date

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.domain.entities import Client, Project
from app.domain.exceptions import DuplicateClientError
from app.infrastructure.dependencies import get_file_storage, get_registry_service
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.router import router as api_router
from app.presentation.error_handlers import register_error_handlers
from app.presentation.model_files import router as model_files_router
from app.presentation.upload_limit import enforce_upload_content_length

logger = logging.getLogger(__name__)

DEMO_CLIENTS = (
    Client(
        id="highway-projects",
        name="Highway Projects Inc.",
        contact="john@highwayproj.com",
        projects={
            "highway001": Project(
                filename="1758121257346-4650_highway_a1a_revised_7.24.glb",
                description="A1A Highway Revision 7.24",
                uploaded_date=date(2024, 1, 15),
            ),
        },
    ),
)


async def _seed_demo_clients() -> None:
    """Load the demo client into the registry.

    The registry is volatile, so this runs on every startup when enabled.
    A missing demo model file is reported, not fatal.
    """
    registry = get_registry_service()
    storage = get_file_storage()
    try:
        count = await registry.seed(DEMO_CLIENTS)
    except DuplicateClientError as exc:
        logger.warning("Could not seed demo clients: %s", exc)
        return

    logger.info("Seeded %d demo client(s)", count)
    for client in DEMO_CLIENTS:
        for project_id, project in client.projects.items():
            if not storage.exists_active(project.filename):
                logger.warning(
                    "Demo model for %s/%s is missing: %s",
                    client.id,
                    project_id,
                    storage.active_path(project.filename),
                )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create storage, seed demo data."""
    settings = get_settings()
    setup_logging()

    # Creates the active and backup directories if missing
    storage = get_file_storage()
    logger.info("Active area: %s | backup area: %s", storage.upload_dir, storage.backup_dir)

    if settings.seed_demo_data:
        await _seed_demo_clients()

    yield


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Must sit inside CORSMiddleware: size rejections carry CORS headers too
    app.middleware("http")(enforce_upload_content_length)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(api_router)
    app.include_router(model_files_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
