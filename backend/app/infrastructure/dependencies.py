"""FastAPI dependency injection — wires infrastructure to application layer.

The file store and the registry are process-wide singletons: the registry is
the only index of client/project associations and must be shared by every
request.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from app.config import get_settings
from app.application.services import (
    LookupService,
    ModelUploadService,
    RegistryService,
    UploadValidator,
)
from app.infrastructure.storage.local_file_storage import LocalFileStorage


@lru_cache
def get_file_storage() -> LocalFileStorage:
    """Shared store for the active and backup model directories."""
    settings = get_settings()
    return LocalFileStorage(upload_dir=settings.upload_dir, backup_dir=settings.backup_dir)


@lru_cache
def get_registry_service() -> RegistryService:
    """The single in-memory registry for this process."""
    return RegistryService(get_file_storage())


@lru_cache
def get_upload_validator() -> UploadValidator:
    settings = get_settings()
    return UploadValidator(
        max_bytes=settings.max_upload_bytes,
        allowed_extensions=settings.allowed_model_extensions,
        allowed_mime_types=settings.allowed_model_mime_types,
    )


async def get_model_upload_service(
    validator: UploadValidator = Depends(get_upload_validator),
    storage: LocalFileStorage = Depends(get_file_storage),
    registry: RegistryService = Depends(get_registry_service),
) -> AsyncGenerator[ModelUploadService, None]:
    """Provides a ModelUploadService bound to the shared store and registry."""
    settings = get_settings()
    yield ModelUploadService(
        validator=validator,
        file_store=storage,
        registry=registry,
        public_prefix=settings.public_upload_prefix,
        chunk_size=settings.upload_chunk_bytes,
    )


async def get_lookup_service(
    storage: LocalFileStorage = Depends(get_file_storage),
    registry: RegistryService = Depends(get_registry_service),
) -> AsyncGenerator[LookupService, None]:
    """Provides a LookupService for viewer requests."""
    settings = get_settings()
    yield LookupService(
        registry=registry,
        file_store=storage,
        public_prefix=settings.public_upload_prefix,
    )
