"""Unit tests for the ModelUploadService ingestion pipeline."""

from io import BytesIO

import pytest

from app.application.services.model_upload_service import ModelUploadService
from app.application.services.registry_service import RegistryService
from app.application.services.upload_validator import UploadValidator
from app.domain.exceptions import (
    MissingIdentifierError,
    SizeLimitExceededError,
    UploadValidationError,
)
from app.infrastructure.storage.local_file_storage import LocalFileStorage


class AsyncBytes:
    def __init__(self, data: bytes):
        self._buffer = BytesIO(data)

    async def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(
        upload_dir=str(tmp_path / "uploads"),
        backup_dir=str(tmp_path / "uploads" / "backup"),
    )


@pytest.fixture
def registry(storage):
    return RegistryService(storage)


def _service(storage, registry, max_bytes: int = 1024) -> ModelUploadService:
    return ModelUploadService(
        validator=UploadValidator(max_bytes=max_bytes),
        file_store=storage,
        registry=registry,
        public_prefix="/uploads",
        chunk_size=64,
    )


def _active_files(storage: LocalFileStorage) -> list[str]:
    return sorted(p.name for p in storage.upload_dir.iterdir() if p.is_file())


async def test_ingest_stores_and_links(storage, registry):
    service = _service(storage, registry)

    result = await service.ingest(
        AsyncBytes(b"glTF-bytes"),
        filename="Tower v2.glb",
        content_type="model/gltf-binary",
        client_id="acme-co",
        project_id="p1",
        description="Tower",
    )

    assert result.filename.endswith("-Tower_v2.glb")
    assert result.url == f"/uploads/{result.filename}"
    assert (result.client_id, result.project_id) == ("acme-co", "p1")
    assert storage.active_path(result.filename).read_bytes() == b"glTF-bytes"

    client = await registry.get_client("acme-co")
    assert client.name == "Acme Co"
    assert client.projects["p1"].filename == result.filename
    assert client.projects["p1"].description == "Tower"


async def test_rejected_type_writes_nothing(storage, registry):
    service = _service(storage, registry)

    with pytest.raises(UploadValidationError, match="Only .glb files are allowed"):
        await service.ingest(
            AsyncBytes(b"hello"),
            filename="model.txt",
            content_type="text/plain",
            client_id="acme",
            project_id="p1",
        )

    assert _active_files(storage) == []
    assert await registry.list_clients() == []


async def test_missing_identifiers_write_nothing(storage, registry):
    service = _service(storage, registry)

    with pytest.raises(MissingIdentifierError):
        await service.ingest(
            AsyncBytes(b"glTF"),
            filename="model.glb",
            content_type="model/gltf-binary",
            client_id="  ",
            project_id="p1",
        )

    assert _active_files(storage) == []


async def test_oversized_body_writes_nothing(storage, registry):
    service = _service(storage, registry, max_bytes=100)

    with pytest.raises(SizeLimitExceededError):
        await service.ingest(
            AsyncBytes(b"x" * 500),
            filename="big.glb",
            content_type="model/gltf-binary",
            client_id="acme",
            project_id="p1",
        )

    assert _active_files(storage) == []


async def test_same_original_name_in_succession_is_unique(storage, registry):
    service = _service(storage, registry)

    first = await service.ingest(
        AsyncBytes(b"1"), "same.glb", "model/gltf-binary", "acme", "p1"
    )
    second = await service.ingest(
        AsyncBytes(b"2"), "same.glb", "model/gltf-binary", "acme", "p2"
    )

    assert first.filename != second.filename
    assert _active_files(storage) == sorted([first.filename, second.filename])
