"""Unit tests for the LookupService — viewer resolution by client name."""

import pytest

from app.application.services.lookup_service import LookupService
from app.application.services.registry_service import RegistryService
from app.domain.exceptions import ClientNotFoundError, FileMissingError, ProjectNotFoundError
from app.infrastructure.storage.local_file_storage import LocalFileStorage


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(
        upload_dir=str(tmp_path / "uploads"),
        backup_dir=str(tmp_path / "uploads" / "backup"),
    )


@pytest.fixture
def registry(storage):
    return RegistryService(storage)


@pytest.fixture
def lookup(registry, storage):
    return LookupService(registry, storage, public_prefix="/uploads/")


async def test_acme_lifecycle(registry, storage, lookup):
    """Create → link → resolve → soft delete → not found."""
    client_id = await registry.create_client("Acme Co")
    assert client_id == "acme-co"

    stored = await storage.place(b"glTF", "tower.glb")
    await registry.link_project("acme-co", "p1", stored.filename, "Tower")
    [summary] = await registry.list_clients()
    assert (summary.id, summary.project_count) == ("acme-co", 1)

    resolved = await lookup.resolve("acme co", "p1")
    assert resolved.client_name == "Acme Co"
    assert resolved.project_id == "p1"
    assert resolved.description == "Tower"
    assert resolved.url == f"/uploads/{stored.filename}"
    assert resolved.file_path == storage.active_path(stored.filename)

    assert await registry.delete_project("acme-co", "p1") == 0
    assert not storage.exists_active(stored.filename)
    assert storage.exists_backup(stored.filename)

    with pytest.raises(ProjectNotFoundError):
        await lookup.resolve("acme co", "p1")


async def test_unknown_client_name(lookup):
    with pytest.raises(ClientNotFoundError):
        await lookup.resolve("Nobody", "p1")


async def test_unknown_project(registry, lookup):
    await registry.create_client("Acme Co")
    with pytest.raises(ProjectNotFoundError) as exc_info:
        await lookup.resolve("ACME CO", "p9")
    assert exc_info.value.client_ref == "Acme Co"


async def test_file_removed_behind_registry_is_detected(registry, storage, lookup):
    stored = await storage.place(b"glTF", "tower.glb")
    await registry.link_project("acme", "p1", stored.filename)
    assert (await lookup.resolve("Acme", "p1")).url.endswith(stored.filename)

    storage.active_path(stored.filename).unlink()

    with pytest.raises(FileMissingError):
        await lookup.resolve("Acme", "p1")
