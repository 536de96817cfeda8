"""Unit tests for LocalFileStorage — active/backup placement."""

from pathlib import Path

import pytest

from app.domain.exceptions import StorageIOError
from app.domain.naming import StoredNameGenerator
from app.infrastructure.storage import local_file_storage
from app.infrastructure.storage.local_file_storage import LocalFileStorage


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(
        upload_dir=str(tmp_path / "uploads"),
        backup_dir=str(tmp_path / "uploads" / "backup"),
    )


def test_creates_both_areas(tmp_path):
    LocalFileStorage(upload_dir=str(tmp_path / "a"), backup_dir=str(tmp_path / "b"))
    assert (tmp_path / "a").is_dir()
    assert (tmp_path / "b").is_dir()


async def test_place_writes_prefixed_file(storage):
    stored = await storage.place(b"glTF-binary", "my bridge.glb")

    assert stored.filename.endswith("-my_bridge.glb")
    assert stored.filename.split("-", 1)[0].isdigit()
    assert stored.file_size == 11
    assert Path(stored.stored_path).read_bytes() == b"glTF-binary"
    assert storage.exists_active(stored.filename)


async def test_place_same_name_twice_is_unique(storage):
    first = await storage.place(b"one", "model.glb")
    second = await storage.place(b"two", "model.glb")

    assert first.filename != second.filename
    assert storage.active_path(first.filename).read_bytes() == b"one"
    assert storage.active_path(second.filename).read_bytes() == b"two"


async def test_place_never_overwrites_leftover_file(tmp_path):
    gen = StoredNameGenerator(clock=lambda: 5)
    storage = LocalFileStorage(
        upload_dir=str(tmp_path / "uploads"),
        backup_dir=str(tmp_path / "backup"),
        name_generator=gen,
    )
    (tmp_path / "uploads" / "5-a.glb").write_bytes(b"orphan")

    stored = await storage.place(b"new", "a.glb")

    assert stored.filename == "6-a.glb"
    assert (tmp_path / "uploads" / "5-a.glb").read_bytes() == b"orphan"


async def test_relocate_moves_file_to_backup(storage):
    stored = await storage.place(b"data", "model.glb")

    moved = await storage.relocate_to_backup(stored.filename)

    assert moved is True
    assert not storage.exists_active(stored.filename)
    assert storage.exists_backup(stored.filename)
    assert storage.backup_path(stored.filename).read_bytes() == b"data"


async def test_relocate_missing_file_is_not_an_error(storage):
    assert await storage.relocate_to_backup("123-ghost.glb") is False


async def test_relocate_rename_failure_raises_storage_error(storage, monkeypatch):
    stored = await storage.place(b"data", "model.glb")

    def boom(src, dst):
        raise OSError("device busy")

    monkeypatch.setattr(local_file_storage.os, "replace", boom)

    with pytest.raises(StorageIOError):
        await storage.relocate_to_backup(stored.filename)
    assert storage.exists_active(stored.filename)


@pytest.mark.parametrize("name", ["../escape.glb", "sub/dir.glb", "..", ""])
def test_paths_reject_names_outside_the_areas(storage, name):
    with pytest.raises(ValueError):
        storage.active_path(name)
    with pytest.raises(ValueError):
        storage.backup_path(name)
