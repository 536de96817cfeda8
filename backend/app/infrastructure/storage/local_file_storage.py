"""Local filesystem storage for uploaded model files.

Storage layout:
    <upload_dir>/<token>-<original_name>    — active area, served to viewers
    <backup_dir>/<token>-<original_name>    — backup area, soft-deleted models
"""

import logging
import os
from pathlib import Path

from app.application.interfaces import ModelFileStore, StoredFile
from app.domain.exceptions import StorageIOError
from app.domain.naming import StoredNameGenerator, default_name_generator

logger = logging.getLogger(__name__)

# Attempts at finding a free name when a leftover file already holds one.
_MAX_NAME_ATTEMPTS = 5


class LocalFileStorage(ModelFileStore):
    """Infrastructure adapter for the active/backup model directories."""

    def __init__(
        self,
        upload_dir: str,
        backup_dir: str,
        name_generator: StoredNameGenerator | None = None,
    ):
        self._upload_dir = Path(upload_dir)
        self._backup_dir = Path(backup_dir)
        self._names = name_generator or default_name_generator
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        self._backup_dir.mkdir(parents=True, exist_ok=True)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    @property
    def backup_dir(self) -> Path:
        return self._backup_dir

    # ── Placement ───────────────────────────────────────────────────

    async def place(self, content: bytes, suggested_name: str) -> StoredFile:
        """Store a model in the active area as ``<token>-<normalized name>``.

        Files are opened in exclusive mode so an existing file is never
        overwritten; on a clash a fresh token is drawn.
        """
        for _ in range(_MAX_NAME_ATTEMPTS):
            stored_name = self._names.stored_name(suggested_name)
            dest_path = self._upload_dir / stored_name
            try:
                with open(dest_path, "xb") as handle:
                    handle.write(content)
            except FileExistsError:
                logger.warning("Stored name already taken, retrying: %s", stored_name)
                continue
            except OSError as exc:
                dest_path.unlink(missing_ok=True)
                raise StorageIOError("write", str(dest_path), exc) from exc

            logger.info("Stored model: %s (%d bytes)", dest_path, len(content))
            return StoredFile(
                stored_path=str(dest_path),
                filename=stored_name,
                original_name=suggested_name,
                file_size=len(content),
            )

        raise StorageIOError("write", str(self._upload_dir / suggested_name))

    # ── Soft delete ─────────────────────────────────────────────────

    async def relocate_to_backup(self, stored_name: str) -> bool:
        """Move a model from the active area to the backup area.

        Returns True if a move happened, False if the file was already gone.
        """
        source = self.active_path(stored_name)
        target = self.backup_path(stored_name)
        if not source.is_file():
            logger.warning("File not found for move: %s", source)
            return False

        try:
            os.replace(source, target)
        except OSError as exc:
            raise StorageIOError("rename", str(source), exc) from exc

        logger.info("Moved to backup: %s → %s", source, target)
        return True

    # ── Queries ─────────────────────────────────────────────────────

    def active_path(self, stored_name: str) -> Path:
        return self._upload_dir / _checked_name(stored_name)

    def backup_path(self, stored_name: str) -> Path:
        return self._backup_dir / _checked_name(stored_name)

    def exists_active(self, stored_name: str) -> bool:
        return self.active_path(stored_name).is_file()

    def exists_backup(self, stored_name: str) -> bool:
        return self.backup_path(stored_name).is_file()


def _checked_name(stored_name: str) -> str:
    """Reject names that would resolve outside the flat storage areas."""
    if stored_name in {"", ".", ".."} or "/" in stored_name or "\\" in stored_name:
        raise ValueError(f"Invalid stored filename: {stored_name!r}")
    return stored_name
