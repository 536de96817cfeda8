"""Abstract file store interface (port) for uploaded model files."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass
class StoredFile:
    """Result of storing a single model file on disk."""

    stored_path: str
    filename: str
    original_name: str
    file_size: int


class ModelFileStore(ABC):
    """Port for physical placement of model files in an active and a backup area."""

    @abstractmethod
    async def place(self, content: bytes, suggested_name: str) -> StoredFile:
        """Write ``content`` into the active area under a unique derived name."""
        ...

    @abstractmethod
    async def relocate_to_backup(self, stored_name: str) -> bool:
        """Move a file from the active to the backup area.

        Returns False when the file was not in the active area.
        """
        ...

    @abstractmethod
    def exists_active(self, stored_name: str) -> bool:
        ...

    @abstractmethod
    def exists_backup(self, stored_name: str) -> bool:
        ...

    @abstractmethod
    def active_path(self, stored_name: str) -> Path:
        ...

    @abstractmethod
    def backup_path(self, stored_name: str) -> Path:
        ...
