"""Gatekeeper for incoming model uploads — type sniffing and size ceiling."""

from collections.abc import Iterable
from typing import Protocol

from app.domain.exceptions import SizeLimitExceededError, UploadValidationError

DEFAULT_MAX_BYTES = 100 * 1024 * 1024
DEFAULT_CHUNK_BYTES = 1024 * 1024


class AsyncReadable(Protocol):
    async def read(self, size: int = -1) -> bytes: ...


class UploadValidator:
    """Accepts or rejects a model file before it reaches the file store.

    A file passes when its declared MIME type is a known binary model type
    *or* its name ends in an allowed extension.
    """

    def __init__(
        self,
        max_bytes: int = DEFAULT_MAX_BYTES,
        allowed_extensions: Iterable[str] = (".glb",),
        allowed_mime_types: Iterable[str] = ("model/gltf-binary",),
    ):
        self._max_bytes = max_bytes
        self._extensions = tuple(ext.lower() for ext in allowed_extensions)
        self._mime_types = frozenset(mt.lower() for mt in allowed_mime_types)

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @property
    def rejection_message(self) -> str:
        return f"Only {', '.join(self._extensions)} files are allowed"

    def is_model_file(self, filename: str | None, content_type: str | None) -> bool:
        mime = (content_type or "").split(";", 1)[0].strip().lower()
        if mime in self._mime_types:
            return True
        return bool(filename) and filename.lower().endswith(self._extensions)

    def validate(
        self,
        filename: str | None,
        content_type: str | None,
        declared_size: int | None = None,
    ) -> None:
        """Raise if the descriptor is not an acceptable model upload."""
        if not self.is_model_file(filename, content_type):
            raise UploadValidationError(self.rejection_message)
        if declared_size is not None and declared_size > self._max_bytes:
            raise SizeLimitExceededError(self._max_bytes)

    async def read_within_limit(
        self, stream: AsyncReadable, chunk_size: int = DEFAULT_CHUNK_BYTES
    ) -> bytes:
        """Read ``stream`` in chunks, failing as soon as it passes the ceiling."""
        chunks: list[bytes] = []
        total = 0
        while True:
            chunk = await stream.read(chunk_size)
            if not chunk:
                break
            total += len(chunk)
            if total > self._max_bytes:
                raise SizeLimitExceededError(self._max_bytes)
            chunks.append(chunk)

        if total == 0:
            raise UploadValidationError("Uploaded file is empty")
        return b"".join(chunks)
