"""Unit tests for the UploadValidator."""

import pytest

from app.application.services.upload_validator import UploadValidator
from app.domain.exceptions import SizeLimitExceededError, UploadValidationError


class FakeStream:
    """Async reader over in-memory bytes that records how much was consumed."""

    def __init__(self, data: bytes):
        self._data = data
        self.consumed = 0

    async def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self._data) - self.consumed
        chunk = self._data[self.consumed : self.consumed + size]
        self.consumed += len(chunk)
        return chunk


@pytest.fixture
def validator() -> UploadValidator:
    return UploadValidator(max_bytes=1_000)


class TestValidate:
    def test_accepts_model_mime_type(self, validator):
        validator.validate("scan", "model/gltf-binary")

    def test_accepts_extension_with_generic_mime(self, validator):
        validator.validate("Bridge.GLB", "application/octet-stream")

    def test_rejects_text_file(self, validator):
        with pytest.raises(UploadValidationError, match="Only .glb files are allowed"):
            validator.validate("model.txt", "text/plain")

    def test_rejects_missing_name_and_type(self, validator):
        with pytest.raises(UploadValidationError):
            validator.validate(None, None)

    def test_rejects_declared_size_over_ceiling(self, validator):
        with pytest.raises(SizeLimitExceededError):
            validator.validate("model.glb", "model/gltf-binary", declared_size=1_001)

    def test_size_error_is_a_validation_error(self):
        assert issubclass(SizeLimitExceededError, UploadValidationError)


class TestReadWithinLimit:
    async def test_returns_full_body(self, validator):
        body = await validator.read_within_limit(FakeStream(b"x" * 900), chunk_size=100)
        assert body == b"x" * 900

    async def test_stops_reading_once_limit_is_passed(self, validator):
        stream = FakeStream(b"x" * 10_000)

        with pytest.raises(SizeLimitExceededError):
            await validator.read_within_limit(stream, chunk_size=100)

        assert stream.consumed < 10_000

    async def test_empty_body_is_rejected(self, validator):
        with pytest.raises(UploadValidationError, match="empty"):
            await validator.read_within_limit(FakeStream(b""))
