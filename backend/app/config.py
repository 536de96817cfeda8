from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Model Viewer Registry"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Model storage — active area and soft-delete backup area
    upload_dir: str = "uploads"
    backup_dir: str = "uploads/backup"
    public_upload_prefix: str = "/uploads"

    # Upload validation
    max_upload_size_mb: int = 100
    upload_chunk_size_kb: int = 1024
    upload_form_overhead_kb: int = 64        # Multipart framing allowed on top of the file
    allowed_model_extensions: list[str] = [".glb"]
    allowed_model_mime_types: list[str] = ["model/gltf-binary"]

    # Preload the demo client at startup
    seed_demo_data: bool = False

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # LocalFileStorage
    log_level_registry: str = "INFO"         # RegistryService / LookupService
    log_level_pipeline: str = "INFO"         # ModelUploadService pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def upload_request_limit_bytes(self) -> int:
        return self.max_upload_bytes + self.upload_form_overhead_kb * 1024

    @property
    def upload_chunk_bytes(self) -> int:
        return self.upload_chunk_size_kb * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
