from .upload_validator import UploadValidator
from .registry_service import RegistryService
from .lookup_service import LookupService
from .model_upload_service import IngestResult, ModelUploadService

__all__ = [
    "UploadValidator",
    "RegistryService",
    "LookupService",
    "IngestResult",
    "ModelUploadService",
]
