from .model_file_store import ModelFileStore, StoredFile

__all__ = [
    "ModelFileStore",
    "StoredFile",
]
