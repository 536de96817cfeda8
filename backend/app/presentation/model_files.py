"""Serves model files from the active area. Backed-up models are never served."""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from app.config import get_settings
from app.infrastructure.dependencies import get_file_storage
from app.infrastructure.storage.local_file_storage import LocalFileStorage

router = APIRouter(prefix=get_settings().public_upload_prefix, tags=["Model files"])


@router.get("/{filename}")
async def download_model(
    filename: str,
    storage: LocalFileStorage = Depends(get_file_storage),
) -> FileResponse:
    """Stream a stored model to the viewer."""
    try:
        exists = storage.exists_active(filename)
    except ValueError:
        exists = False
    if not exists:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Model file not found")

    return FileResponse(
        path=storage.active_path(filename),
        filename=filename,
        media_type="model/gltf-binary",
    )
