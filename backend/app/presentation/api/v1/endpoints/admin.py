"""Admin endpoints — model upload, client management and soft deletes."""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.application.schemas import (
    ClientCreate,
    ClientCreatedResponse,
    ClientListItem,
    ClientListResponse,
    MessageResponse,
    ProjectDeletedResponse,
    ProjectSchema,
    UploadResponse,
)
from app.application.services import ModelUploadService, RegistryService
from app.domain.entities import ClientSummary
from app.domain.exceptions import (
    ClientNotFoundError,
    DuplicateClientError,
    InvalidClientNameError,
    MissingIdentifierError,
    ProjectNotFoundError,
    SizeLimitExceededError,
    StorageIOError,
    UploadValidationError,
)
from app.infrastructure.dependencies import get_model_upload_service, get_registry_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


def _to_list_item(summary: ClientSummary) -> ClientListItem:
    return ClientListItem(
        id=summary.id,
        name=summary.name,
        contact=summary.contact,
        projects={
            project_id: ProjectSchema(
                filename=project.filename,
                description=project.description,
                uploaded=project.uploaded_date,
            )
            for project_id, project in summary.projects.items()
        },
        project_count=summary.project_count,
    )


@router.post("/upload", response_model=UploadResponse)
async def upload_model(
    model: UploadFile | None = File(None, description="Binary glTF (.glb) model"),
    client_id: str | None = Form(None, alias="clientId"),
    project_id: str | None = Form(None, alias="projectId"),
    description: str | None = Form(None),
    service: ModelUploadService = Depends(get_model_upload_service),
) -> UploadResponse:
    """Upload a model and link it to ``clientId/projectId``."""
    if model is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded or invalid file type",
        )

    try:
        result = await service.ingest(
            model,
            filename=model.filename,
            content_type=model.content_type,
            client_id=client_id,
            project_id=project_id,
            description=description,
            declared_size=model.size,
        )
    except SizeLimitExceededError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except (UploadValidationError, MissingIdentifierError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageIOError:
        logger.exception("Upload error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process upload",
        )
    finally:
        await model.close()

    return UploadResponse(
        message="Model uploaded and linked successfully",
        filename=result.filename,
        url=result.url,
        client_id=result.client_id,
        project_id=result.project_id,
    )


@router.get("/clients", response_model=ClientListResponse)
async def list_clients(
    registry: RegistryService = Depends(get_registry_service),
) -> ClientListResponse:
    """List every client with its projects."""
    summaries = await registry.list_clients()
    return ClientListResponse(clients=[_to_list_item(s) for s in summaries])


@router.post("/client", response_model=ClientCreatedResponse)
async def create_client(
    data: ClientCreate,
    registry: RegistryService = Depends(get_registry_service),
) -> ClientCreatedResponse:
    """Create a client without any projects."""
    try:
        client_id = await registry.create_client(data.name, data.contact)
    except InvalidClientNameError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateClientError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Client already exists")
    return ClientCreatedResponse(message="Client added successfully", client_id=client_id)


@router.delete(
    "/client/{client_id}/project/{project_id}", response_model=ProjectDeletedResponse
)
async def delete_project(
    client_id: str,
    project_id: str,
    registry: RegistryService = Depends(get_registry_service),
) -> ProjectDeletedResponse:
    """Soft-delete a project: its model moves to the backup area."""
    try:
        remaining = await registry.delete_project(client_id, project_id)
    except ClientNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    except ProjectNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return ProjectDeletedResponse(
        message=f"Project {project_id} moved to backup successfully",
        remaining_projects=remaining,
    )


@router.delete("/client/{client_id}", response_model=MessageResponse)
async def delete_client(
    client_id: str,
    registry: RegistryService = Depends(get_registry_service),
) -> MessageResponse:
    """Soft-delete a client and all of its projects."""
    try:
        await registry.delete_client(client_id)
    except ClientNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Client not found")
    return MessageResponse(
        message=f"Client {client_id} and all projects moved to backup successfully"
    )
