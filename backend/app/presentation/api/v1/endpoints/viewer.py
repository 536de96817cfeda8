"""Viewer endpoint — resolve a client name and project to a model URL."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import ResolvedModelResponse
from app.application.services import LookupService
from app.domain.exceptions import (
    AmbiguousClientNameError,
    ClientNotFoundError,
    FileMissingError,
    ProjectNotFoundError,
)
from app.infrastructure.dependencies import get_lookup_service

router = APIRouter(prefix="/client", tags=["Viewer"])


@router.get(
    "/{client_name}/project/{project_number}", response_model=ResolvedModelResponse
)
async def resolve_project(
    client_name: str,
    project_number: str,
    service: LookupService = Depends(get_lookup_service),
) -> ResolvedModelResponse:
    """Find a project by client display name (case-insensitive) and project id."""
    try:
        resolved = await service.resolve(client_name, project_number)
    except ClientNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f'Client "{client_name}" not found',
        )
    except ProjectNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f'Project "{project_number}" not found for {e.client_ref}',
        )
    except FileMissingError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Model file not found")
    except AmbiguousClientNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return ResolvedModelResponse(
        model_path=resolved.url,
        client_name=resolved.client_name,
        project_name=resolved.project_id,
        description=resolved.description,
    )
