from .registry import (
    ClientCreate,
    ClientCreatedResponse,
    ClientListItem,
    ClientListResponse,
    ErrorResponse,
    MessageResponse,
    ProjectDeletedResponse,
    ProjectSchema,
    ResolvedModelResponse,
    UploadResponse,
)
