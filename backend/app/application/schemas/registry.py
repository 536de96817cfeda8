"""Pydantic DTOs for the admin and viewer endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, protected_namespaces=()
    )


class ClientCreate(_CamelModel):
    """Schema for creating a new client."""

    name: str = Field("", max_length=200, examples=["Highway Projects Inc."])
    contact: str | None = Field(None, max_length=500, examples=["john@highwayproj.com"])


class ClientCreatedResponse(_CamelModel):
    message: str
    client_id: str


class ProjectSchema(_CamelModel):
    filename: str
    description: str
    uploaded: date = Field(..., description="Calendar date of ingestion")


class ClientListItem(_CamelModel):
    id: str
    name: str
    contact: str
    projects: dict[str, ProjectSchema]
    project_count: int


class ClientListResponse(_CamelModel):
    clients: list[ClientListItem]


class UploadResponse(_CamelModel):
    message: str
    filename: str
    url: str
    client_id: str
    project_id: str


class ProjectDeletedResponse(_CamelModel):
    message: str
    remaining_projects: int


class MessageResponse(_CamelModel):
    message: str


class ResolvedModelResponse(_CamelModel):
    """Viewer payload — where to fetch the model and how to label it."""

    model_path: str
    client_name: str
    project_name: str
    description: str


class ErrorResponse(BaseModel):
    error: str
