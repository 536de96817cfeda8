"""Domain entities — clients, their projects and resolved model locations."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path


@dataclass
class Project:
    """A model file linked to a client under a caller-supplied project id."""

    filename: str
    description: str
    uploaded_date: date = field(default_factory=date.today)


@dataclass
class Client:
    """A registry client. ``projects`` maps project id → Project."""

    id: str
    name: str
    contact: str = ""
    projects: dict[str, Project] = field(default_factory=dict)

    @property
    def project_count(self) -> int:
        return len(self.projects)


@dataclass(frozen=True)
class ClientSummary:
    """Read-only listing row for a client."""

    id: str
    name: str
    contact: str
    projects: dict[str, Project]
    project_count: int


@dataclass(frozen=True)
class ResolvedModel:
    """A viewer-facing answer to ``(client name, project id)``."""

    file_path: Path
    url: str
    client_name: str
    project_id: str
    description: str
