"""Application service for the client → project → model file registry.

The registry is volatile in-memory state shared by every request. All reads
and mutations serialize on one ``asyncio.Lock`` and callers only ever receive
copies, so a half-applied cascade is never observable.
"""

import asyncio
import copy
import logging
from collections.abc import Iterable
from datetime import date

from app.application.interfaces import ModelFileStore
from app.domain.entities import Client, ClientSummary, Project
from app.domain.exceptions import (
    AmbiguousClientNameError,
    ClientNotFoundError,
    DuplicateClientError,
    InvalidClientNameError,
    MissingIdentifierError,
    ProjectNotFoundError,
    StorageIOError,
)
from app.domain.naming import humanize_client_id, slugify_client_name
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("RegistryService")


class RegistryService:
    """Owns the client/project mapping and its soft-delete protocol."""

    def __init__(self, file_store: ModelFileStore):
        self._file_store = file_store
        self._clients: dict[str, Client] = {}
        self._lock = asyncio.Lock()

    # ── Clients ─────────────────────────────────────────────────────

    async def create_client(self, name: str, contact: str | None = "") -> str:
        """Register a client under the slug of ``name`` and return its id."""
        display_name = (name or "").strip()
        client_id = slugify_client_name(display_name)
        if not client_id:
            raise InvalidClientNameError()

        async with self._lock:
            if client_id in self._clients:
                raise DuplicateClientError("id", client_id)
            if self._match_name(display_name):
                raise DuplicateClientError("name", display_name)
            self._clients[client_id] = Client(
                id=client_id, name=display_name, contact=contact or ""
            )

        logger.info("Added client %s (%s)", client_id, display_name)
        return client_id

    async def ensure_client(self, client_id: str) -> Client:
        """Return the client, creating a humanized placeholder if absent."""
        async with self._lock:
            return copy.deepcopy(self._ensure_client_locked(client_id))

    async def get_client(self, client_id: str) -> Client:
        async with self._lock:
            return copy.deepcopy(self._require_client(client_id))

    async def list_clients(self) -> list[ClientSummary]:
        """Snapshot of all clients in insertion order."""
        async with self._lock:
            return [
                ClientSummary(
                    id=client.id,
                    name=client.name,
                    contact=client.contact,
                    projects=copy.deepcopy(client.projects),
                    project_count=client.project_count,
                )
                for client in self._clients.values()
            ]

    async def find_client_by_name(self, name: str) -> Client:
        """Case-insensitive exact match on display name.

        Raises AmbiguousClientNameError rather than guessing when several
        clients share the name.
        """
        async with self._lock:
            matches = self._match_name(name)
            if not matches:
                raise ClientNotFoundError(name, by_name=True)
            if len(matches) > 1:
                raise AmbiguousClientNameError(name, [c.id for c in matches])
            return copy.deepcopy(matches[0])

    async def delete_client(self, client_id: str) -> int:
        """Soft-delete a client and every project it owns.

        Each file relocation is independently best-effort. Returns the number
        of files actually moved to the backup area.
        """
        async with self._lock:
            client = self._require_client(client_id)
            moved = 0
            for project_id, project in client.projects.items():
                if await self._relocate(project, client_id, project_id):
                    moved += 1
            del self._clients[client_id]

        logger.info(
            "Soft-deleted client %s (%d/%d files moved to backup)",
            client_id,
            moved,
            client.project_count,
        )
        return moved

    # ── Projects ────────────────────────────────────────────────────

    async def link_project(
        self,
        client_id: str,
        project_id: str,
        stored_filename: str,
        description: str | None = None,
    ) -> Project:
        """Attach a stored model to ``client_id/project_id`` (last write wins)."""
        if not client_id or not project_id:
            raise MissingIdentifierError()

        project = Project(
            filename=stored_filename,
            description=description or f"Project {project_id}",
            uploaded_date=date.today(),
        )
        async with self._lock:
            client = self._ensure_client_locked(client_id)
            previous = client.projects.get(project_id)
            client.projects[project_id] = project

        if previous is not None and previous.filename != stored_filename:
            logger.info(
                "Replaced %s/%s: %s superseded by %s",
                client_id,
                project_id,
                previous.filename,
                stored_filename,
            )
        logger.info("Linked %s to %s/%s", stored_filename, client_id, project_id)
        return copy.deepcopy(project)

    def get_project(self, client: Client, project_id: str) -> Project:
        project = client.projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(client.name, project_id)
        return project

    async def delete_project(self, client_id: str, project_id: str) -> int:
        """Soft-delete one project; returns how many projects the client still owns."""
        async with self._lock:
            client = self._require_client(client_id)
            project = client.projects.get(project_id)
            if project is None:
                raise ProjectNotFoundError(client_id, project_id)

            await self._relocate(project, client_id, project_id)
            del client.projects[project_id]
            remaining = client.project_count

        logger.info("Soft-deleted project %s for client %s", project_id, client_id)
        return remaining

    # ── Seeding ─────────────────────────────────────────────────────

    async def seed(self, clients: Iterable[Client]) -> int:
        """Preload clients with explicit ids. Existing ids are rejected."""
        count = 0
        async with self._lock:
            for client in clients:
                if client.id in self._clients:
                    raise DuplicateClientError("id", client.id)
                for project in client.projects.values():
                    # Raises ValueError for names outside the flat storage areas.
                    self._file_store.active_path(project.filename)
                self._clients[client.id] = copy.deepcopy(client)
                count += 1
        return count

    # ── Internals (caller holds the lock) ───────────────────────────

    def _require_client(self, client_id: str) -> Client:
        client = self._clients.get(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)
        return client

    def _ensure_client_locked(self, client_id: str) -> Client:
        if not client_id:
            raise MissingIdentifierError()
        client = self._clients.get(client_id)
        if client is None:
            client = Client(id=client_id, name=humanize_client_id(client_id))
            self._clients[client_id] = client
            logger.info("Auto-created client %s (%s)", client_id, client.name)
        return client

    def _match_name(self, name: str) -> list[Client]:
        wanted = name.casefold()
        return [c for c in self._clients.values() if c.name.casefold() == wanted]

    async def _relocate(self, project: Project, client_id: str, project_id: str) -> bool:
        """Move a project's file to backup; failures are logged, never raised."""
        try:
            moved = await self._file_store.relocate_to_backup(project.filename)
        except StorageIOError:
            logger.exception(
                "Backup relocation failed for %s/%s (%s); removing entry anyway",
                client_id,
                project_id,
                project.filename,
            )
            return False

        if moved:
            plog.step_complete(
                PipelineStage.BACKUP,
                f"Moved {project.filename} to backup",
                client=client_id,
                project=project_id,
            )
        else:
            plog.step_warning(
                PipelineStage.BACKUP,
                f"Registry/disk divergence: {project.filename} was not in the active area",
                client=client_id,
                project=project_id,
            )
        return moved
