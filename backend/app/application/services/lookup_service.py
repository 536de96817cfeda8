"""Read-only viewer lookups — client display name + project id → model file."""

import logging

from app.application.interfaces import ModelFileStore
from app.application.services.registry_service import RegistryService
from app.domain.entities import ResolvedModel
from app.domain.exceptions import FileMissingError
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("LookupService")


class LookupService:
    """Resolves viewer requests against the registry and the active area."""

    def __init__(
        self,
        registry: RegistryService,
        file_store: ModelFileStore,
        public_prefix: str = "/uploads",
    ):
        self._registry = registry
        self._file_store = file_store
        self._public_prefix = public_prefix.rstrip("/")

    def public_url(self, stored_name: str) -> str:
        return f"{self._public_prefix}/{stored_name}"

    async def resolve(self, client_name: str, project_id: str) -> ResolvedModel:
        client = await self._registry.find_client_by_name(client_name)
        logger.debug("Found client %s (id=%s)", client.name, client.id)

        project = self._registry.get_project(client, project_id)

        # Checked on every call: the registry and the disk can drift apart.
        if not self._file_store.exists_active(project.filename):
            plog.step_warning(
                PipelineStage.LOOKUP,
                f"Model file not found: {self._file_store.active_path(project.filename)}",
                client=client.id,
                project=project_id,
            )
            raise FileMissingError(project.filename)

        return ResolvedModel(
            file_path=self._file_store.active_path(project.filename),
            url=self.public_url(project.filename),
            client_name=client.name,
            project_id=project_id,
            description=project.description,
        )
