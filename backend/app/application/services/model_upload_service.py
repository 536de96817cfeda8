"""Model ingestion pipeline — validate, store, then link to a client project."""

from dataclasses import dataclass

from app.application.interfaces import ModelFileStore
from app.application.services.registry_service import RegistryService
from app.application.services.upload_validator import AsyncReadable, UploadValidator
from app.domain.exceptions import MissingIdentifierError
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("ModelUploadService")


@dataclass(frozen=True)
class IngestResult:
    filename: str
    url: str
    client_id: str
    project_id: str


class ModelUploadService:
    """Orchestrates a single model upload.

    Pipeline:
        1. Validate the file descriptor (type, declared size)
        2. Require client and project ids
        3. Read the body, aborting once it passes the size ceiling
        4. Place the file in the active area
        5. Link it in the registry

    Nothing touches the disk unless steps 1–3 succeed.
    """

    def __init__(
        self,
        validator: UploadValidator,
        file_store: ModelFileStore,
        registry: RegistryService,
        public_prefix: str = "/uploads",
        chunk_size: int = 1024 * 1024,
    ):
        self._validator = validator
        self._file_store = file_store
        self._registry = registry
        self._public_prefix = public_prefix.rstrip("/")
        self._chunk_size = chunk_size

    async def ingest(
        self,
        stream: AsyncReadable,
        filename: str | None,
        content_type: str | None,
        client_id: str | None,
        project_id: str | None,
        description: str | None = None,
        declared_size: int | None = None,
    ) -> IngestResult:
        original_name = filename or "model.glb"
        plog.step_start(
            PipelineStage.UPLOAD,
            f"Receiving {original_name}",
            client=client_id,
            project=project_id,
        )

        with plog.timed_step(PipelineStage.VALIDATE, "Checking file type and size"):
            self._validator.validate(filename, content_type, declared_size)
            client_id = (client_id or "").strip()
            project_id = (project_id or "").strip()
            if not client_id or not project_id:
                raise MissingIdentifierError()
            content = await self._validator.read_within_limit(stream, self._chunk_size)

        plog.detail("Body accepted", size=len(content), content_type=content_type)

        with plog.timed_step(PipelineStage.STORAGE, "Writing model to active area"):
            stored = await self._file_store.place(content, original_name)

        with plog.timed_step(PipelineStage.LINK, f"Linking to {client_id}/{project_id}"):
            await self._registry.link_project(
                client_id, project_id, stored.filename, description
            )

        plog.step_complete(
            PipelineStage.COMPLETE,
            f"Uploaded and linked {stored.filename} to {client_id}/{project_id}",
        )
        return IngestResult(
            filename=stored.filename,
            url=f"{self._public_prefix}/{stored.filename}",
            client_id=client_id,
            project_id=project_id,
        )
