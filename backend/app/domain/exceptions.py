"""Domain-specific exceptions — framework-independent."""


class RegistryError(Exception):
    """Base class for every expected failure raised by the registry core."""


class UploadValidationError(RegistryError):
    """Raised when an incoming file is rejected before it reaches storage."""


class SizeLimitExceededError(UploadValidationError):
    """Raised as soon as an upload grows past the configured ceiling."""

    def __init__(self, limit_bytes: int):
        self.limit_bytes = limit_bytes
        super().__init__(f"File exceeds the maximum upload size of {limit_bytes} bytes")


class MissingIdentifierError(RegistryError):
    """Raised when a client or project identifier is empty."""

    def __init__(self, message: str = "Client ID and Project ID are required"):
        super().__init__(message)


class InvalidClientNameError(RegistryError):
    """Raised when a client name yields no usable identifier."""

    def __init__(self, message: str = "Client name is required"):
        super().__init__(message)


class DuplicateEntityError(RegistryError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DuplicateClientError(DuplicateEntityError):
    def __init__(self, field: str, value: str):
        super().__init__("Client", field, value)


class EntityNotFoundError(RegistryError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ClientNotFoundError(EntityNotFoundError):
    """No client matches the given id or display name."""

    def __init__(self, client_ref: str, by_name: bool = False):
        self.by_name = by_name
        super().__init__("Client", client_ref)


class ProjectNotFoundError(EntityNotFoundError):
    def __init__(self, client_ref: str, project_id: str):
        self.client_ref = client_ref
        super().__init__("Project", project_id)


class FileMissingError(EntityNotFoundError):
    """The registry references a file that is no longer in the active area.

    Registry state and disk state are not transactionally linked, so this is
    detected at read time.
    """

    def __init__(self, stored_name: str):
        self.stored_name = stored_name
        super().__init__("Model file", stored_name)


class AmbiguousClientNameError(RegistryError):
    """More than one client shares the requested display name."""

    def __init__(self, name: str, client_ids: list[str]):
        self.name = name
        self.client_ids = client_ids
        super().__init__(
            f"Client name \"{name}\" is ambiguous: matches {', '.join(client_ids)}"
        )


class StorageIOError(RegistryError):
    """Raised when a disk write or rename fails."""

    def __init__(self, operation: str, path: str, cause: Exception | None = None):
        self.operation = operation
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Storage {operation} failed for '{path}'{detail}")
