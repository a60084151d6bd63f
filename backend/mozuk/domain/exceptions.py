"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class AuthenticationError(Exception):
    """Raised when credentials or a bearer token cannot be verified."""

    def __init__(self, message: str = "Invalid credentials"):
        self.message = message
        super().__init__(message)


class InvalidUploadError(Exception):
    """Raised when an uploaded file is rejected before it is stored.

    ``too_large`` distinguishes size-limit violations (413) from other
    rejections such as empty files (400).
    """

    def __init__(self, message: str, *, too_large: bool = False):
        self.message = message
        self.too_large = too_large
        super().__init__(message)
