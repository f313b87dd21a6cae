"""Domain exceptions."""


class AclError(Exception):
    """Base exception for aclgraph."""

    pass


class ValidationError(AclError):
    """Validation failed for input data."""

    pass


class RoleInUse(ValidationError):
    """Role cannot be deleted while assignments reference it."""

    pass


class NotFound(AclError):
    """Requested role, permission, subject or resource was not found."""

    def __init__(self, entity: str, ref: object) -> None:
        super().__init__(f"{entity} not found: {ref}")
        self.entity = entity
        self.ref = ref


class StorageError(AclError):
    """Backing store is unavailable or returned an inconsistent result."""

    pass


class CacheUnavailable(AclError):
    """Cache backend could not be reached."""

    pass
