"""Role entity for RBAC."""

from dataclasses import dataclass


@dataclass
class Role:
    """Role - global when resource_type is None, scoped to a resource type otherwise."""

    id: int
    name: str
    resource_type: str | None = None
    description: str | None = None

    @property
    def is_global(self) -> bool:
        return self.resource_type is None
