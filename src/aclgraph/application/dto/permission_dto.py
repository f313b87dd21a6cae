"""Permission use case results."""

from dataclasses import dataclass, field

from aclgraph.domain.entities import Permission


@dataclass
class CreatePermissionResult:
    """Outcome of creating (or reusing) a permission and linking implied ones."""

    permission: Permission
    created: bool
    created_children: list[Permission] = field(default_factory=list)
    attached_children: list[Permission] = field(default_factory=list)
    already_attached: list[Permission] = field(default_factory=list)
