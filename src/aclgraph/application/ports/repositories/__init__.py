"""Repository ports."""

from aclgraph.application.ports.repositories.grant_repository import GrantRepository
from aclgraph.application.ports.repositories.implication_repository import (
    ImplicationRepository,
)
from aclgraph.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from aclgraph.application.ports.repositories.role_assignment_repository import (
    RoleAssignmentRepository,
)
from aclgraph.application.ports.repositories.role_repository import RoleRepository

__all__ = [
    "GrantRepository",
    "ImplicationRepository",
    "PermissionRepository",
    "RoleAssignmentRepository",
    "RoleRepository",
]
