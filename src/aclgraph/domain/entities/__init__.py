"""Domain entities."""

from aclgraph.domain.entities.grant import Grant
from aclgraph.domain.entities.implication import Implication
from aclgraph.domain.entities.permission import Permission
from aclgraph.domain.entities.role import Role
from aclgraph.domain.entities.role_assignment import RoleAssignment

__all__ = [
    "Grant",
    "Implication",
    "Permission",
    "Role",
    "RoleAssignment",
]
