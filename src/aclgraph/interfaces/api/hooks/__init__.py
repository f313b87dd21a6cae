"""Authorization hooks for Falcon responders."""

from aclgraph.interfaces.api.hooks.authorization import (
    require_permission,
    require_role,
    require_role_or_permission,
)

__all__ = [
    "require_permission",
    "require_role",
    "require_role_or_permission",
]
