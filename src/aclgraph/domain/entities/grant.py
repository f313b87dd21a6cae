"""Grant - a role's direct association with a permission."""

from dataclasses import dataclass

from aclgraph.domain.value_objects import Effect


@dataclass(frozen=True)
class Grant:
    """One effect per (role, permission) pair."""

    role_id: int
    permission_id: int
    effect: Effect = Effect.ALLOW
