"""Grant repository port - role to permission edges with effect."""

from collections.abc import Collection, Mapping
from typing import Protocol

from aclgraph.domain.entities import Grant
from aclgraph.domain.value_objects import ChangeSet, Effect


class GrantRepository(Protocol):
    """Port for role grants."""

    async def list_for_role(self, role_id: int) -> list[Grant]: ...

    async def list_role_ids_for_permissions(
        self, permission_ids: Collection[int]
    ) -> set[int]: ...

    async def put(self, role_id: int, permission_id: int, effect: Effect) -> ChangeSet: ...

    async def remove(self, role_id: int, permission_id: int) -> ChangeSet: ...

    async def sync(self, role_id: int, effects: Mapping[int, Effect]) -> ChangeSet: ...
