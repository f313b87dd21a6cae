"""Permission repository port."""

from collections.abc import Collection
from typing import Protocol

from aclgraph.domain.entities import Permission
from aclgraph.domain.value_objects import ChangeSet


class PermissionRepository(Protocol):
    """Port for permission persistence."""

    async def get_by_id(self, permission_id: int) -> Permission | None: ...

    async def get_by_name(self, name: str) -> Permission | None: ...

    async def list_by_ids(self, permission_ids: Collection[int]) -> list[Permission]: ...

    async def list_all(self) -> list[Permission]: ...

    async def create(self, name: str, resource_type: str | None = None) -> Permission: ...

    async def update(self, permission: Permission) -> ChangeSet: ...

    async def delete(self, permission_id: int) -> ChangeSet: ...
