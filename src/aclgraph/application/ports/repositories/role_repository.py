"""Role repository port."""

from typing import Protocol

from aclgraph.domain.entities import Role
from aclgraph.domain.value_objects import ChangeSet


class RoleRepository(Protocol):
    """Port for role persistence."""

    async def get_by_id(self, role_id: int) -> Role | None: ...

    async def get_by_name(self, name: str, resource_type: str | None = None) -> Role | None: ...

    async def list_all(self) -> list[Role]: ...

    async def create(
        self,
        name: str,
        resource_type: str | None = None,
        description: str | None = None,
    ) -> Role: ...

    async def update(self, role: Role) -> ChangeSet: ...

    async def delete(self, role_id: int) -> ChangeSet: ...
