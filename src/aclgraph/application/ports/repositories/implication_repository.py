"""Implication edge repository port."""

from typing import Protocol

from aclgraph.domain.entities import Implication
from aclgraph.domain.value_objects import ChangeSet


class ImplicationRepository(Protocol):
    """Port for parent -> child permission edges."""

    async def list_all(self) -> list[Implication]: ...

    async def list_children(self, permission_id: int) -> list[int]: ...

    async def add(self, parent_id: int, child_id: int) -> ChangeSet: ...

    async def remove(self, parent_id: int, child_id: int) -> ChangeSet: ...
