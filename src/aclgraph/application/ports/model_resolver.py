"""Model resolver port - confirms subjects and resources exist."""

from typing import Protocol

from aclgraph.domain.value_objects import ModelRef


class ModelResolver(Protocol):
    """Port for resolving a type tag and id to a stored entity."""

    async def exists(self, ref: ModelRef) -> bool: ...
