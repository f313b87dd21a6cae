"""Permission checker port - authorization decisions for subjects."""

from collections.abc import Iterable
from typing import Protocol

from aclgraph.domain.entities import Permission, Role
from aclgraph.domain.value_objects import ModelRef


class PermissionChecker(Protocol):
    """Port consumed by HTTP hooks and the command line."""

    async def check(
        self,
        subject: ModelRef,
        permission: Permission | int | str,
        resource: ModelRef | None = None,
    ) -> bool: ...

    async def check_role(
        self,
        subject: ModelRef,
        roles: Iterable[Role | int | str],
        resource: ModelRef | None = None,
    ) -> bool: ...

    async def check_role_or_permission(
        self,
        subject: ModelRef,
        items: Iterable[str],
        resource: ModelRef | None = None,
    ) -> bool: ...
