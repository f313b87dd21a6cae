"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

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


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def implications(self) -> ImplicationRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def grants(self) -> GrantRepository: ...

    @property
    def assignments(self) -> RoleAssignmentRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
