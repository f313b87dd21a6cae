"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import psycopg
from psycopg_pool import AsyncConnectionPool

from aclgraph.domain.exceptions import StorageError
from aclgraph.infrastructure.persistence.postgres.grant_repository import (
    PostgresGrantRepository,
)
from aclgraph.infrastructure.persistence.postgres.implication_repository import (
    PostgresImplicationRepository,
)
from aclgraph.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)
from aclgraph.infrastructure.persistence.postgres.role_assignment_repository import (
    PostgresRoleAssignmentRepository,
)
from aclgraph.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permissions = PostgresPermissionRepository(self._conn)
        self._implications = PostgresImplicationRepository(self._conn)
        self._roles = PostgresRoleRepository(self._conn)
        self._grants = PostgresGrantRepository(self._conn)
        self._assignments = PostgresRoleAssignmentRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def implications(self) -> PostgresImplicationRepository:
        return self._implications

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def grants(self) -> PostgresGrantRepository:
        return self._grants

    @property
    def assignments(self) -> PostgresRoleAssignmentRepository:
        return self._assignments

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    Driver errors surface as StorageError; nothing is retried.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            uow = PostgresUnitOfWork(pool)
            async with uow:
                try:
                    yield uow
                    await uow.commit()
                except BaseException:
                    await uow.rollback()
                    raise
        except psycopg.Error as e:
            raise StorageError(str(e)) from e

    return factory
