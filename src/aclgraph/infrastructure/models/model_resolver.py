"""PostgreSQL model resolver - confirms a tagged reference points at a row."""

import psycopg
from psycopg import sql
from psycopg_pool import AsyncConnectionPool

from aclgraph.domain.exceptions import StorageError, ValidationError
from aclgraph.domain.value_objects import ModelRef
from aclgraph.infrastructure.persistence.postgres.connection import get_connection


class PostgresModelResolver:
    """Maps type tags to tables, e.g. {"User": "users", "Team": "teams"}."""

    def __init__(self, pool: AsyncConnectionPool, tables: dict[str, str]) -> None:
        self._pool = pool
        self._tables = dict(tables)

    def supported_types(self) -> list[str]:
        return sorted(self._tables)

    async def exists(self, ref: ModelRef) -> bool:
        table = self._tables.get(ref.type)
        if not table:
            raise ValidationError(f"Unknown model type: {ref.type}")
        query = sql.SQL("SELECT 1 FROM {} WHERE id = %s").format(
            sql.Identifier(*table.split("."))
        )
        try:
            async with get_connection(self._pool) as conn:
                cur = await conn.execute(query, (ref.id,))
                return await cur.fetchone() is not None
        except psycopg.Error as e:
            raise StorageError(str(e)) from e
