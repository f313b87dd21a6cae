"""PostgreSQL implication edge repository implementation."""

from psycopg import AsyncConnection

from aclgraph.domain.entities import Implication
from aclgraph.domain.value_objects import ChangeSet


class PostgresImplicationRepository:
    """Implication edge repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[Implication]:
        """List every parent -> child edge."""
        cur = await self._conn.execute(
            "SELECT parent_permission_id, child_permission_id FROM acl_permission_implication"
        )
        rows = await cur.fetchall()
        return [Implication(parent_id=r[0], child_id=r[1]) for r in rows]

    async def list_children(self, permission_id: int) -> list[int]:
        """List direct children of a permission."""
        cur = await self._conn.execute(
            "SELECT child_permission_id FROM acl_permission_implication "
            "WHERE parent_permission_id = %s",
            (permission_id,),
        )
        rows = await cur.fetchall()
        return [r[0] for r in rows]

    async def add(self, parent_id: int, child_id: int) -> ChangeSet:
        """Add edge; empty ChangeSet when it already existed."""
        cur = await self._conn.execute(
            "INSERT INTO acl_permission_implication (parent_permission_id, child_permission_id) "
            "VALUES (%s, %s) ON CONFLICT DO NOTHING",
            (parent_id, child_id),
        )
        if cur.rowcount == 0:
            return ChangeSet()
        return ChangeSet.of(permission_ids=[parent_id])

    async def remove(self, parent_id: int, child_id: int) -> ChangeSet:
        """Remove edge; empty ChangeSet when there was none."""
        cur = await self._conn.execute(
            "DELETE FROM acl_permission_implication "
            "WHERE parent_permission_id = %s AND child_permission_id = %s",
            (parent_id, child_id),
        )
        if cur.rowcount == 0:
            return ChangeSet()
        return ChangeSet.of(permission_ids=[parent_id])
