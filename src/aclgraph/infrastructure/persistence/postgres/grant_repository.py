"""PostgreSQL grant repository implementation."""

from collections.abc import Collection, Mapping

from psycopg import AsyncConnection

from aclgraph.domain.entities import Grant
from aclgraph.domain.value_objects import ChangeSet, Effect


class PostgresGrantRepository:
    """Role -> permission grants with effect."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_for_role(self, role_id: int) -> list[Grant]:
        """List direct grants of a role."""
        cur = await self._conn.execute(
            "SELECT role_id, permission_id, effect FROM acl_role_permission WHERE role_id = %s",
            (role_id,),
        )
        rows = await cur.fetchall()
        return [Grant(role_id=r[0], permission_id=r[1], effect=Effect(r[2])) for r in rows]

    async def list_role_ids_for_permissions(
        self, permission_ids: Collection[int]
    ) -> set[int]:
        """Roles that directly grant (ALLOW or DENY) any of the permissions."""
        if not permission_ids:
            return set()
        cur = await self._conn.execute(
            "SELECT DISTINCT role_id FROM acl_role_permission WHERE permission_id = ANY(%s)",
            (list(permission_ids),),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}

    async def put(self, role_id: int, permission_id: int, effect: Effect) -> ChangeSet:
        """Insert grant or replace its effect."""
        await self._conn.execute(
            "INSERT INTO acl_role_permission (role_id, permission_id, effect) "
            "VALUES (%s, %s, %s) "
            "ON CONFLICT (role_id, permission_id) DO UPDATE SET effect = EXCLUDED.effect",
            (role_id, permission_id, effect.value),
        )
        return ChangeSet.of(permission_ids=[permission_id], role_ids=[role_id])

    async def remove(self, role_id: int, permission_id: int) -> ChangeSet:
        """Remove grant; empty ChangeSet when there was none."""
        cur = await self._conn.execute(
            "DELETE FROM acl_role_permission WHERE role_id = %s AND permission_id = %s",
            (role_id, permission_id),
        )
        if cur.rowcount == 0:
            return ChangeSet()
        return ChangeSet.of(permission_ids=[permission_id], role_ids=[role_id])

    async def sync(self, role_id: int, effects: Mapping[int, Effect]) -> ChangeSet:
        """Replace the role's grants with exactly the given map."""
        cur = await self._conn.execute(
            "DELETE FROM acl_role_permission WHERE role_id = %s RETURNING permission_id",
            (role_id,),
        )
        previous = [r[0] for r in await cur.fetchall()]
        if effects:
            async with self._conn.cursor() as cur:
                await cur.executemany(
                    "INSERT INTO acl_role_permission (role_id, permission_id, effect) "
                    "VALUES (%s, %s, %s)",
                    [(role_id, pid, effect.value) for pid, effect in effects.items()],
                )
        return ChangeSet.of(permission_ids=[*previous, *effects], role_ids=[role_id])
