"""PostgreSQL permission repository implementation."""

from collections.abc import Collection

from psycopg import AsyncConnection

from aclgraph.domain.entities import Permission
from aclgraph.domain.value_objects import ChangeSet

_COLUMNS = "id, name, resource_type"


class PostgresPermissionRepository:
    """Permission repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: int) -> Permission | None:
        """Get permission by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM acl_permission WHERE id = %s",
            (permission_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Permission(id=r[0], name=r[1], resource_type=r[2])

    async def get_by_name(self, name: str) -> Permission | None:
        """Get permission by unique name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM acl_permission WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Permission(id=r[0], name=r[1], resource_type=r[2])

    async def list_by_ids(self, permission_ids: Collection[int]) -> list[Permission]:
        """List permissions with the given ids."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM acl_permission WHERE id = ANY(%s) ORDER BY id",
            (list(permission_ids),),
        )
        rows = await cur.fetchall()
        return [Permission(id=r[0], name=r[1], resource_type=r[2]) for r in rows]

    async def list_all(self) -> list[Permission]:
        """List all permissions."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM acl_permission ORDER BY id")
        rows = await cur.fetchall()
        return [Permission(id=r[0], name=r[1], resource_type=r[2]) for r in rows]

    async def create(self, name: str, resource_type: str | None = None) -> Permission:
        """Create permission."""
        cur = await self._conn.execute(
            "INSERT INTO acl_permission (name, resource_type) VALUES (%s, %s) RETURNING id",
            (name, resource_type),
        )
        r = await cur.fetchone()
        return Permission(id=r[0], name=name, resource_type=resource_type)

    async def update(self, permission: Permission) -> ChangeSet:
        """Update permission name and resource type."""
        await self._conn.execute(
            "UPDATE acl_permission SET name = %s, resource_type = %s WHERE id = %s",
            (permission.name, permission.resource_type, permission.id),
        )
        return ChangeSet.of(permission_ids=[permission.id])

    async def delete(self, permission_id: int) -> ChangeSet:
        """Delete permission. Parents and granting roles are read before the cascade."""
        cur = await self._conn.execute(
            "SELECT parent_permission_id FROM acl_permission_implication "
            "WHERE child_permission_id = %s",
            (permission_id,),
        )
        parents = [r[0] for r in await cur.fetchall()]
        cur = await self._conn.execute(
            "SELECT role_id FROM acl_role_permission WHERE permission_id = %s",
            (permission_id,),
        )
        roles = [r[0] for r in await cur.fetchall()]
        await self._conn.execute(
            "DELETE FROM acl_permission WHERE id = %s",
            (permission_id,),
        )
        return ChangeSet.of(permission_ids=[permission_id, *parents], role_ids=roles)
