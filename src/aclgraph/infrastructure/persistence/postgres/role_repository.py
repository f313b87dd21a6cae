"""PostgreSQL role repository implementation."""

from psycopg import AsyncConnection

from aclgraph.domain.entities import Role
from aclgraph.domain.value_objects import ChangeSet

_COLUMNS = "id, name, resource_type, description"


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: int) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM acl_role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Role(id=r[0], name=r[1], resource_type=r[2], description=r[3])

    async def get_by_name(self, name: str, resource_type: str | None = None) -> Role | None:
        """Get role by name within a resource type (None = global)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM acl_role "
            "WHERE name = %s AND resource_type IS NOT DISTINCT FROM %s",
            (name, resource_type),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Role(id=r[0], name=r[1], resource_type=r[2], description=r[3])

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM acl_role ORDER BY id")
        rows = await cur.fetchall()
        return [Role(id=r[0], name=r[1], resource_type=r[2], description=r[3]) for r in rows]

    async def create(
        self,
        name: str,
        resource_type: str | None = None,
        description: str | None = None,
    ) -> Role:
        """Create role."""
        cur = await self._conn.execute(
            "INSERT INTO acl_role (name, resource_type, description) "
            "VALUES (%s, %s, %s) RETURNING id",
            (name, resource_type, description),
        )
        r = await cur.fetchone()
        return Role(id=r[0], name=name, resource_type=resource_type, description=description)

    async def update(self, role: Role) -> ChangeSet:
        """Update role attributes."""
        await self._conn.execute(
            "UPDATE acl_role SET name = %s, resource_type = %s, description = %s WHERE id = %s",
            (role.name, role.resource_type, role.description, role.id),
        )
        return ChangeSet.of(role_ids=[role.id])

    async def delete(self, role_id: int) -> ChangeSet:
        """Delete role; grants cascade, assignments restrict."""
        await self._conn.execute("DELETE FROM acl_role WHERE id = %s", (role_id,))
        return ChangeSet.of(role_ids=[role_id])
