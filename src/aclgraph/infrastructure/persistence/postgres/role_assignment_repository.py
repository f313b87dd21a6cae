"""PostgreSQL role assignment repository implementation."""

from psycopg import AsyncConnection

from aclgraph.domain.entities import RoleAssignment
from aclgraph.domain.value_objects import ModelRef

_COLUMNS = (
    "id, subject_type, subject_id, role_id, resource_type, resource_id, "
    "expires_at, created_at, updated_at"
)


def _row_to_assignment(r: tuple) -> RoleAssignment:
    return RoleAssignment(
        id=r[0],
        subject=ModelRef(type=r[1], id=r[2]),
        role_id=r[3],
        resource=ModelRef(type=r[4], id=r[5]) if r[4] is not None else None,
        expires_at=r[6],
        created_at=r[7],
        updated_at=r[8],
    )


class PostgresRoleAssignmentRepository:
    """Role assignment repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_for(
        self, subject: ModelRef, resource: ModelRef | None = None
    ) -> RoleAssignment | None:
        """Get the assignment row for (subject, resource), expired or not."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM acl_role_assignment "
            "WHERE subject_type = %s AND subject_id = %s "
            "AND resource_type IS NOT DISTINCT FROM %s "
            "AND resource_id IS NOT DISTINCT FROM %s",
            (
                subject.type,
                subject.id,
                resource.type if resource else None,
                resource.id if resource else None,
            ),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_assignment(r)

    async def list_by_subject(self, subject: ModelRef) -> list[RoleAssignment]:
        """List all assignments of a subject."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM acl_role_assignment "
            "WHERE subject_type = %s AND subject_id = %s ORDER BY id",
            (subject.type, subject.id),
        )
        rows = await cur.fetchall()
        return [_row_to_assignment(r) for r in rows]

    async def exists_for_role(self, role_id: int) -> bool:
        """Whether any assignment references the role."""
        cur = await self._conn.execute(
            "SELECT 1 FROM acl_role_assignment WHERE role_id = %s LIMIT 1",
            (role_id,),
        )
        return await cur.fetchone() is not None

    async def create(self, assignment: RoleAssignment) -> RoleAssignment:
        """Create assignment and set its id."""
        cur = await self._conn.execute(
            "INSERT INTO acl_role_assignment "
            "(subject_type, subject_id, role_id, resource_type, resource_id, "
            "expires_at, created_at, updated_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s) RETURNING id",
            (
                assignment.subject.type,
                assignment.subject.id,
                assignment.role_id,
                assignment.resource.type if assignment.resource else None,
                assignment.resource.id if assignment.resource else None,
                assignment.expires_at,
                assignment.created_at,
                assignment.updated_at,
            ),
        )
        r = await cur.fetchone()
        assignment.id = r[0]
        return assignment

    async def update(self, assignment: RoleAssignment) -> None:
        """Update role and expiry in place."""
        await self._conn.execute(
            "UPDATE acl_role_assignment SET role_id = %s, expires_at = %s, updated_at = %s "
            "WHERE id = %s",
            (assignment.role_id, assignment.expires_at, assignment.updated_at, assignment.id),
        )

    async def delete(self, assignment_id: int) -> None:
        """Delete assignment."""
        await self._conn.execute(
            "DELETE FROM acl_role_assignment WHERE id = %s",
            (assignment_id,),
        )
