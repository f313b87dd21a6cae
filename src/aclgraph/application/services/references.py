"""Resolve role and permission references given as entities, ids or names."""

from aclgraph.application.ports import UnitOfWork
from aclgraph.domain.entities import Permission, Role
from aclgraph.domain.exceptions import ValidationError

RoleRef = Role | int | str
PermissionRef = Permission | int | str


def _as_id(value: str) -> int | None:
    return int(value) if value.isdigit() else None


async def resolve_role(
    uow: UnitOfWork, role: RoleRef, resource_type: str | None = None
) -> Role | None:
    """Load a role by entity, id, numeric string or name.

    Names are looked up together with resource_type, since a name is only
    unique per resource type.
    """
    if isinstance(role, Role):
        return await uow.roles.get_by_id(role.id)
    if isinstance(role, bool):
        raise ValidationError(f"Invalid role reference: {role!r}")
    if isinstance(role, int):
        return await uow.roles.get_by_id(role)
    if isinstance(role, str):
        role_id = _as_id(role)
        if role_id is not None:
            return await uow.roles.get_by_id(role_id)
        return await uow.roles.get_by_name(role, resource_type)
    raise ValidationError(
        f"Role must be a Role, role id or role name, got {type(role).__name__}"
    )


async def resolve_permission(uow: UnitOfWork, permission: PermissionRef) -> Permission | None:
    """Load a permission by entity, id, numeric string or name."""
    if isinstance(permission, Permission):
        return await uow.permissions.get_by_id(permission.id)
    if isinstance(permission, bool):
        raise ValidationError(f"Invalid permission reference: {permission!r}")
    if isinstance(permission, int):
        return await uow.permissions.get_by_id(permission)
    if isinstance(permission, str):
        permission_id = _as_id(permission)
        if permission_id is not None:
            return await uow.permissions.get_by_id(permission_id)
        return await uow.permissions.get_by_name(permission)
    raise ValidationError(
        f"Permission must be a Permission, permission id or name, got {type(permission).__name__}"
    )


def permission_matches(permission: Permission, ref: PermissionRef) -> bool:
    """Compare by id for entities and ints, by name or numeric id for strings."""
    if isinstance(ref, Permission):
        return permission.id == ref.id
    if isinstance(ref, bool):
        raise ValidationError(f"Invalid permission reference: {ref!r}")
    if isinstance(ref, int):
        return permission.id == ref
    if isinstance(ref, str):
        return permission.name == ref or _as_id(ref) == permission.id
    raise ValidationError(
        f"Permission must be a Permission, permission id or name, got {type(ref).__name__}"
    )


def role_matches(role: Role, ref: RoleRef) -> bool:
    """Compare by id, or by name with numeric strings also matching the id."""
    if isinstance(ref, Role):
        return role.id == ref.id
    if isinstance(ref, bool):
        raise ValidationError(f"Invalid role reference: {ref!r}")
    if isinstance(ref, int):
        return role.id == ref
    if isinstance(ref, str):
        return role.name == ref or _as_id(ref) == role.id
    raise ValidationError(
        f"Role must be a Role, role id or role name, got {type(ref).__name__}"
    )


def role_id_of(role: Role | int) -> int:
    if isinstance(role, Role):
        return role.id
    if isinstance(role, bool) or not isinstance(role, int):
        raise ValidationError(f"Invalid role reference: {role!r}")
    return role
