"""Command line interface - administrative edits and checks."""

import argparse
import sys
from datetime import UTC, datetime

from aclgraph import __version__
from aclgraph.domain.exceptions import AclError, NotFound, ValidationError
from aclgraph.domain.value_objects import Effect, ModelRef


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aclgraph", description="Role and permission administration")
    parser.add_argument("--version", action="version", version=f"aclgraph {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("assign-role", help="Assign a role to a subject on a resource")
    p.add_argument("role", help='The id or name of the role, e.g. 1 or "admin"')
    p.add_argument("subject", help="The subject, e.g. User:1")
    p.add_argument("resource", nargs="?", help="The resource, e.g. Team:5; omit for global")
    p.add_argument("--expires-at", help="Expiry, ISO 8601 (e.g. '2025-12-31 23:59:59'), UTC if naive")

    p = sub.add_parser("remove-role", help="Remove a subject's role on a resource")
    p.add_argument("subject", help="The subject, e.g. User:1")
    p.add_argument("resource", nargs="?", help="The resource, e.g. Team:5; omit for global")

    p = sub.add_parser("create-permission", help="Create a permission or add implied permissions")
    p.add_argument("permission", help="The id or name of the permission")
    p.add_argument("resource_type", nargs="?", help="Resource type, only used when creating")
    p.add_argument("--implied", default="", help="Comma-separated implied permission names")

    p = sub.add_parser("create-role", help="Create a role")
    p.add_argument("name", help="Role name")
    p.add_argument("resource_type", nargs="?", help="Resource type; omit for a global role")
    p.add_argument("--description", help="Role description")

    for name, help_text in (("grant", "Grant a permission to a role"), ("revoke", "Revoke a role's grant")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("role", help="The id or name of the role")
        p.add_argument("permission", help="The id or name of the permission")
        p.add_argument("--resource-type", help="Resource type of the role when given by name")
        if name == "grant":
            p.add_argument("--deny", action="store_true", help="Grant with DENY effect")

    p = sub.add_parser("check", help="Check whether a subject can use a permission")
    p.add_argument("subject", help="The subject, e.g. User:1")
    p.add_argument("permission", help="The id or name of the permission")
    p.add_argument("resource", nargs="?", help="The resource, e.g. Team:5")

    sub.add_parser("cache-reset", help="Reset the permission cache")

    p = sub.add_parser("serve", help="Run the HTTP API")
    p.add_argument("--host", default="0.0.0.0")
    p.add_argument("--port", type=int, default=8000)
    return parser


def parse_expires_at(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValidationError(
            "Invalid expires-at format. Use an ISO datetime, e.g. '2025-12-31 23:59:59' or '2025-12-31'."
        ) from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


async def _ensure_exists(services, ref: ModelRef, entity: str) -> None:
    if services.model_resolver and not await services.model_resolver.exists(ref):
        raise NotFound(entity, ref)


async def _assign_role(args, services) -> int:
    subject = ModelRef.parse(args.subject)
    resource = ModelRef.parse(args.resource) if args.resource else None
    expires_at = parse_expires_at(args.expires_at)
    await _ensure_exists(services, subject, "Subject")
    if resource:
        await _ensure_exists(services, resource, "Resource")

    await services.assignments.assign(subject, args.role, resource, expires_at)
    on = f" on {resource}" if resource else ""
    until = f" (expires at {expires_at:%Y-%m-%d %H:%M:%S})" if expires_at else ""
    print(f"Role `{args.role}` assigned to {subject}{on}{until} successfully.")
    return 0


async def _remove_role(args, services) -> int:
    subject = ModelRef.parse(args.subject)
    resource = ModelRef.parse(args.resource) if args.resource else None
    if await services.assignments.remove(subject, resource):
        print(f"Role of {subject} on {resource or 'global'} removed.")
    else:
        print(f"{subject} has no role on {resource or 'global'}.")
    return 0


async def _create_permission(args, services) -> int:
    implied = [n.strip() for n in args.implied.split(",") if n.strip()]
    result = await services.create_permission.execute(args.permission, args.resource_type, implied)
    perm = result.permission
    if result.created:
        scope = f" with resource type `{perm.resource_type}`" if perm.resource_type else ""
        print(f"Created permission: `{perm.name}` (ID: {perm.id}){scope}.")
    else:
        ignored = f" Resource type `{args.resource_type}` will be ignored." if args.resource_type else ""
        print(f"Found existing permission: `{perm.name}` (ID: {perm.id}).{ignored}")

    created_ids = {c.id for c in result.created_children}
    for child in result.attached_children + result.already_attached:
        verb = "Created" if child.id in created_ids else "Using existing"
        print(f"  → {verb} implied permission: `{child.name}`")
    if result.attached_children:
        print(f"  → Attached {len(result.attached_children)} implied permission(s) to `{perm.name}`")
    elif result.already_attached:
        print(f"  → All implied permissions were already attached to `{perm.name}`")
    elif not result.created:
        print(f"No implied permissions specified. Permission `{perm.name}` unchanged.")
    return 0


async def _create_role(args, services) -> int:
    role = await services.create_role.execute(args.name, args.resource_type, args.description)
    print(f"Created role: `{role.name}` (ID: {role.id}) for {role.resource_type or 'global'}.")
    return 0


async def _grant(args, services) -> int:
    effect = Effect.DENY if args.deny else Effect.ALLOW
    await services.set_grant.execute(args.role, args.permission, effect, args.resource_type)
    print(f"Granted `{args.permission}` to role `{args.role}` with {effect}.")
    return 0


async def _revoke(args, services) -> int:
    if await services.revoke_grant.execute(args.role, args.permission, args.resource_type):
        print(f"Revoked `{args.permission}` from role `{args.role}`.")
    else:
        print(f"Role `{args.role}` had no grant on `{args.permission}`.")
    return 0


async def _check(args, services) -> int:
    subject = ModelRef.parse(args.subject)
    resource = ModelRef.parse(args.resource) if args.resource else None
    allowed = await services.checker.check(subject, args.permission, resource)
    print("allowed" if allowed else "denied")
    return 0 if allowed else 1


async def _cache_reset(args, services) -> int:
    print("Clearing permission cache...")
    await services.reset_cache.execute()
    print("Permission cache cleared successfully.")
    return 0


_HANDLERS = {
    "assign-role": _assign_role,
    "remove-role": _remove_role,
    "create-permission": _create_permission,
    "create-role": _create_role,
    "grant": _grant,
    "revoke": _revoke,
    "check": _check,
    "cache-reset": _cache_reset,
}


async def run_command(args: argparse.Namespace, services) -> int:
    """Run a parsed command against opened services; returns the exit code."""
    handler = _HANDLERS[args.command]
    try:
        return await handler(args, services)
    except AclError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
