"""Falcon before-hooks that gate a responder on the subject's role or permissions.

The subject is read from ``req.context.subject`` (a ModelRef set by an upstream
middleware). When a resource type is given, the resource id is taken from the
route parameter or query parameter named ``param``.
"""

import falcon
import falcon.asgi

from aclgraph.application.ports import ModelResolver, PermissionChecker
from aclgraph.domain.exceptions import ValidationError
from aclgraph.domain.value_objects import ModelRef


def _subject(req: falcon.asgi.Request) -> ModelRef:
    subject = getattr(req.context, "subject", None)
    if not subject:
        raise falcon.HTTPUnauthorized(description="Unauthorized")
    return subject


async def _resource(
    req: falcon.asgi.Request,
    params: dict,
    resource_type: str | None,
    param: str,
    resolver: ModelResolver | None,
) -> ModelRef | None:
    if resource_type is None:
        return None
    raw = params.get(param) or req.get_param(param)
    if not raw:
        raise falcon.HTTPNotFound(description="Resource not found")
    try:
        ref = ModelRef(type=resource_type, id=int(raw))
    except (ValueError, ValidationError):
        raise falcon.HTTPBadRequest(description=f"Invalid {param}") from None
    if resolver and not await resolver.exists(ref):
        raise falcon.HTTPNotFound(description="Resource not found")
    return ref


def require_role(
    checker: PermissionChecker,
    roles: str,
    resource_type: str | None = None,
    param: str = "resource_id",
    resolver: ModelResolver | None = None,
):
    """Allow when the active role matches any of ``roles`` (``|``-separated)."""
    names = [r.strip() for r in roles.split("|") if r.strip()]

    async def hook(req, resp, resource, params) -> None:
        subject = _subject(req)
        target = await _resource(req, params, resource_type, param, resolver)
        if not await checker.check_role(subject, names, target):
            raise falcon.HTTPForbidden(description="Insufficient permissions")

    return hook


def require_permission(
    checker: PermissionChecker,
    permission: str,
    resource_type: str | None = None,
    param: str = "resource_id",
    resolver: ModelResolver | None = None,
):
    """Allow when the active role can use ``permission``."""

    async def hook(req, resp, resource, params) -> None:
        subject = _subject(req)
        target = await _resource(req, params, resource_type, param, resolver)
        if not await checker.check(subject, permission, target):
            raise falcon.HTTPForbidden(description="Insufficient permissions")

    return hook


def require_role_or_permission(
    checker: PermissionChecker,
    items: str,
    resource_type: str | None = None,
    param: str = "resource_id",
    resolver: ModelResolver | None = None,
):
    """Allow when any ``|``-separated item is the active role's name or a usable permission."""
    names = [i.strip() for i in items.split("|") if i.strip()]

    async def hook(req, resp, resource, params) -> None:
        subject = _subject(req)
        target = await _resource(req, params, resource_type, param, resolver)
        if not await checker.check_role_or_permission(subject, names, target):
            raise falcon.HTTPForbidden(description="Insufficient permissions")

    return hook
