"""Authorization API resources."""

import falcon.asgi

from aclgraph.application.ports import PermissionChecker
from aclgraph.application.services.effective_permissions import EffectivePermissionComputer
from aclgraph.domain.exceptions import ValidationError
from aclgraph.domain.value_objects import ModelRef


class AuthorizationCheckResource:
    """GET /v1/authorization/check - decide a permission or role for a subject."""

    def __init__(self, permission_checker: PermissionChecker) -> None:
        self._permission_checker = permission_checker

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Query: subject=Type:id, permission=name or role=name, optional resource=Type:id."""
        subject_raw = req.get_param("subject")
        permission = req.get_param("permission")
        role = req.get_param("role")
        if not subject_raw or not (permission or role):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "subject and permission or role are required"}
            return

        try:
            subject = ModelRef.parse(subject_raw)
            resource_raw = req.get_param("resource")
            resource = ModelRef.parse(resource_raw) if resource_raw else None
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        if permission:
            allowed = await self._permission_checker.check(subject, permission, resource)
        else:
            allowed = await self._permission_checker.check_role(subject, [role], resource)
        resp.media = {"allowed": allowed}
        resp.status = falcon.HTTP_200


class EffectivePermissionsResource:
    """GET /v1/roles/{role_id}/permissions - effective permission set of a role."""

    def __init__(self, permissions: EffectivePermissionComputer) -> None:
        self._permissions = permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_id: str,
    ) -> None:
        try:
            rid = int(role_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid role ID"}
            return

        permissions = await self._permissions.effective_permissions(rid)
        resp.media = {
            "items": [p.to_dict() for p in sorted(permissions, key=lambda p: p.id)],
        }
        resp.status = falcon.HTTP_200
