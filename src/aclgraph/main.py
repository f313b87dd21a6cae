"""Application entry point and composition root."""

import asyncio
import logging
import sys
from dataclasses import dataclass

import falcon
import falcon.asgi
from psycopg_pool import AsyncConnectionPool

from aclgraph.application.ports import Cache
from aclgraph.application.services.cache_layer import CacheLayer
from aclgraph.application.services.effective_permissions import EffectivePermissionComputer
from aclgraph.application.services.implication_resolver import ImplicationResolver
from aclgraph.application.services.invalidation import InvalidationCoordinator
from aclgraph.application.services.role_assignments import RoleAssignmentResolver
from aclgraph.application.use_cases.cache.reset_cache import ResetCacheUseCase
from aclgraph.application.use_cases.permission.create_permission import CreatePermissionUseCase
from aclgraph.application.use_cases.permission.delete_permission import DeletePermissionUseCase
from aclgraph.application.use_cases.permission.link_implication import LinkImplicationUseCase
from aclgraph.application.use_cases.permission.unlink_implication import UnlinkImplicationUseCase
from aclgraph.application.use_cases.permission.update_permission import UpdatePermissionUseCase
from aclgraph.application.use_cases.role.create_role import CreateRoleUseCase
from aclgraph.application.use_cases.role.delete_role import DeleteRoleUseCase
from aclgraph.application.use_cases.role.revoke_grant import RevokeGrantUseCase
from aclgraph.application.use_cases.role.set_grant import SetGrantUseCase
from aclgraph.application.use_cases.role.sync_grants import SyncGrantsUseCase
from aclgraph.application.use_cases.role.update_role import UpdateRoleUseCase
from aclgraph.config import Settings, get_settings
from aclgraph.domain.exceptions import AclError, NotFound, StorageError, ValidationError
from aclgraph.infrastructure.cache import MemoryCache, RedisCache
from aclgraph.infrastructure.clock.system_clock import SystemClock
from aclgraph.infrastructure.models.model_resolver import PostgresModelResolver
from aclgraph.infrastructure.permission.permission_checker import AclPermissionChecker
from aclgraph.infrastructure.persistence.postgres.connection import create_pool
from aclgraph.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from aclgraph.interfaces.api.middleware.lifespan import LifespanMiddleware
from aclgraph.interfaces.api.middleware.subject import TrustedSubjectMiddleware
from aclgraph.interfaces.api.resources.authorization import (
    AuthorizationCheckResource,
    EffectivePermissionsResource,
)
from aclgraph.interfaces.api.resources.health import HealthResource
from aclgraph.interfaces.cli import build_parser, run_command

logger = logging.getLogger(__name__)


@dataclass
class AclServices:
    """Everything the HTTP and command line adapters call into."""

    pool: AsyncConnectionPool | None
    cache: Cache | None
    model_resolver: PostgresModelResolver | None
    permissions: EffectivePermissionComputer
    assignments: RoleAssignmentResolver
    invalidation: InvalidationCoordinator
    checker: AclPermissionChecker
    create_permission: CreatePermissionUseCase
    update_permission: UpdatePermissionUseCase
    delete_permission: DeletePermissionUseCase
    link_implication: LinkImplicationUseCase
    unlink_implication: UnlinkImplicationUseCase
    create_role: CreateRoleUseCase
    update_role: UpdateRoleUseCase
    delete_role: DeleteRoleUseCase
    set_grant: SetGrantUseCase
    revoke_grant: RevokeGrantUseCase
    sync_grants: SyncGrantsUseCase
    reset_cache: ResetCacheUseCase

    async def open(self) -> None:
        if self.pool is not None:
            await self.pool.open()

    async def close(self) -> None:
        if self.pool is not None:
            await self.pool.close()
        if self.cache is not None:
            await self.cache.close()


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_cache(settings: Settings) -> Cache | None:
    if settings.cache_backend == "redis":
        return RedisCache(settings.redis_url, prefix=settings.cache_prefix)
    if settings.cache_backend == "memory":
        return MemoryCache()
    return None


def build_services(
    uow_factory,
    cache: Cache | None,
    clock=None,
    ttl: int = 86400,
    pool: AsyncConnectionPool | None = None,
    model_resolver: PostgresModelResolver | None = None,
) -> AclServices:
    """Wire services over any unit of work factory and cache backend."""
    cache_layer = CacheLayer(cache, ttl=ttl)
    resolver = ImplicationResolver(cache_layer)
    invalidation = InvalidationCoordinator(uow_factory, resolver, cache_layer)
    permissions = EffectivePermissionComputer(uow_factory, resolver, cache_layer)
    assignments = RoleAssignmentResolver(uow_factory, clock or SystemClock())
    return AclServices(
        pool=pool,
        cache=cache,
        model_resolver=model_resolver,
        permissions=permissions,
        assignments=assignments,
        invalidation=invalidation,
        checker=AclPermissionChecker(assignments, permissions),
        create_permission=CreatePermissionUseCase(uow_factory, invalidation),
        update_permission=UpdatePermissionUseCase(uow_factory, invalidation),
        delete_permission=DeletePermissionUseCase(uow_factory, invalidation),
        link_implication=LinkImplicationUseCase(uow_factory, invalidation),
        unlink_implication=UnlinkImplicationUseCase(uow_factory, invalidation),
        create_role=CreateRoleUseCase(uow_factory, invalidation),
        update_role=UpdateRoleUseCase(uow_factory, invalidation),
        delete_role=DeleteRoleUseCase(uow_factory, invalidation),
        set_grant=SetGrantUseCase(uow_factory, invalidation),
        revoke_grant=RevokeGrantUseCase(uow_factory, invalidation),
        sync_grants=SyncGrantsUseCase(uow_factory, invalidation),
        reset_cache=ResetCacheUseCase(invalidation),
    )


def create_services(settings: Settings | None = None) -> AclServices:
    """Composition root - PostgreSQL graph store plus the configured cache."""
    settings = settings or get_settings()
    pool = create_pool(settings.database_url, settings.db_pool_min_size, settings.db_pool_max_size)
    return build_services(
        create_uow_factory(pool),
        create_cache(settings),
        ttl=settings.cache_ttl,
        pool=pool,
        model_resolver=(
            PostgresModelResolver(pool, settings.model_tables) if settings.model_tables else None
        ),
    )


async def handle_acl_error(req, resp, ex, params):
    if isinstance(ex, NotFound):
        resp.status = falcon.HTTP_404
    elif isinstance(ex, ValidationError):
        resp.status = falcon.HTTP_400
    elif isinstance(ex, StorageError):
        logger.error("Storage error on %s %s: %s", req.method, req.path, ex)
        resp.status = falcon.HTTP_503
    else:
        resp.status = falcon.HTTP_500
    resp.media = {"error": str(ex)}


def create_aclgraph_app(services: AclServices | None = None):
    """Build Falcon app with all dependencies."""
    services = services or create_services()

    app = falcon.asgi.App(
        middleware=[
            LifespanMiddleware(services.pool, services.cache),
            TrustedSubjectMiddleware(),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    app.add_error_handler(AclError, handle_acl_error)

    health = HealthResource(services.pool)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/authorization/check", AuthorizationCheckResource(services.checker))
    app.add_route(
        "/v1/roles/{role_id}/permissions",
        EffectivePermissionsResource(services.permissions),
    )
    return app


def run_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_aclgraph_app(), host=host, port=port)


async def _run_cli(args) -> int:
    services = create_services()
    await services.open()
    try:
        return await run_command(args, services)
    finally:
        await services.close()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(get_settings())
    if args.command == "serve":
        run_server(args.host, args.port)
        return 0
    return asyncio.run(_run_cli(args))


if __name__ == "__main__":
    sys.exit(main())
