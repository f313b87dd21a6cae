"""Application ports - interfaces for external adapters."""

from aclgraph.application.ports.cache import Cache
from aclgraph.application.ports.clock import Clock
from aclgraph.application.ports.model_resolver import ModelResolver
from aclgraph.application.ports.permission_checker import PermissionChecker
from aclgraph.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Cache",
    "Clock",
    "ModelResolver",
    "PermissionChecker",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
