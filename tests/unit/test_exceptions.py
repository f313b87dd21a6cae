"""Unit tests for domain exceptions."""

import pytest

from aclgraph.domain.exceptions import (
    AclError,
    CacheUnavailable,
    NotFound,
    RoleInUse,
    StorageError,
    ValidationError,
)


def test_validation_error_inherits_acl_error() -> None:
    """ValidationError is a subclass of AclError."""
    assert issubclass(ValidationError, AclError)


def test_role_in_use_is_validation_error() -> None:
    """RoleInUse is reported like any other validation failure."""
    assert issubclass(RoleInUse, ValidationError)


def test_storage_and_cache_errors_inherit_acl_error() -> None:
    assert issubclass(StorageError, AclError)
    assert issubclass(CacheUnavailable, AclError)


def test_raise_not_found_catchable_as_acl_error() -> None:
    """NotFound can be caught as AclError."""
    with pytest.raises(AclError):
        raise NotFound("Role", "admin")


def test_not_found_keeps_entity_and_ref() -> None:
    error = NotFound("Permission", 12)
    assert error.entity == "Permission"
    assert error.ref == 12
    assert str(error) == "Permission not found: 12"


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "Role 'editor' is still assigned"
    with pytest.raises(RoleInUse, match=msg):
        raise RoleInUse(msg)
