"""Grant effect for role permissions."""

from enum import StrEnum


class Effect(StrEnum):
    """Whether a grant allows or explicitly denies a permission."""

    ALLOW = "ALLOW"
    DENY = "DENY"
