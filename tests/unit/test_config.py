"""Unit tests for settings and composition helpers."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from aclgraph.config import Settings
from aclgraph.infrastructure.cache import MemoryCache, RedisCache
from aclgraph.main import create_cache


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.cache_backend == "memory"
    assert settings.cache_ttl == 86400
    assert settings.model_tables == {}


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CACHE_BACKEND", "none")
    monkeypatch.setenv("CACHE_TTL", "60")
    monkeypatch.setenv("MODEL_TABLES", '{"User": "users", "Team": "public.teams"}')

    settings = Settings(_env_file=None)
    assert settings.cache_backend == "none"
    assert settings.cache_ttl == 60
    assert settings.model_tables == {"User": "users", "Team": "public.teams"}


def test_rejects_non_positive_ttl() -> None:
    with pytest.raises(PydanticValidationError):
        Settings(_env_file=None, cache_ttl=0)


def test_create_cache_by_backend() -> None:
    assert isinstance(create_cache(Settings(_env_file=None, cache_backend="memory")), MemoryCache)
    assert isinstance(create_cache(Settings(_env_file=None, cache_backend="redis")), RedisCache)
    assert create_cache(Settings(_env_file=None, cache_backend="none")) is None
