"""
Shared pytest fixtures for greeter tests.
"""
import pytest
from fastapi.testclient import TestClient

from greeter.core.config import Settings
from greeter.main import create_app
from greeter.registry.users import UserRegistry

GREETER_ENV = ("GREETER_HOST", "GREETER_PORT", "GREETER_LOG_LEVEL", "GREETER_USERS_CSV")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every GREETER_* variable so Settings sees its defaults."""
    for var in GREETER_ENV:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env):
    return Settings()


@pytest.fixture
def registry():
    return UserRegistry()


@pytest.fixture
def client(settings, registry):
    """Test client over a fresh app that shares the `registry` fixture."""
    with TestClient(create_app(settings=settings, registry=registry)) as c:
        yield c
