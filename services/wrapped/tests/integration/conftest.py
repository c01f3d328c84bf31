import pytest
from fastapi.testclient import TestClient

from wrapped.app import app, get_settings
from wrapped.config import WrappedConfig


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def limited_client():
    """Client whose settings only read two input lines."""
    app.dependency_overrides[get_settings] = lambda: WrappedConfig(
        _env_file=None, max_input_lines=2
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
