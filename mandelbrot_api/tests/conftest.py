import pytest
from fastapi.testclient import TestClient

from mandelbrot_api.api.main import app
from mandelbrot_api.config.settings import Settings, get_settings

# Small grid so endpoint tests stay fast
TEST_SETTINGS = Settings(ROWS=20, COLUMNS=30, MAX_ITERATIONS=50, X_LABELS=5, Y_LABELS=7)


@pytest.fixture
def settings():
    return TEST_SETTINGS


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
