import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.api.settings import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(
        cors_allow_origins=["*"],
        log_level="DEBUG",
        openapi_output_path=str(tmp_path / "interfaces" / "openapi-spec.json"),
    )


@pytest.fixture
def client(settings):
    # A fresh app per test so the in-memory store never leaks between tests
    return TestClient(create_app(settings))
