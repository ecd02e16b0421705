import pytest
from fastapi.testclient import TestClient

from moa_backend.libs import DEFAULT_API_METADATA, FastAPISetup

OPENAPI_ENV_VARS = [
    "OPENAPI_TITLE",
    "OPENAPI_DESCRIPTION",
    "OPENAPI_VERSION",
    "OPENAPI_CONTACT_NAME",
    "OPENAPI_CONTACT_EMAIL",
    "OPENAPI_SERVERS",
]


@pytest.fixture
def clean_openapi_env(monkeypatch):
    for name in OPENAPI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def app():
    return FastAPISetup.create_app(DEFAULT_API_METADATA)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
