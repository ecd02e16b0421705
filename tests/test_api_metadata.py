import json
import logging
from urllib.parse import urlsplit

import pytest
from pydantic import ValidationError

from moa_backend.config import OpenAPIConfig, load_openapi_config
from moa_backend.libs import DEFAULT_API_METADATA, build_api_metadata, get_api_metadata
from moa_backend.models import ApiMetadata, Contact, ServerEntry
from moa_backend.models.api_metadata import EMAIL_PATTERN


def test_get_api_metadata_is_deterministic():
    first = get_api_metadata()
    second = get_api_metadata()

    assert first == second
    assert first is second


def test_default_metadata_literals():
    metadata = DEFAULT_API_METADATA

    assert metadata.title == "MOA Backend API"
    assert metadata.description == "Shared household finance app MOAs RESTful backend API"
    assert metadata.version == "0.0.1-SNAPSHOT"
    assert metadata.contact == Contact(name="MOA Team", email="contact@moa.com")


def test_servers_keep_insertion_order():
    servers = DEFAULT_API_METADATA.servers

    assert [server.url for server in servers] == [
        "http://localhost:8080",
        "https://api.moa.com",
    ]
    assert [server.description for server in servers] == [
        "Local Server",
        "Production Server",
    ]


def test_server_urls_are_absolute():
    for server in DEFAULT_API_METADATA.servers:
        parts = urlsplit(server.url)
        assert parts.scheme in ("http", "https")
        assert parts.hostname


def test_contact_email_shape():
    assert EMAIL_PATTERN.match(DEFAULT_API_METADATA.contact.email)


def test_version_is_not_empty():
    assert DEFAULT_API_METADATA.version


def test_metadata_is_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_API_METADATA.title = "Changed"
    with pytest.raises(ValidationError):
        DEFAULT_API_METADATA.servers[0].url = "http://example.com"


def test_default_config_builds_default_metadata(clean_openapi_env):
    assert build_api_metadata(load_openapi_config()) == DEFAULT_API_METADATA


def test_to_openapi_kwargs():
    kwargs = DEFAULT_API_METADATA.to_openapi_kwargs()

    assert kwargs == {
        "title": "MOA Backend API",
        "version": "0.0.1-SNAPSHOT",
        "description": "Shared household finance app MOAs RESTful backend API",
        "contact": {"name": "MOA Team", "email": "contact@moa.com"},
        "servers": [
            {"url": "http://localhost:8080", "description": "Local Server"},
            {"url": "https://api.moa.com", "description": "Production Server"},
        ],
    }


# --------------------------------------------------------------------------- #
# Environment overrides
# --------------------------------------------------------------------------- #


def test_environment_overrides(clean_openapi_env):
    clean_openapi_env.setenv("OPENAPI_TITLE", "MOA Staging API")
    clean_openapi_env.setenv("OPENAPI_VERSION", "0.1.0")
    clean_openapi_env.setenv(
        "OPENAPI_SERVERS",
        json.dumps([{"url": "https://staging.moa.com", "description": "Staging Server"}]),
    )

    metadata = build_api_metadata(load_openapi_config())

    assert metadata.title == "MOA Staging API"
    assert metadata.version == "0.1.0"
    assert metadata.description == DEFAULT_API_METADATA.description
    assert metadata.servers == (
        ServerEntry(url="https://staging.moa.com", description="Staging Server"),
    )


@pytest.mark.parametrize(
    "name, value",
    [
        ("OPENAPI_SERVERS", "not json"),
        ("OPENAPI_SERVERS", json.dumps([{"url": "ftp://moa.com", "description": "FTP"}])),
        ("OPENAPI_SERVERS", json.dumps([{"url": "localhost", "description": "No scheme"}])),
        ("OPENAPI_CONTACT_EMAIL", "nobody"),
        ("OPENAPI_VERSION", "  "),
    ],
)
def test_invalid_environment_falls_back_to_defaults(clean_openapi_env, caplog, name, value):
    clean_openapi_env.setenv(name, value)

    with caplog.at_level(logging.WARNING):
        openapi_config = load_openapi_config()

    assert isinstance(openapi_config, OpenAPIConfig)
    assert build_api_metadata(openapi_config) == DEFAULT_API_METADATA
    assert "Invalid OpenAPI configuration" in caplog.text


# --------------------------------------------------------------------------- #
# Value validation
# --------------------------------------------------------------------------- #


def test_server_entry_rejects_invalid_port():
    with pytest.raises(ValidationError):
        ServerEntry(url="http://localhost:notaport", description="Broken")


def test_server_entry_accepts_port():
    server = ServerEntry(url="http://localhost:8080", description="Local Server")

    assert server.url == "http://localhost:8080"


def test_api_metadata_rejects_empty_version():
    with pytest.raises(ValidationError):
        ApiMetadata(
            title="MOA Backend API",
            description="",
            version="",
            contact=Contact(name="MOA Team", email="contact@moa.com"),
            servers=(),
        )
