import logging

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from ..models.api_metadata import EMAIL_PATTERN, ServerEntry

# The Logger factory depends on the configuration, so a plain logger is used here
log = logging.getLogger(__name__)


class OpenAPIConfig(BaseSettings):
    """OpenAPI configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="OPENAPI_")

    url: str = "/openapi.json"
    """The URL path where the OpenAPI schema is served (left empty to disable)"""
    docs_url: str = "/docs"
    """The URL path of the interactive documentation UI (left empty to disable)"""
    redoc_url: str = "/redoc"
    """The URL path of the ReDoc documentation UI (left empty to disable)"""
    title: str = "MOA Backend API"
    """The title of the OpenAPI documentation"""
    description: str = "Shared household finance app MOAs RESTful backend API"
    """A brief description of the API"""
    version: str = "0.0.1-SNAPSHOT"
    """The version of the API"""
    contact_name: str = "MOA Team"
    """Name of the team maintaining the API"""
    contact_email: str = "contact@moa.com"
    """Email address of the team maintaining the API"""
    servers: list[ServerEntry] = [
        ServerEntry(url="http://localhost:8080", description="Local Server"),
        ServerEntry(url="https://api.moa.com", description="Production Server"),
    ]
    """Servers listed in the documentation, in display order (JSON in env)"""

    @field_validator("version")
    @classmethod
    def check_version(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Version must not be empty")
        return value

    @field_validator("contact_email")
    @classmethod
    def check_contact_email(cls, value: str) -> str:
        if not EMAIL_PATTERN.match(value):
            raise ValueError(f"Contact email is not a valid address: {value!r}")
        return value


def load_openapi_config() -> OpenAPIConfig:
    """Load the OpenAPI settings from the environment

    Invalid values never prevent the service from starting: the whole
    OpenAPI configuration falls back to its defaults instead.

    Returns:
        OpenAPIConfig: The loaded settings, or the defaults
    """
    try:
        return OpenAPIConfig()
    except (ValidationError, SettingsError) as e:
        log.warning(f"Invalid OpenAPI configuration, using defaults: {e}")
        return OpenAPIConfig.model_construct()
