from functools import lru_cache

from ..config import OpenAPIConfig, config
from ..models.api_metadata import ApiMetadata, Contact, ServerEntry
from .logger import Logger

log = Logger.get_logger(__name__)


DEFAULT_API_METADATA = ApiMetadata(
    title="MOA Backend API",
    description="Shared household finance app MOAs RESTful backend API",
    version="0.0.1-SNAPSHOT",
    contact=Contact(name="MOA Team", email="contact@moa.com"),
    servers=(
        ServerEntry(url="http://localhost:8080", description="Local Server"),
        ServerEntry(url="https://api.moa.com", description="Production Server"),
    ),
)
"""Metadata published when nothing is overridden in the environment"""


def build_api_metadata(openapi_config: OpenAPIConfig) -> ApiMetadata:
    """Build the API metadata descriptor from OpenAPI settings

    Args:
        openapi_config (OpenAPIConfig): The settings to read the values from

    Returns:
        ApiMetadata: The immutable descriptor
    """
    return ApiMetadata(
        title=openapi_config.title,
        description=openapi_config.description,
        version=openapi_config.version,
        contact=Contact(
            name=openapi_config.contact_name,
            email=openapi_config.contact_email,
        ),
        servers=tuple(openapi_config.servers),
    )


@lru_cache(maxsize=1)
def get_api_metadata() -> ApiMetadata:
    """Get the API metadata of the running process

    The descriptor is built from the global configuration on first call and
    the same instance is returned afterwards.

    Returns:
        ApiMetadata: The immutable descriptor
    """
    api_metadata = build_api_metadata(config.openapi)
    log.debug(
        f"API metadata: {api_metadata.title} {api_metadata.version} "
        f"({len(api_metadata.servers)} servers)"
    )
    return api_metadata
