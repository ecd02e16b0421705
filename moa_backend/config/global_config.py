from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger_config import LoggerConfig
from .openapi_config import OpenAPIConfig, load_openapi_config
from .server_config import ServerConfig


class GlobalConfig(BaseSettings):
    """Global configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False)

    logger: LoggerConfig = Field(default_factory=LoggerConfig)
    """Logger configuration settings"""
    openapi: OpenAPIConfig = Field(default_factory=load_openapi_config)
    """OpenAPI configuration settings (defaults when the environment is invalid)"""
    server: ServerConfig = Field(default_factory=ServerConfig)
    """Server configuration settings"""


# --------------------------------------------------------------------------- #

config = GlobalConfig()
"""Global configuration instance

Example:
>>> from moa_backend.config import config
>>> print(config.openapi.title)
MOA Backend API
"""
