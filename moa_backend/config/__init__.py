from .backend_config import BackendConfig, backend_config
from .global_config import GlobalConfig, config
from .logger_config import LoggerConfig
from .openapi_config import OpenAPIConfig, load_openapi_config
from .server_config import ServerConfig, build_log_config

# --------------------------------------------------------------------------- #

__all__ = [
    "BackendConfig",
    "GlobalConfig",
    "LoggerConfig",
    "OpenAPIConfig",
    "ServerConfig",
    "backend_config",
    "build_log_config",
    "config",
    "load_openapi_config",
]
