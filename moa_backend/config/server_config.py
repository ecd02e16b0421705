from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .backend_config import backend_config
from .logger_config import LoggerConfig

LOG_FORMAT = "%(asctime)s - [%(levelname)s] [%(threadName)s] %(name)s::%(funcName)s %(message)s (%(filename)s:%(lineno)d)"


def log_handlers(type: str, logger_config: LoggerConfig) -> list[str]:
    """Determine uvicorn log handlers based on the logger settings

    Args:
        type (str): "default" or "access"
        logger_config (LoggerConfig): The logger settings to follow

    Returns:
        list[str]: Names of the handlers declared in the uvicorn log config
    """
    handlers = []
    if logger_config.log_to_console:
        handlers.append("access" if type == "access" else "default")
    if logger_config.log_to_file:
        handlers.append("log_file")
    return handlers


def build_log_config(logger_config: LoggerConfig | None = None) -> dict:
    """Build the uvicorn logging configuration dictionary

    Args:
        logger_config (LoggerConfig): Logger settings, loaded from the
            environment when omitted

    Returns:
        dict: A `logging.config.dictConfig` compatible dictionary
    """
    if logger_config is None:
        logger_config = LoggerConfig()

    default_handlers = log_handlers("default", logger_config)
    access_handlers = log_handlers("access", logger_config)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "format": LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": True,
            },
            "default_blank": {
                "()": "uvicorn.logging.DefaultFormatter",
                "format": LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": False,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "format": LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": True,
            },
        },
        "filters": {
            "healthcheck_filter": {"()": "moa_backend.libs.logger.HealthCheckFilter"},
            "favicon_filter": {"()": "moa_backend.libs.logger.FaviconFilter"},
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
            "log_file": {
                "formatter": "default_blank",
                "class": "logging.handlers.TimedRotatingFileHandler",
                "filename": logger_config.log_file,
                "when": "midnight",
                "interval": 1,
                "backupCount": 7,
                "encoding": "utf-8",
                "delay": True,
            },
            "access": {
                "formatter": "access",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "filters": ["healthcheck_filter", "favicon_filter"],
            },
        },
        "loggers": {
            "uvicorn": {
                "handlers": default_handlers,
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": default_handlers,
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": access_handlers,
                "level": "INFO",
                "propagate": False,
            },
        },
        "root": {
            "handlers": default_handlers,
            "level": "INFO",
        },
    }


class ServerConfig(BaseSettings):
    """Server configuration settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="SERVER_")

    dev_mode: bool = backend_config.server_dev_mode
    """Whether the server is running in development mode"""
    reload: bool = backend_config.server_reload
    """Enable auto-reload of the server on code changes (only in development mode)"""
    host: str = "127.0.0.1"
    """The host IP address the server binds to"""
    port: int = 8080  # Matches the "Local Server" entry of the OpenAPI servers
    """The port number used to access the server"""
    log_config: dict = Field(default_factory=build_log_config)
    """Logging configuration dictionary handed to uvicorn"""
