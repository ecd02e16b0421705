from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendConfig(BaseSettings):
    """Backend-wide defaults shared by the server and logger settings"""

    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="BACKEND_")

    server_dev_mode: bool = False
    """Enable development mode (exception details in 500 responses)"""
    server_reload: bool = False
    """Enable server auto-reload on code changes (only in development mode)"""
    server_log_level: str = "INFO"
    """Default logging level of the backend loggers"""


# --------------------------------------------------------------------------- #

backend_config = BackendConfig()
"""Backend configuration instance"""
