from moa_backend.config import (
    BackendConfig,
    LoggerConfig,
    ServerConfig,
    backend_config,
    build_log_config,
)


def test_backend_config_reads_environment(monkeypatch):
    monkeypatch.setenv("BACKEND_SERVER_DEV_MODE", "true")
    monkeypatch.setenv("BACKEND_SERVER_LOG_LEVEL", "DEBUG")

    settings = BackendConfig()

    assert settings.server_dev_mode is True
    assert settings.server_reload is False
    assert settings.server_log_level == "DEBUG"


def test_server_and_logger_defaults_come_from_backend_config(monkeypatch):
    for name in ("SERVER_DEV_MODE", "SERVER_RELOAD", "LOGGER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    server = ServerConfig()
    logger = LoggerConfig()

    assert server.dev_mode == backend_config.server_dev_mode
    assert server.reload == backend_config.server_reload
    assert logger.log_level == backend_config.server_log_level


def test_uvicorn_file_handler_follows_logger_config(monkeypatch, tmp_path):
    log_file = str(tmp_path / "backend.log")
    monkeypatch.setenv("LOGGER_LOG_TO_FILE", "t")
    monkeypatch.setenv("LOGGER_LOG_FILE", log_file)

    logger = LoggerConfig()
    log_config = ServerConfig().log_config

    assert logger.log_to_file is True
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        assert "log_file" in log_config["loggers"][name]["handlers"]
    assert "log_file" in log_config["root"]["handlers"]
    assert log_config["handlers"]["log_file"]["filename"] == log_file


def test_uvicorn_console_handler_follows_logger_config(monkeypatch):
    monkeypatch.setenv("LOGGER_LOG_TO_CONSOLE", "0")
    monkeypatch.setenv("LOGGER_LOG_TO_FILE", "false")

    assert LoggerConfig().log_to_console is False
    assert ServerConfig().log_config["loggers"]["uvicorn"]["handlers"] == []


def test_build_log_config_from_explicit_settings():
    log_config = build_log_config(LoggerConfig(log_to_console=True, log_to_file=False))

    assert log_config["loggers"]["uvicorn"]["handlers"] == ["default"]
    assert log_config["loggers"]["uvicorn.access"]["handlers"] == ["access"]
