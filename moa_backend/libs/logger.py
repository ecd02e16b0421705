from __future__ import annotations

import logging
import os
from enum import Enum
from logging import handlers

from ..config import config
from ..config.server_config import LOG_FORMAT

# --------------------------------------------------------------------------- #


class LogLevel(int, Enum):
    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


# --------------------------------------------------------------------------- #


class ConsoleFormatter(logging.Formatter):
    green = "\x1b[32m"
    bold_green = "\x1b[32;1m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    bg_red = "\x1b[41m"
    reset = "\x1b[0m"

    FORMATS = {
        logging.DEBUG: reset + LOG_FORMAT + reset,
        logging.INFO: bold_green + LOG_FORMAT + reset,
        logging.WARNING: yellow + LOG_FORMAT + reset,
        logging.ERROR: bold_red + LOG_FORMAT + reset,
        logging.CRITICAL: bg_red + LOG_FORMAT + reset,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, LOG_FORMAT)
        formatter = logging.Formatter(fmt=log_fmt, datefmt=Logger._datefmt)
        return formatter.format(record)


# --------------------------------------------------------------------------- #


class FileFormatter(logging.Formatter):
    def format(self, record):
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=Logger._datefmt)
        return formatter.format(record)


# --------------------------------------------------------------------------- #


class Logger:
    """Logger instance generator"""

    # * List of loggers
    __loggers = {}

    # * Class parameters
    _default_name = "unknown_logger"
    _default_level = getattr(LogLevel, config.logger.log_level.upper(), LogLevel.INFO)
    _datefmt = "%Y-%m-%d %H:%M:%S"

    # * Single file handler shared by every logger, so rotation happens once
    _file_handler: handlers.TimedRotatingFileHandler | None = None

    @classmethod
    def _get_file_handler(cls) -> handlers.TimedRotatingFileHandler:
        """Get the shared file handler or create it if it doesn't exist"""
        if cls._file_handler is None:
            log_dir = os.path.dirname(config.logger.log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = handlers.TimedRotatingFileHandler(
                filename=config.logger.log_file,
                when="midnight",  # Rotate at midnight
                interval=1,  # Every 1 day
                backupCount=14,  # Keep 14 days of logs
                encoding="utf-8",
            )
            # Levels are enforced by each logger
            file_handler.setLevel(logging.NOTSET)
            file_handler.setFormatter(FileFormatter())
            cls._file_handler = file_handler
        return cls._file_handler

    @classmethod
    def _build_handlers(cls, level: int) -> list[logging.Handler]:
        """Get the console and file handlers enabled by the configuration"""
        built = []

        if config.logger.log_to_console:
            handler = logging.StreamHandler()
            handler.setLevel(level)
            handler.setFormatter(ConsoleFormatter())
            built.append(handler)

        if config.logger.log_to_file:
            built.append(cls._get_file_handler())

        return built

    @classmethod
    def get_logger(
        cls,
        name: str | None = None,
        level: int | None = None,
    ) -> logging.Logger:
        """Get a logger instance or create it if it doesn't exist

        Parameters:
            name (str): Logger name
            level (int): Logger level

        Returns:
            Logger: Logger instance
        """
        # * Set default values
        if name is None:
            name = cls._default_name
        if level is None:
            level = cls._default_level

        # * Check if logger already exists
        if name in cls.__loggers:
            return cls.__loggers[name]

        # * Create logger
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in cls._build_handlers(level):
            logger.addHandler(handler)

        # * Add logger to list
        cls.__loggers[name] = logger
        logger.propagate = False

        return logger

    @classmethod
    def setup_loggers(cls):
        """Setup existing third-party loggers based on the configuration"""

        for logger_to_setup in config.logger.loggers_to_setup:
            # ? Set logger level and disable propagation
            log_level = getattr(logging, str(logger_to_setup["level"]), logging.INFO)
            logger = logging.getLogger(str(logger_to_setup["name"]))
            logger.setLevel(log_level)
            logger.propagate = False

            logger.handlers.clear()
            built = cls._build_handlers(log_level)
            for handler in built:
                logger.addHandler(handler)

            # ? Add filters to the logger only, the file handler is shared
            for filter_name in logger_to_setup.get("filters", []):
                log_filter = LOG_FILTERS.get(filter_name)
                if log_filter is None:
                    logging.getLogger(cls._default_name).warning(
                        f"Unknown log filter '{filter_name}' for logger {logger.name}"
                    )
                    continue
                logger.addFilter(log_filter())


# --------------------------------------------------------------------------- #
# The following classes are used by uvicorn to filter access logs
# --------------------------------------------------------------------------- #


class HealthCheckFilter(logging.Filter):
    def filter(self, record):
        return "/healthcheck" not in record.getMessage()


# --------------------------------------------------------------------------- #


class FaviconFilter(logging.Filter):
    def filter(self, record):
        return "/favicon.ico" not in record.getMessage()


LOG_FILTERS: dict[str, type[logging.Filter]] = {
    "healthcheck_filter": HealthCheckFilter,
    "favicon_filter": FaviconFilter,
}
"""Filters available by name in `LoggerConfig.loggers_to_setup`"""
