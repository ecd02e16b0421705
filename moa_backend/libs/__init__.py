from .api_metadata import DEFAULT_API_METADATA, build_api_metadata, get_api_metadata
from .fastapi_setup import FastAPISetup
from .logger import Logger
from .server import Server

# --------------------------------------------------------------------------- #

__all__ = [
    "DEFAULT_API_METADATA",
    "FastAPISetup",
    "Logger",
    "Server",
    "build_api_metadata",
    "get_api_metadata",
]
