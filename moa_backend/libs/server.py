from fastapi import FastAPI

from ..config import config
from .logger import Logger

log = Logger.get_logger(__name__)

# --------------------------------------------------------------------------- #


class UvicornServer:
    """Uvicorn server, with auto-reload only in development mode"""

    def __init__(self, app_uri: str | FastAPI, reload: bool = False):
        self.app_uri = app_uri
        self.reload = reload

    def run(self):
        """Run the server until it is stopped"""
        import uvicorn

        log.info(
            f"Starting Uvicorn on {config.server.host}:{config.server.port} "
            f"(reload={self.reload})"
        )
        uvicorn.run(
            self.app_uri,
            host=config.server.host,
            port=config.server.port,
            log_level=config.logger.log_level.lower(),
            log_config=config.server.log_config,
            reload=self.reload,
        )


# --------------------------------------------------------------------------- #


class Server:
    """Server class to manage production and development servers"""

    def __init__(self, app_uri: str):
        self.app_uri = app_uri
        self.server = None

    def start(self):
        """Start the server based on the mode (production or development)"""
        if config.server.dev_mode:
            log.info("Starting server in development mode")
            self.server = UvicornServer(self.app_uri, reload=config.server.reload)
        else:
            log.info("Starting server in production mode")
            self.server = UvicornServer(self.app_uri, reload=False)

        self.server.run()
