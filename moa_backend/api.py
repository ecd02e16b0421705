from .libs import FastAPISetup, Logger, Server, get_api_metadata

# * Initialize Loggers
log = Logger.get_logger(__name__)

# * Build the process-wide API metadata and hand it to the FastAPI app
api_metadata = get_api_metadata()
app = FastAPISetup.create_app(api_metadata)


def start_server():
    """Start the backend server using Uvicorn"""
    log.info("Starting backend server...")
    server = Server("moa_backend.api:app")
    server.start()
