from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from ..config import config
from ..models.api_metadata import ApiMetadata
from .logger import Logger

log = Logger.get_logger(__name__)


class FastAPISetup:
    @classmethod
    def create_app(cls, api_metadata: ApiMetadata) -> FastAPI:
        """Create a fully configured FastAPI app

        Args:
            api_metadata (ApiMetadata): Metadata published in the documentation

        Returns:
            FastAPI: The application instance
        """
        app = FastAPI(
            title=api_metadata.title,
            version=api_metadata.version,
            description=api_metadata.description,
            openapi_url=config.openapi.url or None,
            docs_url=config.openapi.docs_url or None,
            redoc_url=config.openapi.redoc_url or None,
            lifespan=cls.lifespan,
        )
        app.state.api_metadata = api_metadata

        cls.setup_openapi(app, api_metadata)
        cls.setup_middlewares(app)
        cls.setup_routes(app)
        return app

    @classmethod
    def setup_openapi(cls, app: FastAPI, api_metadata: ApiMetadata) -> None:
        """Setup OpenAPI schema generation for the FastAPI app

        Args:
            app (FastAPI): The FastAPI application instance
            api_metadata (ApiMetadata): Metadata published in the schema

        Returns:
            None
        """
        log.info(f"Setting up OpenAPI configuration for {api_metadata.title}")

        def _custom_openapi():
            """Generate or return the cached OpenAPI schema"""
            from fastapi.openapi.utils import get_openapi

            if not app.openapi_schema:
                app.openapi_schema = get_openapi(
                    routes=app.routes,
                    **api_metadata.to_openapi_kwargs(),
                )
            return app.openapi_schema

        app.openapi = _custom_openapi

    @classmethod
    def setup_middlewares(cls, app: FastAPI) -> None:
        """Setup middlewares for the FastAPI app

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        from starlette.middleware.base import BaseHTTPMiddleware

        from ..middlewares.add_process_time import AddProcessTimeMiddleware
        from ..middlewares.catch_unhandled_error import CatchUnhandledErrorMiddleware

        log.info("Setting up middlewares")

        app.add_middleware(BaseHTTPMiddleware, dispatch=AddProcessTimeMiddleware())
        app.add_middleware(BaseHTTPMiddleware, dispatch=CatchUnhandledErrorMiddleware())

    @classmethod
    def setup_routes(cls, app: FastAPI) -> None:
        """Setup API routes for the FastAPI app

        Args:
            app (FastAPI): The FastAPI application instance

        Returns:
            None
        """
        from ..routers.root import core_router, root_router

        log.info("Setting up API routes")

        api_v1_router = APIRouter(prefix="/api/v1")
        api_v1_router.include_router(core_router)

        app.include_router(root_router)
        app.include_router(api_v1_router)

    @classmethod
    @asynccontextmanager
    async def lifespan(cls, app: FastAPI):
        try:
            Logger.setup_loggers()
            log.info(f"FastAPI application startup: {app.title} {app.version}")
            yield
        except Exception as e:
            log.error(f"Exception during lifespan: {e}")
            raise
        finally:
            log.info("FastAPI application shutdown.")
