from fastapi import Request
from fastapi.responses import JSONResponse, Response

from ..config import config
from ..libs.logger import Logger

log = Logger.get_logger(__name__)


class CatchUnhandledErrorMiddleware:
    """Turn any exception escaping a route into a JSON 500 response"""

    async def __call__(self, request: Request, call_next):
        try:
            response: Response | JSONResponse = await call_next(request)
            return response

        except Exception as e:
            log.critical(f"Unhandled error for request {request.url.path}: {str(e)}")

            # Exception details are only exposed in development mode
            detail = str(e) if config.server.dev_mode else "An unexpected error occurred"
            return JSONResponse(
                status_code=500,
                content={"message": "Internal Server Error", "detail": detail},
            )
