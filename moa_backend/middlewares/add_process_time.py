import time

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from ..libs.logger import Logger

log = Logger.get_logger(__name__)


class AddProcessTimeMiddleware:
    """Report the request processing time in the `X-Process-Time` header"""

    header_name = "X-Process-Time"

    async def __call__(self, request: Request, call_next):
        start_time = time.perf_counter()
        response: Response | JSONResponse = await call_next(request)
        process_time = time.perf_counter() - start_time
        response.headers[self.header_name] = str(process_time)
        if "healthcheck" not in request.url.path:
            log.debug(f"Request {request.url.path} processed in {process_time} seconds")
        return response
