import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("storefront.access")


class TimingMiddleware(BaseHTTPMiddleware):
    """Log each request and expose its duration in ``X-Process-Time``"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path,
                    response.status_code, elapsed * 1000)
        return response
