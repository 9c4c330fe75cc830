"""
Request logging middleware for the medical tracking API.
"""
import time
import logging
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

COLLECTIONS = ("medications", "reminders", "vitals", "appointments")


def collection_for_path(path: str) -> str:
    """
    Name the record collection a request path belongs to.

    Args:
        path: Request URL path, e.g. ``/api/reminders/3/notify``

    Returns:
        str: The collection name, or ``"-"`` for paths outside ``/api/<collection>``
    """
    parts = path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] == "api" and parts[1] in COLLECTIONS:
        return parts[1]
    return "-"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with the collection it touches, its status and duration.

    Each response carries an ``X-Request-ID`` header matching the log lines
    and an ``X-Process-Time`` header in seconds.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        collection = collection_for_path(request.url.path)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"[{collection}] {request.method} {request.url.path} failed after "
                f"{time.perf_counter() - started:.4f}s (request {request_id}): {str(e)}"
            )
            raise

        duration = time.perf_counter() - started
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{duration:.6f}"

        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            f"[{collection}] {request.method} {request.url.path} -> {response.status_code} "
            f"in {duration:.4f}s (request {request_id})"
        )
        return response


def setup_middlewares(app):
    """
    Set up all custom middlewares for the application.

    Args:
        app: FastAPI application instance
    """
    app.add_middleware(RequestLoggingMiddleware)
