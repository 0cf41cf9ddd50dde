import logging
import time
import uuid

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from bookmarker_api.context import request_id_var
from bookmarker_api.error_handlers import error_response

logger = logging.getLogger("bookmarker_api.request")

REQUEST_ID_HEADER = "X-Request-Id"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Binds a request id to the logging context for the whole request.

    Unhandled exceptions are rendered here so the 500 response and its
    traceback log still carry the request id.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or f"req-{uuid.uuid4().hex[:12]}"

        token = request_id_var.set(request_id)
        start = time.perf_counter()

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.exception("Unexpected error: %s", type(exc).__name__)
                response = error_response(
                    status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
                )

            latency_ms = max((time.perf_counter() - start) * 1000, 0.0)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "http_request_complete",
                extra={
                    "method": request.method,
                    "path": str(request.url.path),
                    "status_code": response.status_code,
                    "latency_ms": round(latency_ms, 3),
                },
            )
            return response
        finally:
            request_id_var.reset(token)
