
import logging
from typing import Callable

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_DETAIL = "Internal server error"


class ExceptionMiddleware(BaseHTTPMiddleware):
    """Last-resort handler: HTTP errors keep their status, anything else becomes a logged 500."""

    async def dispatch(self, request: Request, call_next: Callable) -> JSONResponse:
        try:
            return await call_next(request)
        except HTTPException as exc:
            return JSONResponse(status_code=exc.status_code,
                                content={"detail": exc.detail},
                                headers=exc.headers)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            # internals stay in the log
            return JSONResponse(status_code=500,
                                content={"detail": UNEXPECTED_ERROR_DETAIL})
