import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.exceptions import BookingError, StoreUnavailable

logger = logging.getLogger(__name__)


async def booking_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, BookingError) else BookingError(str(exc))
    if isinstance(error, StoreUnavailable):
        logger.error("Store unavailable while handling %s %s: %s", request.method, request.url.path, error.message)
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookingError, booking_error_handler)
