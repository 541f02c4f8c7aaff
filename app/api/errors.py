import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.endpoints.base import INTERNAL_ERROR_MESSAGE

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not Found, Please Check URL!"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    status_code = exc.status_code or 500
    message = exc.detail or INTERNAL_ERROR_MESSAGE
    # Неизвестный путь или метод -> 404
    if status_code in (404, 405):
        status_code = 404
        message = NOT_FOUND_MESSAGE
    logger.error(f"{status_code}: {message}")
    logger.info(request.url.path)
    return PlainTextResponse(str(message), status_code=status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Invalid request: {exc.errors()}")
    logger.info(request.url.path)
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error: {exc}")
    logger.info(request.url.path)
    return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
