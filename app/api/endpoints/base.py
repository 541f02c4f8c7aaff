from fastapi import APIRouter, HTTPException, Request
from fastapi.routing import APIRoute
from sqlalchemy.exc import SQLAlchemyError
from typing import Callable
from datetime import datetime
import logging

logger = logging.getLogger("api-router")

INTERNAL_ERROR_MESSAGE = "Internal server error."


class LoggingRoute(APIRoute):
    """Logs every request and turns storage failures into HTTP 500."""

    def get_route_handler(self) -> Callable:
        original_handler = super().get_route_handler()

        async def custom_route_handler(request: Request):
            start_time = datetime.now()
            try:
                response = await original_handler(request)
            except SQLAlchemyError as e:
                logger.error(f"Storage error in {request.method} {request.url}: {e}")
                raise HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE) from e
            except HTTPException as e:
                logger.error(f"Error in {request.method} {request.url}: {e.detail}")
                raise
            exec_time = (datetime.now() - start_time).total_seconds()
            logger.info(f"{request.method} {request.url} - {response.status_code} ({exec_time:.2f}s)")
            return response

        return custom_route_handler


class LoggedRouter(APIRouter):
    def __init__(self, **kwargs):
        kwargs.pop("route_class", None)
        super().__init__(route_class=LoggingRoute, **kwargs)
