import logging
import time

from fastapi import Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Логирование каждого HTTP-запроса"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration:.3f}s)"
        )
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Некорректное тело или путь запроса: 422 без обращения к сервисам"""
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return await request_validation_exception_handler(request, exc)
