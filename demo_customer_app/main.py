import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from demo_customer_app.api.http import (
    customers_router,
    health_router,
    projects_router,
    tasks_router,
)
from demo_customer_app.api.middleware import RequestLoggingMiddleware, validation_exception_handler
from demo_customer_app.core.config import Settings, settings
from demo_customer_app.core.logging_config import setup_logging
from demo_customer_app.core.state import AppState

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Сборка приложения с собственным набором хранилищ"""
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level)

    app = FastAPI(
        title=app_settings.service_name,
        description="Демонстрационный CRUD-сервис: проекты, задачи, клиенты",
        version=app_settings.service_version
    )
    app.state.settings = app_settings
    app.state.repositories = AppState()

    app.add_middleware(RequestLoggingMiddleware)
    # CORS без ограничений
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Подключаем роутеры
    app.include_router(health_router)
    app.include_router(projects_router)
    app.include_router(tasks_router)
    app.include_router(customers_router)

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Server running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
