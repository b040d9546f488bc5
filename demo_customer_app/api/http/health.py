from typing import Any, Dict

from fastapi import APIRouter, Depends

from demo_customer_app.api.dependencies import get_app_settings
from demo_customer_app.core.config import Settings

router = APIRouter(tags=["health"])

ENTITIES = ["Project", "Task", "Customer"]


@router.get("/")
@router.get("/health")
async def health_check(app_settings: Settings = Depends(get_app_settings)) -> Dict[str, Any]:
    """Проверка состояния сервиса"""
    return {
        "status": "ok",
        "service": app_settings.service_name,
        "version": app_settings.service_version,
        "entities": ENTITIES,
    }
