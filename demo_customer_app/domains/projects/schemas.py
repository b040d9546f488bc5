from pydantic import BaseModel, ConfigDict
import uuid
from datetime import datetime


class ProjectBase(BaseModel):
    """Базовая схема проекта"""
    name: str
    status: str
    budget: float


class ProjectCreate(ProjectBase):
    """Схема для создания проекта"""

    # NaN и бесконечности не являются числами JSON
    model_config = ConfigDict(strict=True, allow_inf_nan=False)


class ProjectResponse(ProjectBase):
    """Схема для ответа с данными проекта"""
    id: uuid.UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
