from pydantic import BaseModel, ConfigDict, Field
import uuid
from datetime import datetime

# Приоритет хранится как знаковое 32-битное целое
PRIORITY_MIN = -(2 ** 31)
PRIORITY_MAX = 2 ** 31 - 1


class TaskBase(BaseModel):
    """Базовая схема задачи"""
    title: str
    completed: bool
    priority: int = Field(..., ge=PRIORITY_MIN, le=PRIORITY_MAX)


class TaskCreate(TaskBase):
    """Схема для создания задачи"""

    model_config = ConfigDict(strict=True)


class TaskResponse(TaskBase):
    """Схема для ответа с данными задачи"""
    id: uuid.UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
