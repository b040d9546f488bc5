from pydantic import BaseModel, ConfigDict
import uuid
from datetime import datetime


class CustomerBase(BaseModel):
    """Базовая схема клиента"""
    name: str
    email: str
    active: bool


class CustomerCreate(CustomerBase):
    """Схема для создания клиента"""

    model_config = ConfigDict(strict=True)


class CustomerResponse(CustomerBase):
    """Схема для ответа с данными клиента"""
    id: uuid.UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
