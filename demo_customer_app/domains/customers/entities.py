import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Customer:
    """Сущность клиента"""

    id: uuid.UUID
    name: str
    # Формат адреса не проверяется, уникальность не требуется
    email: str
    active: bool
    created_at: datetime

    @classmethod
    def create_customer(cls, name: str, email: str, active: bool) -> "Customer":
        """Создание нового клиента"""
        return cls(
            id=uuid.uuid4(),
            name=name,
            email=email,
            active=active,
            created_at=datetime.now(timezone.utc),
        )
