import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Project:
    """Сущность проекта"""

    id: uuid.UUID
    name: str
    status: str
    budget: float
    created_at: datetime

    @classmethod
    def create_project(cls, name: str, status: str, budget: float) -> "Project":
        """Создание нового проекта"""
        return cls(
            id=uuid.uuid4(),
            name=name,
            status=status,
            budget=budget,
            created_at=datetime.now(timezone.utc),
        )
