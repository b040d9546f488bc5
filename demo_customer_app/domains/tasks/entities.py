import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class Task:
    """Сущность задачи"""

    id: uuid.UUID
    title: str
    completed: bool
    priority: int
    created_at: datetime

    @classmethod
    def create_task(cls, title: str, completed: bool, priority: int) -> "Task":
        """Создание новой задачи"""
        return cls(
            id=uuid.uuid4(),
            title=title,
            completed=completed,
            priority=priority,
            created_at=datetime.now(timezone.utc),
        )
