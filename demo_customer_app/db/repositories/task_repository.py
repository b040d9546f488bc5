from typing import TYPE_CHECKING

from demo_customer_app.db.repositories.base import InMemoryRepository

if TYPE_CHECKING:
    from demo_customer_app.domains.tasks.entities import Task


class TaskRepository(InMemoryRepository["Task"]):
    """Репозиторий задач"""
