import logging
from typing import List, Optional
import uuid

from demo_customer_app.db.repositories.task_repository import TaskRepository
from demo_customer_app.domains.tasks.entities import Task
from demo_customer_app.domains.tasks.schemas import TaskCreate

logger = logging.getLogger(__name__)


class TaskService:
    """Сервис для работы с задачами"""

    def __init__(self, repository: TaskRepository):
        self.task_repository = repository

    async def create(self, task_data: TaskCreate) -> Task:
        """Создание новой задачи"""
        task = Task.create_task(
            title=task_data.title,
            completed=task_data.completed,
            priority=task_data.priority,
        )
        created_task = await self.task_repository.append(task)
        logger.info(f"Created task {created_task.id}")
        return created_task

    async def list(self) -> List[Task]:
        """Получение всех задач"""
        return await self.task_repository.list_all()

    async def get(self, task_id: uuid.UUID) -> Optional[Task]:
        """Получение задачи по идентификатору"""
        return await self.task_repository.find_by_id(task_id)
