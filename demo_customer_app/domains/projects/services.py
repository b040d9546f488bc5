import logging
from typing import List, Optional
import uuid

from demo_customer_app.db.repositories.project_repository import ProjectRepository
from demo_customer_app.domains.projects.entities import Project
from demo_customer_app.domains.projects.schemas import ProjectCreate

logger = logging.getLogger(__name__)


class ProjectService:
    """Сервис для работы с проектами"""

    def __init__(self, repository: ProjectRepository):
        self.project_repository = repository

    async def create(self, project_data: ProjectCreate) -> Project:
        """Создание нового проекта"""
        project = Project.create_project(
            name=project_data.name,
            status=project_data.status,
            budget=project_data.budget,
        )
        created_project = await self.project_repository.append(project)
        logger.info(f"Created project {created_project.id}")
        return created_project

    async def list(self) -> List[Project]:
        """Получение всех проектов"""
        return await self.project_repository.list_all()

    async def get(self, project_id: uuid.UUID) -> Optional[Project]:
        """Получение проекта по идентификатору"""
        return await self.project_repository.find_by_id(project_id)
