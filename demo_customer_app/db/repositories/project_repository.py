from typing import TYPE_CHECKING

from demo_customer_app.db.repositories.base import InMemoryRepository

if TYPE_CHECKING:
    from demo_customer_app.domains.projects.entities import Project


class ProjectRepository(InMemoryRepository["Project"]):
    """Репозиторий проектов"""
