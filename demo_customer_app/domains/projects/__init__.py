from demo_customer_app.domains.projects.entities import Project
from demo_customer_app.domains.projects.schemas import ProjectBase, ProjectCreate, ProjectResponse
from demo_customer_app.domains.projects.services import ProjectService

__all__ = [
    "Project",
    "ProjectBase", "ProjectCreate", "ProjectResponse",
    "ProjectService",
]
