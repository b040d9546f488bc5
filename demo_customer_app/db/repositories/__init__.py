from demo_customer_app.db.repositories.base import InMemoryRepository
from demo_customer_app.db.repositories.project_repository import ProjectRepository
from demo_customer_app.db.repositories.task_repository import TaskRepository
from demo_customer_app.db.repositories.customer_repository import CustomerRepository

__all__ = [
    "InMemoryRepository",
    "ProjectRepository",
    "TaskRepository",
    "CustomerRepository",
]
