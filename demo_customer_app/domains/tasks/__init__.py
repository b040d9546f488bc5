from demo_customer_app.domains.tasks.entities import Task
from demo_customer_app.domains.tasks.schemas import TaskBase, TaskCreate, TaskResponse
from demo_customer_app.domains.tasks.services import TaskService

__all__ = [
    "Task",
    "TaskBase", "TaskCreate", "TaskResponse",
    "TaskService",
]
