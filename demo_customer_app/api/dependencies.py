from fastapi import Request

from demo_customer_app.core.config import Settings
from demo_customer_app.core.state import AppState
from demo_customer_app.domains.customers.services import CustomerService
from demo_customer_app.domains.projects.services import ProjectService
from demo_customer_app.domains.tasks.services import TaskService


def get_app_state(request: Request) -> AppState:
    return request.app.state.repositories


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_project_service(request: Request) -> ProjectService:
    return ProjectService(get_app_state(request).projects)


def get_task_service(request: Request) -> TaskService:
    return TaskService(get_app_state(request).tasks)


def get_customer_service(request: Request) -> CustomerService:
    return CustomerService(get_app_state(request).customers)
