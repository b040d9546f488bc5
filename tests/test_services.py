"""
Тесты сервисов: назначение идентификатора и времени создания, работа с хранилищами.
"""

import asyncio
import dataclasses
import uuid
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from demo_customer_app.db.repositories import CustomerRepository, ProjectRepository, TaskRepository
from demo_customer_app.domains.customers.schemas import CustomerCreate
from demo_customer_app.domains.customers.services import CustomerService
from demo_customer_app.domains.projects.schemas import ProjectCreate
from demo_customer_app.domains.projects.services import ProjectService
from demo_customer_app.domains.tasks.schemas import TaskCreate
from demo_customer_app.domains.tasks.services import TaskService


@pytest.fixture
def project_service():
    return ProjectService(ProjectRepository())


@pytest.fixture
def task_service():
    return TaskService(TaskRepository())


@pytest.fixture
def customer_service():
    return CustomerService(CustomerRepository())


class TestProjectService:

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamp(self, project_service):
        before = datetime.now(timezone.utc)

        project = await project_service.create(
            ProjectCreate(name="Apollo", status="planning", budget=2500.5)
        )

        assert isinstance(project.id, uuid.UUID)
        assert project.name == "Apollo"
        assert project.status == "planning"
        assert project.budget == 2500.5
        assert before <= project.created_at <= datetime.now(timezone.utc)

    @pytest.mark.asyncio
    async def test_create_accepts_any_field_contents(self, project_service):
        project = await project_service.create(ProjectCreate(name="", status="???", budget=-10.0))

        assert project.name == ""
        assert project.budget == -10.0

    @pytest.mark.parametrize("budget", [float("nan"), float("inf"), float("-inf")])
    def test_create_request_rejects_non_finite_budget(self, budget):
        with pytest.raises(ValidationError):
            ProjectCreate(name="Apollo", status="active", budget=budget)

    @pytest.mark.asyncio
    async def test_get_returns_created_project(self, project_service):
        project = await project_service.create(
            ProjectCreate(name="Apollo", status="active", budget=1.0)
        )

        assert await project_service.get(project.id) == project
        assert await project_service.get(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_projects_are_immutable(self, project_service):
        project = await project_service.create(
            ProjectCreate(name="Apollo", status="active", budget=1.0)
        )

        with pytest.raises(dataclasses.FrozenInstanceError):
            project.name = "Changed"


class TestTaskService:

    @pytest.mark.asyncio
    async def test_list_returns_tasks_in_creation_order(self, task_service):
        created = []
        for priority in range(10):
            created.append(
                await task_service.create(
                    TaskCreate(title=f"task {priority}", completed=False, priority=priority)
                )
            )

        assert await task_service.list() == created

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, task_service):
        tasks = [
            await task_service.create(TaskCreate(title="same", completed=True, priority=1))
            for _ in range(50)
        ]

        assert len({task.id for task in tasks}) == 50

    @pytest.mark.asyncio
    async def test_concurrent_creation(self, task_service):
        requests = [
            TaskCreate(title=f"task {i}", completed=False, priority=-i) for i in range(100)
        ]

        created = await asyncio.gather(*(task_service.create(request) for request in requests))

        stored = await task_service.list()
        assert len(stored) == 100
        assert len({task.id for task in stored}) == 100
        assert {task.id for task in created} == {task.id for task in stored}


class TestCustomerService:

    @pytest.mark.asyncio
    async def test_create_passes_fields_through(self, customer_service):
        customer = await customer_service.create(
            CustomerCreate(name="Ann", email="not-an-email", active=False)
        )

        assert customer.name == "Ann"
        assert customer.email == "not-an-email"
        assert customer.active is False

    @pytest.mark.asyncio
    async def test_duplicate_emails_are_allowed(self, customer_service):
        first = await customer_service.create(
            CustomerCreate(name="Ann", email="ann@example.com", active=True)
        )
        second = await customer_service.create(
            CustomerCreate(name="Ann", email="ann@example.com", active=True)
        )

        assert first.id != second.id
        assert await customer_service.list() == [first, second]
