from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import uuid

from demo_customer_app.api.dependencies import get_task_service
from demo_customer_app.domains.tasks.schemas import TaskCreate, TaskResponse
from demo_customer_app.domains.tasks.services import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
async def list_tasks(task_service: TaskService = Depends(get_task_service)):
    """Получение списка задач"""
    tasks = await task_service.list()
    return [TaskResponse.model_validate(task) for task in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    task_service: TaskService = Depends(get_task_service)
):
    """Создание новой задачи"""
    task = await task_service.create(task_data)
    return TaskResponse.model_validate(task)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: uuid.UUID,
    task_service: TaskService = Depends(get_task_service)
):
    """Получение задачи по идентификатору"""
    task = await task_service.get(task_id)

    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )

    return TaskResponse.model_validate(task)
