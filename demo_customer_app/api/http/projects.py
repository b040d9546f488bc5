from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import uuid

from demo_customer_app.api.dependencies import get_project_service
from demo_customer_app.domains.projects.schemas import ProjectCreate, ProjectResponse
from demo_customer_app.domains.projects.services import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[ProjectResponse])
async def list_projects(project_service: ProjectService = Depends(get_project_service)):
    """Получение списка проектов"""
    projects = await project_service.list()
    return [ProjectResponse.model_validate(project) for project in projects]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    project_service: ProjectService = Depends(get_project_service)
):
    """Создание нового проекта"""
    project = await project_service.create(project_data)
    return ProjectResponse.model_validate(project)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: uuid.UUID,
    project_service: ProjectService = Depends(get_project_service)
):
    """Получение проекта по идентификатору"""
    project = await project_service.get(project_id)

    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found"
        )

    return ProjectResponse.model_validate(project)
