"""
Project endpoints.

CRUD operations for projects posted by clients.  Listing accepts an
optional ``clientId`` query parameter.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from freelance_marketplace_api.app.api.deps import get_project_service
from freelance_marketplace_api.app.schemas.project import Project, ProjectCreate, ProjectUpdate
from freelance_marketplace_api.app.services import ProjectService

router = APIRouter()


@router.get("", response_model=List[Project])
async def list_projects(
    client_id: Optional[str] = Query(None, alias="clientId"),
    projects: ProjectService = Depends(get_project_service),
) -> List[Project]:
    if client_id:
        return await projects.get_projects_by_client(client_id)
    return await projects.get_all_projects()


@router.get("/{project_id}", response_model=Project)
async def get_project(project_id: str, projects: ProjectService = Depends(get_project_service)) -> Project:
    project = await projects.get_project(project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate, projects: ProjectService = Depends(get_project_service)
) -> Project:
    return await projects.create_project(project_in)


@router.patch("/{project_id}", response_model=Project)
async def update_project(
    project_id: str,
    project_in: ProjectUpdate,
    projects: ProjectService = Depends(get_project_service),
) -> Project:
    project = await projects.update_project(project_id, project_in)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: str, projects: ProjectService = Depends(get_project_service)) -> None:
    """Delete a project.  Returns HTTP 404 if it does not exist."""
    deleted = await projects.delete_project(project_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return None
