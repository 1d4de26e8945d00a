"""
Business logic for projects posted by clients.
"""

import logging
from typing import List, Optional

from ..core.storage import MemStorage, new_id, utcnow
from ..schemas.base import apply_patch
from ..schemas.project import Project, ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectService:
    """Operations on the projects collection."""

    def __init__(self, storage: MemStorage) -> None:
        self.storage = storage

    async def get_project(self, project_id: str) -> Optional[Project]:
        return self.storage.projects.get(project_id)

    async def get_projects_by_client(self, client_id: str) -> List[Project]:
        return [p for p in self.storage.projects.values() if p.client_id == client_id]

    async def get_all_projects(self) -> List[Project]:
        return list(self.storage.projects.values())

    async def create_project(self, data: ProjectCreate) -> Project:
        project = Project(id=new_id(), created_at=utcnow(), **data.model_dump())
        self.storage.projects[project.id] = project
        logger.info("Created project %s for client %s", project.id, project.client_id)
        return project

    async def update_project(self, project_id: str, data: ProjectUpdate) -> Optional[Project]:
        project = self.storage.projects.get(project_id)
        if project is None:
            logger.debug("Update for unknown project %s", project_id)
            return None
        updated = apply_patch(project, data)
        self.storage.projects[project_id] = updated
        logger.info("Updated project %s", project_id)
        return updated

    async def delete_project(self, project_id: str) -> bool:
        """Delete a project, returning whether it existed."""
        if self.storage.projects.pop(project_id, None) is None:
            logger.debug("Delete for unknown project %s", project_id)
            return False
        logger.info("Deleted project %s", project_id)
        return True
