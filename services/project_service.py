"""
services/project_service.py
---------------------------
Business logic over the project repository.
"""

from models.project import Project
from repositories.project_repo import ProjectRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectService:
    """Thin layer callers use instead of talking to the repository directly."""

    def __init__(self, project_repo: ProjectRepository | None = None):
        self.project_repo = project_repo or ProjectRepository()

    def add_project(self, project: Project) -> Project:
        """Persist a new project and return it with its id set."""
        return self.project_repo.insert_project(project)

    def list_projects(self) -> list[Project]:
        """All projects by name, without materials, steps or categories."""
        return self.project_repo.fetch_all_projects()

    def get_project(self, project_id: int) -> Project:
        """
        Fetch one project with all its details.

        Raises:
            LookupError: No project has that id.
        """
        project = self.project_repo.fetch_project_by_id(project_id)
        if project is None:
            logger.warning(f"Project #{project_id} requested but does not exist")
            raise LookupError(f"Project with ID={project_id} does not exist.")
        return project
