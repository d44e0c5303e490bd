# services/projects.py
from datetime import datetime
from typing import Callable, Dict, List, Optional
from uuid import UUID

from models import Project, User
from services.errors import ProjectNotFoundError


class ProjectStore:
    """Projects keyed by id; dict insertion order is the display order."""

    def __init__(self, seed: Callable[[], List[Project]]):
        self._seed = seed
        self._projects: Dict[UUID, Project] = {}

    @property
    def projects(self) -> List[Project]:
        return list(self._projects.values())

    def __len__(self) -> int:
        return len(self._projects)

    def load_projects(self) -> bool:
        """Seed from fixtures once. Returns True only on the call that seeded."""
        if self._projects:
            return False
        self._projects = {p.id: p for p in self._seed()}
        return True

    def project(self, project_id: UUID) -> Optional[Project]:
        return self._projects.get(project_id)

    def require_project(self, project_id: UUID) -> Project:
        p = self._projects.get(project_id)
        if p is None:
            raise ProjectNotFoundError(project_id)
        return p

    def update_project(self, project: Project) -> bool:
        """Replace the stored project with the same id, keeping its position.

        Returns False, leaving the store untouched, when the id is unknown.
        Raises ValueError if an attachment links to a task the project no
        longer has.
        """
        if project.id not in self._projects:
            return False
        dangling = project.dangling_attachments()
        if dangling:
            raise ValueError(
                f"attachment {dangling[0].file_name!r} links to task "
                f"{dangling[0].linked_task_id} which is not part of project {project.name!r}"
            )
        self._projects[project.id] = project
        return True

    def insert_first(self, project: Project) -> None:
        rest = {pid: p for pid, p in self._projects.items() if pid != project.id}
        self._projects = {project.id: project, **rest}

    def create_project(self, name: str, creator: User, description: Optional[str] = None,
                       now: Optional[datetime] = None) -> Project:
        name = (name or "").strip()
        if not name:
            raise ValueError("Project name must not be blank")
        project = Project(
            name=name,
            description=(description or None),
            members=[creator],
            last_activity=now or datetime.now(),
            last_activity_preview="Proyecto creado",
        )
        self.insert_first(project)
        return project
