# services/data_service.py
"""The data layer the Streamlit app talks to.

One ``DataService`` is built per session by the entry point and handed to
whatever needs it; there is no module-level instance. Writes are serialised
with a re-entrant lock so two reruns racing on the same session cannot
interleave list updates.
"""
from __future__ import annotations

import threading
from datetime import date, datetime
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
from uuid import UUID

from models import (
    Activity, ActivityType, Message, Project, Task, TaskStatus, User,
)
from services.activity_feed import ActivityFeed
from services.errors import TaskNotFoundError
from services.fixtures import (
    DEMO_USER_COUNT, build_mock_activities, build_mock_projects, build_mock_users,
)
from services.projects import ProjectStore
from services.users import UserRegistry
from utils.logging import get_logger

log = get_logger(__name__)


class DataService:
    def __init__(self, users: Optional[Sequence[User]] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self._lock = threading.RLock()
        users = list(users) if users is not None else build_mock_users()
        if len(users) < DEMO_USER_COUNT:
            raise ValueError(
                f"DataService needs at least {DEMO_USER_COUNT} users to seed the demo "
                f"projects, got {len(users)}"
            )
        self._users = UserRegistry(users)
        self._store = ProjectStore(lambda: build_mock_projects(self._users.mock_users, self._clock()))
        self._feed = ActivityFeed()

    # ---- users ----
    @property
    def mock_users(self) -> List[User]:
        return self._users.mock_users

    @property
    def current_user(self) -> User:
        return self._users.current_user

    @property
    def current_user_index(self) -> int:
        return self._users.current_user_index

    def switch_user(self, user: User) -> User:
        with self._lock:
            switched = self._users.switch_user(user)
        log.info("user_switched", user=switched.name)
        return switched

    # ---- projects ----
    @property
    def projects(self) -> List[Project]:
        return self._store.projects

    def load_projects(self) -> bool:
        with self._lock:
            seeded = self._store.load_projects()
        if seeded:
            log.info("projects_seeded", count=len(self._store))
        return seeded

    def project(self, project_id: UUID) -> Optional[Project]:
        return self._store.project(project_id)

    def require_project(self, project_id: UUID) -> Project:
        return self._store.require_project(project_id)

    def update_project(self, project: Project) -> bool:
        with self._lock:
            updated = self._store.update_project(project)
        if not updated:
            log.warning("update_project_missed", project_id=str(project.id))
        return updated

    def create_project(self, name: str, description: Optional[str] = None) -> Project:
        with self._lock:
            project = self._store.create_project(name, self.current_user, description,
                                                 now=self._clock())
        log.info("project_created", project=project.name)
        return project

    # ---- activities ----
    @property
    def activities(self) -> List[Activity]:
        return self._feed.activities

    @property
    def activities_for_current_user(self) -> List[Activity]:
        """Everything except what the current user did themselves."""
        return self._feed.excluding_actor(self.current_user.id)

    def activities_for_project(self, project_id: UUID) -> List[Activity]:
        return self._feed.for_project(project_id)

    def add_activity(self, type: ActivityType, actor: User, project: Project,
                     task: Optional[Task] = None,
                     message_preview: Optional[str] = None,
                     timestamp: Optional[datetime] = None) -> Activity:
        with self._lock:
            activity = self._feed.add_activity(
                type, actor, project, task=task, message_preview=message_preview,
                timestamp=timestamp if timestamp is not None else self._clock())
        log.debug("activity_added", type=activity.type.value, actor=actor.name,
                  project=project.name)
        return activity

    def load_mock_activities(self) -> bool:
        with self._lock:
            if len(self._feed):
                return False
            projects = self._store.projects
            if len(projects) < 2:
                log.warning("mock_activities_skipped", reason="need at least two projects",
                            projects=len(projects))
                return False
            self._feed.seed(build_mock_activities(self.mock_users, projects, self._clock()))
        log.info("activities_seeded", count=len(self._feed))
        return True

    # ---- unread / acknowledgment ----
    def unread_count(self, project_id: UUID) -> int:
        return self.require_project(project_id).unread_count(self.current_user.id)

    def total_unread_count(self) -> int:
        uid = self.current_user.id
        return sum(p.unread_count(uid) for p in self._store.projects)

    def tasks_needing_acknowledgment(self) -> List[Tuple[Project, Task]]:
        uid = self.current_user.id
        return [(p, t) for p in self._store.projects for t in p.tasks if t.needs_acknowledgment(uid)]

    # ---- workflows ----
    def _require_task(self, project: Project, task_id: UUID) -> Task:
        task = project.task(task_id)
        if task is None:
            raise TaskNotFoundError(project.id, task_id)
        return task

    def set_task_status(self, project_id: UUID, task_id: UUID, status: TaskStatus,
                        actor: Optional[User] = None) -> Task:
        status = TaskStatus(status)
        actor = actor or self.current_user
        with self._lock:
            project = self.require_project(project_id)
            task = self._require_task(project, task_id)
            if task.status == status:
                return task
            updated = task.with_status(status)
            project = project.replace_task(updated)
            if status == TaskStatus.done:
                kind, preview = ActivityType.task_completed, f"Completado: {updated.title}"
            else:
                kind, preview = ActivityType.task_reopened, f"Reabierto: {updated.title}"
            now = self._clock()
            project = project.model_copy(update={"last_activity": now,
                                                 "last_activity_preview": preview})
            self._store.update_project(project)
            self.add_activity(kind, actor, project, task=updated, timestamp=now)
        return updated

    def create_task(self, project_id: UUID, title: str, creator: Optional[User] = None,
                    assignees: Iterable[User] = (), due_date: Optional[date] = None,
                    notes: str = "") -> Task:
        title = (title or "").strip()
        if not title:
            raise ValueError("Task title must not be blank")
        creator = creator or self.current_user
        with self._lock:
            project = self.require_project(project_id)
            now = self._clock()
            task = Task(title=title, assignees=list(assignees), due_date=due_date,
                        notes=notes, created_by=creator)
            project = project.model_copy(update={
                "tasks": [*project.tasks, task],
                "last_activity": now,
                "last_activity_preview": f"Nueva tarea: {title}",
            })
            self._store.update_project(project)
            self.add_activity(ActivityType.task_created, creator, project, task=task, timestamp=now)
            if task.assignees:
                self.add_activity(ActivityType.task_assigned, creator, project, task=task, timestamp=now)
        return task

    def post_message(self, project_id: UUID, content: str,
                     sender: Optional[User] = None) -> Message:
        content = (content or "").strip()
        if not content:
            raise ValueError("Message must not be blank")
        sender = sender or self.current_user
        with self._lock:
            project = self.require_project(project_id)
            message = Message(content=content, sender=sender, timestamp=self._clock(),
                              is_from_current_user=sender.id == self.current_user.id)
            project = project.model_copy(update={
                "messages": [*project.messages, message],
                "last_activity": message.timestamp,
                "last_activity_preview": f"{sender.first_name}: {content}",
            })
            self._store.update_project(project)
            self.add_activity(ActivityType.message_sent, sender, project, message_preview=content,
                              timestamp=message.timestamp)
        return message
