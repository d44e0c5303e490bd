# models/project.py
from sqlmodel import SQLModel, Field
from pydantic import model_validator
from typing import Optional, List, Dict, Set
from datetime import datetime
from uuid import UUID, uuid4

from models.user import User
from models.task import Task
from models.message import Message
from models.attachment import ProjectAttachment

class Project(SQLModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    description: Optional[str] = None
    members: List[User] = Field(default_factory=list)
    tasks: List[Task] = Field(default_factory=list)
    messages: List[Message] = Field(default_factory=list)
    attachments: List[ProjectAttachment] = Field(default_factory=list)
    # user id -> ids of tasks that user has not opened yet
    unread_task_ids: Dict[UUID, Set[UUID]] = Field(default_factory=dict)
    last_activity: Optional[datetime] = None
    last_activity_preview: Optional[str] = None

    @model_validator(mode="after")
    def check_attachment_links(self):
        dangling = self.dangling_attachments()
        if dangling:
            a = dangling[0]
            raise ValueError(
                f"attachment {a.file_name!r} links to task {a.linked_task_id} "
                f"which is not part of project {self.name!r}"
            )
        return self

    def dangling_attachments(self) -> List[ProjectAttachment]:
        """Attachments whose linked task is not in this project."""
        task_ids = {t.id for t in self.tasks}
        return [a for a in self.attachments
                if a.linked_task_id is not None and a.linked_task_id not in task_ids]

    def task(self, task_id: UUID) -> Optional[Task]:
        return next((t for t in self.tasks if t.id == task_id), None)

    def is_member(self, user_id: UUID) -> bool:
        return any(m.id == user_id for m in self.members)

    @property
    def pending_tasks(self) -> List[Task]:
        return [t for t in self.tasks if not t.is_done]

    def tasks_assigned_to(self, user_id: UUID) -> List[Task]:
        return [t for t in self.tasks if t.is_assigned_to(user_id)]

    def unread_tasks(self, user_id: UUID) -> List[Task]:
        unread = self.unread_task_ids.get(user_id, set())
        return [t for t in self.tasks if t.id in unread]

    def unread_count(self, user_id: UUID) -> int:
        return len(self.unread_task_ids.get(user_id, set()))

    def attachments_for_task(self, task_id: UUID) -> List[ProjectAttachment]:
        return [a for a in self.attachments if a.linked_task_id == task_id]

    def linked_task(self, attachment: ProjectAttachment) -> Optional[Task]:
        if attachment.linked_task_id is None:
            return None
        return self.task(attachment.linked_task_id)

    def replace_task(self, task: Task) -> "Project":
        """Return a copy of the project with the task of the same id swapped in."""
        if self.task(task.id) is None:
            raise KeyError(task.id)
        tasks = [task if t.id == task.id else t for t in self.tasks]
        return self.model_copy(update={"tasks": tasks})
