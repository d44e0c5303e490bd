# models/activity.py
from sqlmodel import SQLModel, Field
from pydantic import ConfigDict
from typing import Optional
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from models.user import User
from models.project import Project
from models.task import Task


class ActivityType(str, Enum):
    task_assigned = "assigned"
    task_completed = "completed"
    task_reopened = "reopened"
    task_created = "created"
    message_sent = "message"


# type -> (verb, icon, color); message_sent has no verb
ACTIVITY_DISPLAY = {
    ActivityType.task_assigned: ("te asignó", "person.badge.plus", "blue"),
    ActivityType.task_completed: ("completó", "checkmark.circle.fill", "green"),
    ActivityType.task_reopened: ("reabrió", "arrow.uturn.backward.circle", "orange"),
    ActivityType.task_created: ("creó", "plus.circle.fill", "purple"),
    ActivityType.message_sent: (None, "message.fill", "blue"),
}

TASK_FALLBACK = "una tarea"
MESSAGE_FALLBACK = "envió un mensaje"


class Activity(SQLModel):
    """A log entry for something that happened in a project.

    Actor, project and task are captured as id plus display name at creation
    time, so later renames do not rewrite history.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    type: ActivityType
    timestamp: datetime = Field(default_factory=datetime.now)
    actor_id: UUID
    actor_name: str
    project_id: UUID
    project_name: str
    task_id: Optional[UUID] = None
    task_title: Optional[str] = None
    message_preview: Optional[str] = None

    @classmethod
    def record(cls, type: ActivityType, actor: User, project: Project,
               task: Optional[Task] = None, message_preview: Optional[str] = None,
               timestamp: Optional[datetime] = None) -> "Activity":
        fields = dict(
            type=type,
            actor_id=actor.id,
            actor_name=actor.name,
            project_id=project.id,
            project_name=project.name,
            task_id=task.id if task else None,
            task_title=task.title if task else None,
            message_preview=message_preview,
        )
        if timestamp is not None:
            fields["timestamp"] = timestamp
        return cls(**fields)

    @property
    def actor_first_name(self) -> str:
        parts = self.actor_name.split()
        return parts[0] if parts else self.actor_name

    @property
    def description(self) -> str:
        verb = ACTIVITY_DISPLAY[self.type][0]
        if verb is None:
            return f"{self.actor_first_name}: {self.message_preview or MESSAGE_FALLBACK}"
        return f"{self.actor_first_name} {verb}: {self.task_title or TASK_FALLBACK}"

    @property
    def icon(self) -> str:
        return ACTIVITY_DISPLAY[self.type][1]

    @property
    def icon_color(self) -> str:
        return ACTIVITY_DISPLAY[self.type][2]
