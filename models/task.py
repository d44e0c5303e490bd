# models/task.py
from sqlmodel import SQLModel, Field
from typing import Optional, List, Set
from datetime import date
from enum import Enum
from uuid import UUID, uuid4

from models.user import User
from models.subtask import Subtask
from models.attachment import Attachment


class TaskStatus(str, Enum):
    pending = "pending"
    done = "done"


class Task(SQLModel):
    id: UUID = Field(default_factory=uuid4)
    title: str
    assignees: List[User] = Field(default_factory=list)
    status: TaskStatus = TaskStatus.pending
    due_date: Optional[date] = None
    subtasks: List[Subtask] = Field(default_factory=list)
    attachments: List[Attachment] = Field(default_factory=list)
    notes: str = ""
    created_by: Optional[User] = None
    # users who accepted the assignment
    acknowledged_by: Set[UUID] = Field(default_factory=set)

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.done

    @property
    def completed_subtask_count(self) -> int:
        return sum(1 for s in self.subtasks if s.is_done)

    def is_assigned_to(self, user_id: UUID) -> bool:
        return any(u.id == user_id for u in self.assignees)

    def is_acknowledged_by(self, user_id: UUID) -> bool:
        return user_id in self.acknowledged_by

    def needs_acknowledgment(self, user_id: UUID) -> bool:
        """A pending task assigned to the user that they have not accepted yet."""
        return (not self.is_done
                and self.is_assigned_to(user_id)
                and not self.is_acknowledged_by(user_id))

    def is_overdue(self, today: date) -> bool:
        return not self.is_done and self.due_date is not None and self.due_date < today

    def with_status(self, status: TaskStatus) -> "Task":
        return self.model_copy(update={"status": TaskStatus(status)})
