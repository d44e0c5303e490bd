# models/attachment.py
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from models.user import User


class AttachmentType(str, Enum):
    document = "document"
    image = "image"


class AttachmentCategory(str, Enum):
    reference = "reference"   # provided by whoever created the task
    work = "work"             # proof of work uploaded by an assignee


class Attachment(SQLModel):
    id: UUID = Field(default_factory=uuid4)
    type: AttachmentType
    category: AttachmentCategory = AttachmentCategory.reference
    file_name: str
    file_size: int = Field(default=0, ge=0)
    uploaded_by: User
    caption: Optional[str] = None


class ProjectAttachment(SQLModel):
    id: UUID = Field(default_factory=uuid4)
    type: AttachmentType
    file_name: str
    file_size: int = Field(default=0, ge=0)
    uploaded_by: User
    uploaded_at: datetime = Field(default_factory=datetime.now)
    linked_task_id: Optional[UUID] = None
