# models/subtask.py
from sqlmodel import SQLModel, Field
from typing import Optional, List
from uuid import UUID, uuid4

from models.user import User

class Subtask(SQLModel):
    id: UUID = Field(default_factory=uuid4)
    title: str
    is_done: bool = False
    assignees: List[User] = Field(default_factory=list)
    created_by: Optional[User] = None
