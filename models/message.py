# models/message.py
from sqlmodel import SQLModel, Field
from datetime import datetime
from uuid import UUID, uuid4

from models.user import User

class Message(SQLModel):
    id: UUID = Field(default_factory=uuid4)
    content: str
    sender: User
    timestamp: datetime = Field(default_factory=datetime.now)
    is_from_current_user: bool = False
