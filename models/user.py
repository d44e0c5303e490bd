from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4


class User(SQLModel):
    id: UUID = Field(default_factory=uuid4)
    name: str
    phone_number: str = ""

    @property
    def first_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else self.name
