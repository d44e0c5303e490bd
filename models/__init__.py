# models/__init__.py
from .user import User
from .subtask import Subtask
from .attachment import Attachment, AttachmentCategory, AttachmentType, ProjectAttachment
from .message import Message
from .task import Task, TaskStatus
from .project import Project
from .activity import Activity, ActivityType
