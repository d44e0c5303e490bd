# services/__init__.py
from .data_service import DataService
from .errors import DataServiceError, ProjectNotFoundError, TaskNotFoundError, UnknownUserError
