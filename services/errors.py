# services/errors.py
class DataServiceError(Exception):
    pass


class ProjectNotFoundError(DataServiceError, LookupError):
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class TaskNotFoundError(DataServiceError, LookupError):
    def __init__(self, project_id, task_id):
        self.project_id = project_id
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id} (project {project_id})")


class UnknownUserError(DataServiceError, ValueError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"Unknown user: {user_id}")
