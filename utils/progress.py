# utils/progress.py
from models import Project, Task

def compute_task_progress(task: Task) -> float:
    if task.subtasks:
        done = task.completed_subtask_count
        return float(done * 100.0 / len(task.subtasks))
    return 100.0 if task.is_done else 0.0

def compute_project_progress(project: Project) -> float:
    if not project.tasks:
        return 0.0
    vals = [compute_task_progress(t) for t in project.tasks]
    return float(sum(vals) / len(vals))
