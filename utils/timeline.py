# utils/timeline.py
from typing import Iterable

import pandas as pd

from models import Activity, Project

TIMELINE_COLUMNS = ["Item", "Due", "Status", "Type", "Assignees"]
ACTIVITY_COLUMNS = ["When", "Type", "Description", "Project", "Icon", "Color"]

def _names(users) -> str:
    return ", ".join(u.first_name for u in users)

def timeline_df_for_project(project: Project) -> pd.DataFrame:
    rows = []
    for t in project.tasks:
        rows.append({
            "Item": f"Task: {t.title}",
            "Due": t.due_date,
            "Status": t.status.value,
            "Type": "Task",
            "Assignees": _names(t.assignees),
        })
        for st_ in t.subtasks:
            rows.append({
                "Item": f"  ↳ {st_.title}",
                "Due": t.due_date,
                "Status": "done" if st_.is_done else "pending",
                "Type": "Subtask",
                "Assignees": _names(st_.assignees),
            })
    return pd.DataFrame(rows, columns=TIMELINE_COLUMNS)

def activity_df(activities: Iterable[Activity]) -> pd.DataFrame:
    rows = [{
        "When": a.timestamp,
        "Type": a.type.value,
        "Description": a.description,
        "Project": a.project_name,
        "Icon": a.icon,
        "Color": a.icon_color,
    } for a in activities]
    return pd.DataFrame(rows, columns=ACTIVITY_COLUMNS)
