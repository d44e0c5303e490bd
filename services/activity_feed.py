# services/activity_feed.py
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from models import Activity, ActivityType, Project, Task, User


class ActivityFeed:
    """Most-recent-first log of project events.

    New entries always go to the front; the feed is never re-sorted by
    timestamp.
    """

    def __init__(self):
        self._activities: List[Activity] = []

    @property
    def activities(self) -> List[Activity]:
        return list(self._activities)

    def __len__(self) -> int:
        return len(self._activities)

    def add_activity(self, type: ActivityType, actor: User, project: Project,
                     task: Optional[Task] = None,
                     message_preview: Optional[str] = None,
                     timestamp: Optional[datetime] = None) -> Activity:
        activity = Activity.record(type, actor, project, task=task,
                                   message_preview=message_preview, timestamp=timestamp)
        self._activities.insert(0, activity)
        return activity

    def seed(self, activities: List[Activity]) -> bool:
        if self._activities:
            return False
        self._activities = list(activities)
        return True

    def excluding_actor(self, user_id: UUID) -> List[Activity]:
        return [a for a in self._activities if a.actor_id != user_id]

    def for_project(self, project_id: UUID) -> List[Activity]:
        return [a for a in self._activities if a.project_id == project_id]
