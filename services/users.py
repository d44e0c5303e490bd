# services/users.py
from typing import List, Optional, Sequence

from models import User
from services.errors import UnknownUserError


class UserRegistry:
    """The fixed set of demo users plus whoever is "logged in" right now."""

    def __init__(self, users: Sequence[User], current: Optional[User] = None):
        if not users:
            raise ValueError("UserRegistry needs at least one user")
        self._users: List[User] = list(users)
        self._current: User = current or self._users[0]

    @property
    def mock_users(self) -> List[User]:
        return list(self._users)

    @property
    def current_user(self) -> User:
        return self._current

    def get(self, user_id) -> Optional[User]:
        return next((u for u in self._users if u.id == user_id), None)

    def switch_user(self, user: User) -> User:
        known = self.get(user.id)
        if known is None:
            raise UnknownUserError(user.id)
        self._current = known
        return known

    @property
    def current_user_index(self) -> int:
        for i, u in enumerate(self._users):
            if u.id == self._current.id:
                return i
        return 0
