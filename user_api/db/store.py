# user_api/db/store.py

import threading
from typing import Iterable, List, Optional

from user_api.models.users import User, UserCreate

SEED_USERS = [
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
]


class UserStore:
    """
    Ordered in-memory collection of users.

    Every read and the max-then-append create sequence run under one lock,
    so ids stay unique when handlers execute in the worker threadpool.
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._lock = threading.Lock()
        self._users: List[User] = list(users or [])

    @classmethod
    def seeded(cls) -> "UserStore":
        store = cls()
        for row in SEED_USERS:
            store.create_user(UserCreate(**row))
        return store

    def list_users(self) -> List[User]:
        with self._lock:
            return list(self._users)

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            next_id = max((u.id for u in self._users), default=0) + 1
            user = User(id=next_id, name=data.name, email=data.email)
            self._users.append(user)
        return user

    def reset(self) -> None:
        with self._lock:
            self._users.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
