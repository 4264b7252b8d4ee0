"""In-memory user store."""

import threading
from functools import lru_cache

from .schemas import UserCreate, UserResponse


class UserNotFoundError(Exception):
    """Raised when a user id is unknown."""

    pass


class UserStore:
    """Thread-safe in-memory user storage with sequential ids."""

    def __init__(self):
        self._users: dict[int, UserResponse] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, payload: UserCreate) -> UserResponse:
        with self._lock:
            user = UserResponse(id=self._next_id, name=payload.name, email=payload.email)
            self._users[user.id] = user
            self._next_id += 1
        return user

    def get(self, user_id: int) -> UserResponse:
        try:
            return self._users[user_id]
        except KeyError:
            raise UserNotFoundError(f"User {user_id} not found") from None

    def list_all(self) -> list[UserResponse]:
        return list(self._users.values())

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
            self._next_id = 1


@lru_cache
def get_store() -> UserStore:
    """Get the process-wide user store."""
    return UserStore()
