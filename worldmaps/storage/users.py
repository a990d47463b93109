"""Mini README: Resolve request secrets to users.

Structure:
    * UserDirectory - protocol used by the map service.
    * InMemoryUserDirectory - dictionary lookup by secret.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Protocol

from ..models import User


class UserDirectory(Protocol):
    def find_by_secret(self, secret: str) -> Optional[User]: ...


class InMemoryUserDirectory:
    """Users keyed by their secret; unknown secrets resolve to ``None``."""

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users_by_secret: Dict[str, User] = {}
        for user in users or ():
            self.add(user)

    def add(self, user: User) -> None:
        """Register a user under their secret."""

        if not user.secret:
            raise ValueError(f"User {user.user_id} has no secret")
        self._users_by_secret[user.secret] = user

    def find_by_secret(self, secret: str) -> Optional[User]:
        """Return the user holding ``secret`` or None."""

        return self._users_by_secret.get(secret)
