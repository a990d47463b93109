"""Mini README: Storage collaborators for maps and users.

Only protocols and in-memory implementations live here; a production
deployment provides its own ``MapStore`` and ``UserDirectory``.
"""

from .maps import InMemoryMapStore, MapStore
from .users import InMemoryUserDirectory, UserDirectory

__all__ = [
    "InMemoryMapStore",
    "InMemoryUserDirectory",
    "MapStore",
    "UserDirectory",
]
