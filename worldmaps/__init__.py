"""Mini README: Core package initializer for worldmaps.

worldmaps validates community map submissions for a geography guessing
game and derives the ``maxDist`` spread value used to scale guess scores.
The most used entry points are re-exported here; the subpackages hold the
details (``geometry``, ``parsing``, ``validation``, ``storage``, ``maps``).
"""

from .errors import MapActionError
from .logging_utils import get_logger
from .maps import MapService
from .models import GeoPoint, MapRecord, MapSubmission

__version__ = "0.1.0"

__all__ = [
    "GeoPoint",
    "MapActionError",
    "MapRecord",
    "MapService",
    "MapSubmission",
    "get_logger",
]
