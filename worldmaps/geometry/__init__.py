"""Mini README: Geometry helpers for the map spread metric.

``projection`` turns latitude/longitude into points on a sphere and
``diameter`` estimates how far apart a set of those points is.
"""

from .diameter import estimate_diameter
from .projection import EARTH_RADIUS_KM, distance, project, project_many

__all__ = [
    "EARTH_RADIUS_KM",
    "distance",
    "estimate_diameter",
    "project",
    "project_many",
]
