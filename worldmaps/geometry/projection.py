"""Mini README: Projection of latitude/longitude onto a sphere.

Structure:
    * EARTH_RADIUS_KM - default sphere radius.
    * project - GeoPoint to CartesianPoint.
    * project_many - batch projection into an ``(N, 3)`` array.
    * distance - straight-line distance between two projected points.

Straight-line distance on the sphere is used as a proxy for geographic
spread, so the units of every result are kilometres.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from ..models import CartesianPoint, GeoPoint

EARTH_RADIUS_KM = 6371.0


def project(point: GeoPoint, radius: float = EARTH_RADIUS_KM) -> CartesianPoint:
    """Convert a range-validated GeoPoint to Cartesian coordinates."""

    phi = (point.lat * math.pi) / 180
    theta = (point.lng * math.pi) / 180
    return CartesianPoint(
        x=radius * math.cos(phi) * math.cos(theta),
        y=radius * math.cos(phi) * math.sin(theta),
        z=radius * math.sin(phi),
    )


def project_many(points: Iterable[GeoPoint], radius: float = EARTH_RADIUS_KM) -> np.ndarray:
    """Project points in input order, one row per point."""

    rows = [project(point, radius).as_tuple() for point in points]
    return np.asarray(rows, dtype=float).reshape(-1, 3)


def distance(first: CartesianPoint, second: CartesianPoint) -> float:
    """Euclidean distance between two Cartesian points."""

    dx = first.x - second.x
    dy = first.y - second.y
    dz = first.z - second.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)
