"""Mini README: Approximate diameter of a projected point set.

Structure:
    * estimate_diameter - sort by ``x`` and measure first to last.

The estimate is not the true farthest pair. Points are ordered by their
``x`` coordinate with a stable sort and the distance between the two ends of
that ordering is returned. Stored ``maxDist`` values were produced this way,
so the ordering and tie handling must stay as they are for scores to remain
comparable.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

from ..errors import InsufficientPointsError
from ..logging_utils import get_logger
from ..models import CartesianPoint

LOGGER = get_logger(__name__)

PointsLike = Union[Sequence[CartesianPoint], np.ndarray]


def _as_array(points: PointsLike) -> np.ndarray:
    """Coerce points to a float array of shape (N, 3)."""

    if isinstance(points, np.ndarray):
        array = points
    else:
        array = np.asarray([point.as_tuple() for point in points], dtype=float)
    if array.size == 0:
        return array.reshape(0, 3)
    if array.ndim != 2 or array.shape[1] != 3:
        raise ValueError("Points must be of shape (N, 3)")
    return array


def estimate_diameter(points: PointsLike) -> float:
    """Return the distance between the lowest-x and highest-x points.

    Among points sharing the lowest (or highest) ``x`` the one that appears
    first in the input wins.
    """

    array = _as_array(points)
    count = array.shape[0]
    if count < 2:
        raise InsufficientPointsError(
            f"At least 2 points are required to estimate a diameter (got {count})"
        )

    order = np.argsort(array[:, 0], kind="stable")
    first = array[order[0]]
    last = array[order[-1]]
    dx, dy, dz = (float(value) for value in first - last)
    diameter = math.sqrt(dx * dx + dy * dy + dz * dz)
    LOGGER.debug("Estimated diameter %.3f km across %s points", diameter, count)
    return diameter
