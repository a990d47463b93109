"""Mini README: Core data model for submitted and stored maps.

Structure:
    * GeoPoint - validated latitude/longitude pair (pydantic, immutable).
    * CartesianPoint - point on the projection sphere in kilometres.
    * MapSubmission - raw fields of a create request.
    * ValidatedSubmission - trimmed fields, slug and parsed points.
    * MapRecord - the stored map, including the ``maxDist`` spread value.
    * User - identity resolved from a request secret.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """Latitude/longitude in degrees; out of range values fail validation."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    lng: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)

    def as_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True, slots=True)
class CartesianPoint:
    """Point on a sphere centred at the origin."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(slots=True)
class MapSubmission:
    """Fields of a map creation request before any validation.

    ``data`` is the raw location payload; it is handed to the map data
    parser untouched.
    """

    name: Any
    data: Any
    description_short: Any
    description_long: Any

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "MapSubmission":
        """Pick the submission fields out of a request body."""

        return cls(
            name=payload.get("name"),
            data=payload.get("data"),
            description_short=payload.get("description_short"),
            description_long=payload.get("description_long"),
        )


@dataclass(frozen=True, slots=True)
class ValidatedSubmission:
    """Submission that passed every policy check."""

    slug: str
    name: str
    description_short: str
    description_long: str
    points: Tuple[GeoPoint, ...]


@dataclass(slots=True)
class MapRecord:
    """Stored community map."""

    map_id: str
    slug: str
    name: str
    created_by: str
    data: List[GeoPoint]
    description_short: str
    description_long: str
    max_dist: float
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def as_dict(self) -> Dict[str, object]:
        """Export using the stored field names."""

        return {
            "id": self.map_id,
            "slug": self.slug,
            "name": self.name,
            "created_by": self.created_by,
            "data": [point.as_dict() for point in self.data],
            "description_short": self.description_short,
            "description_long": self.description_long,
            "maxDist": self.max_dist,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class User:
    """Account that owns maps."""

    user_id: str
    username: str
    secret: Optional[str] = None
