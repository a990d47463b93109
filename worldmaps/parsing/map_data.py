"""Mini README: Tolerant parser for submitted location payloads.

Structure:
    * parse_map_data - turn raw submitted ``data`` into a list of GeoPoints.

Accepted shapes (as a JSON string or an already decoded value):
    * ``[{"lat": .., "lng": ..}, ...]``
    * ``[[lat, lng], ...]``
    * ``{"customCoordinates": [...]}`` as exported by map-making tools
    * ``{"locations": [...]}``

The parser never raises. Entries that are malformed or out of range are
skipped so the validator can report how many usable locations remain;
``None`` means nothing could be decoded at all.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from ..logging_utils import get_logger
from ..models import GeoPoint

LOGGER = get_logger(__name__)

_WRAPPER_KEYS = ("customCoordinates", "locations")


def _decode(raw: Any) -> Any:
    """Decode JSON text or bytes; other values pass through."""

    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            LOGGER.debug("Map data is not valid JSON")
            return None
    return raw


def _unwrap(decoded: Any) -> Optional[Iterable[Any]]:
    """Return the list of location entries, or None for unknown shapes."""

    if isinstance(decoded, dict):
        for key in _WRAPPER_KEYS:
            entries = decoded.get(key)
            if isinstance(entries, list):
                return entries
        return None
    if isinstance(decoded, (list, tuple)):
        return decoded
    return None


def _parse_entry(entry: Any) -> Optional[GeoPoint]:
    """Validate a single object or pair entry, returning None when unusable."""

    if isinstance(entry, dict):
        candidate = {"lat": entry.get("lat"), "lng": entry.get("lng")}
    elif isinstance(entry, (list, tuple)) and len(entry) >= 2:
        candidate = {"lat": entry[0], "lng": entry[1]}
    else:
        return None
    if isinstance(candidate["lat"], bool) or isinstance(candidate["lng"], bool):
        return None
    try:
        return GeoPoint.model_validate(candidate)
    except ValidationError:
        return None


def parse_map_data(raw: Any) -> Optional[List[GeoPoint]]:
    """Return the usable locations in ``raw``, or ``None`` if undecodable."""

    entries = _unwrap(_decode(raw))
    if entries is None:
        return None

    points: List[GeoPoint] = []
    skipped = 0
    for entry in entries:
        point = _parse_entry(entry)
        if point is None:
            skipped += 1
            continue
        points.append(point)
    if skipped:
        LOGGER.debug("Skipped %s unusable locations out of %s", skipped, skipped + len(points))
    return points
