"""Mini README: Map persistence interface and in-memory implementation.

Structure:
    * MapStore - protocol the map service depends on.
    * InMemoryMapStore - dictionary-backed store enforcing unique slugs.

Swapping in a database only requires another ``MapStore``; the service never
touches storage details. Identifiers are assigned on ``create`` when the
record arrives without one.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, Iterable, Optional, Protocol

from ..errors import DuplicateSlugError
from ..logging_utils import get_logger
from ..models import MapRecord

LOGGER = get_logger(__name__)


class MapStore(Protocol):
    """Operations the map service needs from persistence."""

    def create(self, record: MapRecord) -> MapRecord: ...

    def find_by_id(self, map_id: str) -> Optional[MapRecord]: ...

    def find_by_slug(self, slug: str) -> Optional[MapRecord]: ...

    def remove(self, record: MapRecord) -> None: ...


class InMemoryMapStore:
    """Keep maps in process memory, keyed by id and by slug."""

    def __init__(self, records: Optional[Iterable[MapRecord]] = None) -> None:
        self._records: Dict[str, MapRecord] = {}
        self._ids_by_slug: Dict[str, str] = {}
        self._sequence = 0
        self._lock = threading.Lock()
        for record in records or ():
            self.create(record)
        LOGGER.debug("Map store initialised with %s maps", len(self._records))

    def _next_id(self) -> str:
        """Generate a sequential map identifier."""

        self._sequence += 1
        return f"map_{self._sequence:06d}"

    def create(self, record: MapRecord) -> MapRecord:
        """Store ``record``; the slug must not already be taken."""

        with self._lock:
            if record.slug in self._ids_by_slug:
                raise DuplicateSlugError(f"A map with slug '{record.slug}' already exists")
            if not record.map_id:
                record = replace(record, map_id=self._next_id())
            elif record.map_id in self._records:
                raise ValueError(f"Map {record.map_id} already exists.")
            self._records[record.map_id] = record
            self._ids_by_slug[record.slug] = record.map_id
        LOGGER.debug("Stored map %s (%s)", record.map_id, record.slug)
        return record

    def find_by_id(self, map_id: str) -> Optional[MapRecord]:
        """Return the map with ``map_id`` or None."""

        return self._records.get(map_id)

    def find_by_slug(self, slug: str) -> Optional[MapRecord]:
        """Return the map using ``slug`` or None."""

        map_id = self._ids_by_slug.get(slug)
        return self._records.get(map_id) if map_id else None

    def remove(self, record: MapRecord) -> None:
        """Delete ``record`` from both indexes."""

        with self._lock:
            if record.map_id not in self._records:
                raise KeyError(f"Map {record.map_id} is not stored")
            del self._records[record.map_id]
            self._ids_by_slug.pop(record.slug, None)
        LOGGER.debug("Removed map %s", record.map_id)

