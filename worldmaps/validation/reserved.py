"""Mini README: Names user maps may never claim.

Structure:
    * ReservedNames - immutable country code and official slug sets.
    * load_reserved_names - build the sets from bundled or configured JSON.

The bundled data lives in ``worldmaps/data``: ``countries.json`` is a list of
ISO 3166-1 alpha-2 codes and ``official_country_maps.json`` maps each code
with an official map to its ``name`` and ``slug``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ALL_MAPS_SLUG = "all"


@dataclass(frozen=True, slots=True)
class ReservedNames:
    """Country codes (upper case) and official map slugs."""

    country_codes: FrozenSet[str] = frozenset()
    official_slugs: FrozenSet[str] = frozenset()

    @classmethod
    def build(
        cls, country_codes: Iterable[str] = (), official_slugs: Iterable[str] = ()
    ) -> "ReservedNames":
        return cls(
            country_codes=frozenset(code.upper() for code in country_codes),
            official_slugs=frozenset(official_slugs),
        )

    def collides(self, slug: str) -> bool:
        """True if ``slug`` is ``all``, a country code in any case, or an official slug."""

        return (
            slug == ALL_MAPS_SLUG
            or slug.upper() in self.country_codes
            or slug in self.official_slugs
        )


def _read_json(path: Optional[Path], bundled_name: str) -> Any:
    """Read JSON from ``path`` or from the bundled data file."""

    if path is not None:
        LOGGER.debug("Loading reserved name data from %s", path)
        return json.loads(Path(path).read_text(encoding="utf-8"))
    bundled = resources.files("worldmaps.data").joinpath(bundled_name)
    return json.loads(bundled.read_text(encoding="utf-8"))


def load_reserved_names(
    countries_path: Optional[Path] = None, official_maps_path: Optional[Path] = None
) -> ReservedNames:
    """Load reserved names, defaulting to the data shipped with the package."""

    countries = _read_json(countries_path, "countries.json")
    official_maps = _read_json(official_maps_path, "official_country_maps.json")
    if not isinstance(countries, list):
        raise ValueError("Country data must be a JSON list of country codes")
    if not isinstance(official_maps, dict):
        raise ValueError("Official map data must be a JSON object keyed by country code")

    slugs = [entry["slug"] for entry in official_maps.values() if isinstance(entry, dict) and entry.get("slug")]
    reserved = ReservedNames.build(country_codes=countries, official_slugs=slugs)
    LOGGER.debug(
        "Loaded %s country codes and %s official map slugs",
        len(reserved.country_codes),
        len(reserved.official_slugs),
    )
    return reserved
