"""Mini README: Size and length bounds applied to submitted maps.

Structure:
    * ValidationPolicy - immutable set of inclusive bounds.

Instances are built from settings (see ``WorldmapsSettings.policy``) and
passed to the validator explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ValidationPolicy:
    """Inclusive bounds for names, descriptions and location counts."""

    min_name_length: int = 3
    max_name_length: int = 30
    min_short_description_length: int = 20
    max_short_description_length: int = 100
    min_long_description_length: int = 100
    max_long_description_length: int = 1000
    min_locations: int = 5
    max_locations: int = 100_000

    def __post_init__(self) -> None:
        for item in fields(self):
            if getattr(self, item.name) < 0:
                raise ValueError(f"{item.name} must not be negative")
        pairs = (
            ("name_length", self.min_name_length, self.max_name_length),
            (
                "short_description_length",
                self.min_short_description_length,
                self.max_short_description_length,
            ),
            (
                "long_description_length",
                self.min_long_description_length,
                self.max_long_description_length,
            ),
            ("locations", self.min_locations, self.max_locations),
        )
        for label, minimum, maximum in pairs:
            if minimum > maximum:
                raise ValueError(f"min_{label} ({minimum}) exceeds max_{label} ({maximum})")
