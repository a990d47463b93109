"""Mini README: Input helpers used before validation.

Exports the tolerant location parser and the slug generator. Both are
plain functions so the validator can accept substitutes in tests.
"""

from .map_data import parse_map_data
from .slugs import generate_slug

__all__ = ["generate_slug", "parse_map_data"]
