"""Mini README: URL slug generation for map names."""

from __future__ import annotations

import re
import unicodedata

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    """Lower-case ``name`` and join its alphanumeric runs with hyphens.

    Accents are folded to their ASCII base letter first, so ``"Côte d'Or"``
    becomes ``"cote-d-or"``. Applying the function to its own output returns
    the same slug.
    """

    folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return _NON_ALPHANUMERIC.sub("-", folded.lower()).strip("-")
