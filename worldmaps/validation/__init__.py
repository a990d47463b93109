"""Mini README: Submission validation package.

``policy`` holds the numeric bounds, ``reserved`` the names user maps may not
take and ``validator`` the ordered checks that combine them.
"""

from .policy import ValidationPolicy
from .reserved import ALL_MAPS_SLUG, ReservedNames, load_reserved_names
from .validator import DEFAULT_CONTACT_EMAIL, validate_submission

__all__ = [
    "ALL_MAPS_SLUG",
    "DEFAULT_CONTACT_EMAIL",
    "ReservedNames",
    "ValidationPolicy",
    "load_reserved_names",
    "validate_submission",
]
