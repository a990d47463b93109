"""Mini README: Error taxonomy for map submission and map management.

Structure:
    * MapActionError - base class carrying message, code and category.
    * Bad input errors - one class per validation rule, raised in rule order.
    * NotFoundError / UserNotFoundError - missing map or unknown secret.
    * ForbiddenError - caller does not own the map.
    * DuplicateSlugError - store already holds a map with the slug.

Every error is recoverable and user facing. ``status_code`` gives the
transport layer the status to answer with and ``to_error_dict`` a stable
payload for logs or JSON responses.
"""

from __future__ import annotations

from typing import Dict

BAD_INPUT = "bad_input"
NOT_FOUND = "not_found"
FORBIDDEN = "forbidden"
CONFLICT = "conflict"

_STATUS_BY_CATEGORY: Dict[str, int] = {
    BAD_INPUT: 400,
    NOT_FOUND: 404,
    FORBIDDEN: 403,
    CONFLICT: 409,
}


class MapActionError(Exception):
    """Base class for every error raised by the map pipeline."""

    category: str = BAD_INPUT
    default_code: str = "MAP_ACTION_FAILED"
    default_message: str = ""

    def __init__(self, message: str = "", *, code: str = "") -> None:
        self.message = message or self.default_message
        self.code = code or self.default_code
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        """Status code the transport layer should answer with."""

        return _STATUS_BY_CATEGORY[self.category]

    def to_error_dict(self) -> Dict[str, str]:
        """Structured payload with stable keys for logs and responses."""

        return {
            "category": self.category,
            "code": self.code,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Bad input
# ---------------------------------------------------------------------------


class MissingFieldsError(MapActionError):
    """A required submission field is absent or empty."""

    default_code = "MISSING_FIELDS"
    default_message = "Missing name, data, description_short, or description_long"


class InvalidNameError(MapActionError):
    """Name length is outside the policy bounds."""

    default_code = "INVALID_NAME"


class InvalidShortDescriptionError(MapActionError):
    """Short description length is outside the policy bounds."""

    default_code = "INVALID_SHORT_DESCRIPTION"


class InvalidLongDescriptionError(MapActionError):
    """Long description length is outside the policy bounds."""

    default_code = "INVALID_LONG_DESCRIPTION"


class DuplicateDescriptionsError(MapActionError):
    """Short and long descriptions are identical."""

    default_code = "DUPLICATE_DESCRIPTIONS"
    default_message = "Short and long descriptions must be different"


class NameCollisionError(MapActionError):
    """The slug is reserved."""

    default_code = "NAME_COLLISION"
    default_message = "Please choose a different name"


class InsufficientLocationsError(MapActionError):
    """Raised when fewer usable locations than the policy minimum were parsed."""

    default_code = "INSUFFICIENT_LOCATIONS"

    def __init__(self, minimum: int, count: int) -> None:
        self.minimum = minimum
        self.count = count
        super().__init__(f"Need at least {minimum} valid locations (got {count})")


class TooManyLocationsError(MapActionError):
    """More locations than the policy allows."""

    default_code = "TOO_MANY_LOCATIONS"


class InsufficientPointsError(MapActionError):
    """Diameter estimation needs at least two points."""

    default_code = "INSUFFICIENT_POINTS"


class MissingCredentialsError(MapActionError):
    """Request lacks an action or a secret."""

    default_code = "MISSING_CREDENTIALS"
    default_message = "Missing action or secret"


class InvalidActionError(MapActionError):
    """Action is neither create nor delete."""

    default_code = "INVALID_ACTION"
    default_message = "Invalid action"


# ---------------------------------------------------------------------------
# Lookup and ownership
# ---------------------------------------------------------------------------


class NotFoundError(MapActionError):
    """No map with the requested id."""

    category = NOT_FOUND
    default_code = "MAP_NOT_FOUND"
    default_message = "Map not found"


class UserNotFoundError(NotFoundError):
    """Secret does not belong to any user."""

    default_code = "USER_NOT_FOUND"
    default_message = "User not found"


class ForbiddenError(MapActionError):
    """Caller does not own the map."""

    category = FORBIDDEN
    default_code = "FORBIDDEN"
    default_message = "You are not authorized to delete this map"


class DuplicateSlugError(MapActionError):
    """Another stored map already uses the slug."""

    category = CONFLICT
    default_code = "DUPLICATE_SLUG"
