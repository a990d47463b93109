"""Mini README: Ordered validation of a map submission.

Structure:
    * validate_submission - run every check and return a ValidatedSubmission.

Checks run in a fixed order and stop at the first failure, which decides the
message a user sees when several things are wrong at once:

    1. required fields present
    2. name length
    3. short description length
    4. long description length
    5. descriptions differ
    6. slug not reserved
    7. enough parsed locations
    8. not too many parsed locations
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from ..errors import (
    DuplicateDescriptionsError,
    InsufficientLocationsError,
    InvalidLongDescriptionError,
    InvalidNameError,
    InvalidShortDescriptionError,
    MissingFieldsError,
    NameCollisionError,
    TooManyLocationsError,
)
from ..logging_utils import get_logger
from ..models import GeoPoint, MapSubmission, ValidatedSubmission
from ..parsing import generate_slug, parse_map_data
from .policy import ValidationPolicy
from .reserved import ReservedNames

LOGGER = get_logger(__name__)

DEFAULT_CONTACT_EMAIL = "maps@worldmaps.example"

MapDataParser = Callable[[Any], Optional[Sequence[GeoPoint]]]
SlugGenerator = Callable[[str], str]


def _is_blank(value: Any) -> bool:
    """Treat None, empty strings, False and zero as missing; containers are present."""

    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value
    return False


def _trim(value: Any) -> Any:
    """Strip surrounding whitespace from strings and pass anything else through."""

    return value.strip() if isinstance(value, str) else value


def _text_length(value: str) -> int:
    """Length in UTF-16 code units, so astral characters such as emoji count twice."""

    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


def _within(value: Any, minimum: int, maximum: int) -> bool:
    """True for strings whose length falls inside the inclusive bounds."""

    return isinstance(value, str) and minimum <= _text_length(value) <= maximum


def validate_submission(
    submission: MapSubmission,
    policy: ValidationPolicy,
    reserved_names: ReservedNames,
    *,
    parser: MapDataParser = parse_map_data,
    slugify: SlugGenerator = generate_slug,
    contact_email: str = DEFAULT_CONTACT_EMAIL,
) -> ValidatedSubmission:
    """Validate ``submission`` against ``policy`` and the reserved names.

    Raises the ``MapActionError`` subclass of the first failing check.
    ``parser`` and ``slugify`` default to the bundled implementations.
    """

    if any(
        _is_blank(value)
        for value in (
            submission.name,
            submission.data,
            submission.description_short,
            submission.description_long,
        )
    ):
        raise MissingFieldsError()

    name = _trim(submission.name)
    description_short = _trim(submission.description_short)
    description_long = _trim(submission.description_long)

    if not _within(name, policy.min_name_length, policy.max_name_length):
        raise InvalidNameError(
            f"Name must be between {policy.min_name_length} and "
            f"{policy.max_name_length} characters"
        )
    if not _within(
        description_short,
        policy.min_short_description_length,
        policy.max_short_description_length,
    ):
        raise InvalidShortDescriptionError(
            f"Short description must be between {policy.min_short_description_length} and "
            f"{policy.max_short_description_length} characters"
        )
    if not _within(
        description_long,
        policy.min_long_description_length,
        policy.max_long_description_length,
    ):
        raise InvalidLongDescriptionError(
            f"Long description must be between {policy.min_long_description_length} and "
            f"{policy.max_long_description_length} characters"
        )
    if description_short == description_long:
        raise DuplicateDescriptionsError()

    slug = slugify(name)
    if reserved_names.collides(slug):
        LOGGER.info("Rejected map name %r: slug %r is reserved", name, slug)
        raise NameCollisionError()

    points = parser(submission.data)
    count = len(points) if points else 0
    if not points or count < policy.min_locations:
        raise InsufficientLocationsError(policy.min_locations, count)
    if count > policy.max_locations:
        raise TooManyLocationsError(
            f"To make a map with more than {policy.max_locations} locations, "
            f"please contact us at {contact_email}"
        )

    LOGGER.debug("Submission %r passed validation with %s locations", slug, count)
    return ValidatedSubmission(
        slug=slug,
        name=name,
        description_short=description_short,
        description_long=description_long,
        points=tuple(points),
    )
