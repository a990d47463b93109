"""Mini README: Create and delete community maps.

Structure:
    * MapService - validates submissions, computes ``maxDist`` and talks to
      the map store and user directory.

``create_map`` and ``delete_map`` are the operations exposed to a transport
layer. ``perform_action`` accepts a full request body (``action``,
``secret`` and the action's fields) and returns the response payload.
Status codes come from the raised error's ``status_code``. Errors from
validation, estimation or the store are never caught here.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from ..errors import (
    DuplicateSlugError,
    ForbiddenError,
    InvalidActionError,
    MissingCredentialsError,
    MissingFieldsError,
    NotFoundError,
    UserNotFoundError,
)
from ..geometry import EARTH_RADIUS_KM, estimate_diameter, project_many
from ..logging_utils import get_logger
from ..models import MapRecord, MapSubmission
from ..parsing import generate_slug, parse_map_data
from ..storage import MapStore, UserDirectory
from ..validation import (
    DEFAULT_CONTACT_EMAIL,
    ReservedNames,
    ValidationPolicy,
    load_reserved_names,
    validate_submission,
)
from ..validation.validator import MapDataParser, SlugGenerator

LOGGER = get_logger(__name__)

CREATE_ACTION = "create"
DELETE_ACTION = "delete"


class MapService:
    """Orchestrate validation, spread estimation and storage of maps."""

    def __init__(
        self,
        store: MapStore,
        users: UserDirectory,
        *,
        policy: Optional[ValidationPolicy] = None,
        reserved_names: Optional[ReservedNames] = None,
        parser: MapDataParser = parse_map_data,
        slugify: SlugGenerator = generate_slug,
        earth_radius_km: float = EARTH_RADIUS_KM,
        contact_email: str = DEFAULT_CONTACT_EMAIL,
    ) -> None:
        self.store = store
        self.users = users
        self.policy = policy or ValidationPolicy()
        self.reserved_names = reserved_names if reserved_names is not None else load_reserved_names()
        self.parser = parser
        self.slugify = slugify
        self.earth_radius_km = earth_radius_km
        self.contact_email = contact_email
        self._handlers: Dict[str, Callable[[str, Mapping[str, Any]], Dict[str, Any]]] = {
            CREATE_ACTION: self._handle_create,
            DELETE_ACTION: self._handle_delete,
        }

    @classmethod
    def from_settings(cls, store: MapStore, users: UserDirectory, settings: Any) -> "MapService":
        """Build a service from ``WorldmapsSettings``."""

        return cls(
            store,
            users,
            policy=settings.policy(),
            reserved_names=settings.reserved_names(),
            earth_radius_km=settings.earth_radius_km,
            contact_email=settings.contact_email,
        )

    def create_map(self, submission: MapSubmission, user_id: str) -> MapRecord:
        """Validate ``submission`` and store it as a map owned by ``user_id``."""

        validated = validate_submission(
            submission,
            self.policy,
            self.reserved_names,
            parser=self.parser,
            slugify=self.slugify,
            contact_email=self.contact_email,
        )
        projected = project_many(validated.points, self.earth_radius_km)
        max_dist = estimate_diameter(projected)

        record = MapRecord(
            map_id="",
            slug=validated.slug,
            name=validated.name,
            created_by=user_id,
            data=list(validated.points),
            description_short=validated.description_short,
            description_long=validated.description_long,
            max_dist=max_dist,
        )
        if self.store.find_by_slug(record.slug) is not None:
            raise DuplicateSlugError(f"A map with slug '{record.slug}' already exists")
        stored = self.store.create(record)
        LOGGER.info(
            "Created map %s (%s) for user %s with %s locations, maxDist=%.3f",
            stored.map_id,
            stored.slug,
            user_id,
            len(stored.data),
            stored.max_dist,
        )
        return stored

    def delete_map(self, map_id: str, user_id: str) -> None:
        """Remove a map; only its creator may do so."""

        record = self.store.find_by_id(map_id)
        if record is None:
            raise NotFoundError()
        if str(record.created_by) != str(user_id):
            LOGGER.info("User %s may not delete map %s owned by %s", user_id, map_id, record.created_by)
            raise ForbiddenError()
        self.store.remove(record)
        LOGGER.info("Deleted map %s for user %s", map_id, user_id)

    def perform_action(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Authenticate the caller by secret and dispatch on ``action``."""

        action = payload.get("action")
        secret = payload.get("secret")
        if not action or not secret:
            raise MissingCredentialsError()

        user = self.users.find_by_secret(secret) if isinstance(secret, str) else None
        if user is None:
            raise UserNotFoundError()

        handler = self._handlers.get(action) if isinstance(action, str) else None
        if handler is None:
            raise InvalidActionError()
        return handler(user.user_id, payload)

    def _handle_create(self, user_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        record = self.create_map(MapSubmission.from_payload(dict(payload)), user_id)
        return {"message": "Map created", "map": record.as_dict()}

    def _handle_delete(self, user_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        map_id = payload.get("mapId")
        if not map_id:
            raise MissingFieldsError("Missing mapId")
        self.delete_map(str(map_id), user_id)
        return {"message": "Map deleted"}
