"""Mini README: Shared pytest fixtures for the worldmaps test suite.

Provides a small validation policy, a reserved-name set, a factory for
valid submissions and a map service wired to in-memory collaborators.
"""

from __future__ import annotations

from typing import Callable, Dict, List

import pytest

from worldmaps.maps import MapService
from worldmaps.models import MapSubmission, User
from worldmaps.storage import InMemoryMapStore, InMemoryUserDirectory
from worldmaps.validation import ReservedNames, ValidationPolicy

SHORT_DESCRIPTION = "Ten famous capitals."
LONG_DESCRIPTION = (
    "A tour of capital cities spread across several continents, ideal for "
    "players who want to learn world geography."
)


def make_locations(count: int) -> List[Dict[str, float]]:
    """Distinct, valid locations spread along the equator."""

    return [{"lat": 0.0, "lng": -170.0 + index * (340.0 / max(count, 1))} for index in range(count)]


@pytest.fixture()
def policy() -> ValidationPolicy:
    return ValidationPolicy(
        min_name_length=3,
        max_name_length=30,
        min_short_description_length=10,
        max_short_description_length=100,
        min_long_description_length=20,
        max_long_description_length=1000,
        min_locations=5,
        max_locations=10,
    )


@pytest.fixture()
def reserved_names() -> ReservedNames:
    return ReservedNames.build(
        country_codes=["US", "FR", "DE", "JP"],
        official_slugs=["united-states", "france", "germany", "japan"],
    )


@pytest.fixture()
def submission_factory() -> Callable[..., MapSubmission]:
    def factory(**overrides: object) -> MapSubmission:
        fields: Dict[str, object] = {
            "name": "Capital Cities",
            "data": make_locations(6),
            "description_short": SHORT_DESCRIPTION,
            "description_long": LONG_DESCRIPTION,
        }
        fields.update(overrides)
        return MapSubmission(**fields)

    return factory


@pytest.fixture()
def owner() -> User:
    return User(user_id="user_owner", username="mapmaker", secret="owner-secret")


@pytest.fixture()
def other_user() -> User:
    return User(user_id="user_other", username="visitor", secret="other-secret")


@pytest.fixture()
def store() -> InMemoryMapStore:
    return InMemoryMapStore()


@pytest.fixture()
def service(
    store: InMemoryMapStore,
    owner: User,
    other_user: User,
    policy: ValidationPolicy,
    reserved_names: ReservedNames,
) -> MapService:
    users = InMemoryUserDirectory(users=[owner, other_user])
    return MapService(store, users, policy=policy, reserved_names=reserved_names)
