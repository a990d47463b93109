"""Mini README: Tests for the ordered submission checks.

Structure:
    * presence and trimming
    * length bounds for name and descriptions
    * reserved-name collisions
    * location count bounds
    * check ordering when several rules fail
"""

from __future__ import annotations

import json

import pytest

from conftest import SHORT_DESCRIPTION, make_locations
from worldmaps.errors import (
    DuplicateDescriptionsError,
    InsufficientLocationsError,
    InvalidLongDescriptionError,
    InvalidNameError,
    InvalidShortDescriptionError,
    MissingFieldsError,
    NameCollisionError,
    TooManyLocationsError,
)
from worldmaps.validation import ReservedNames, ValidationPolicy, load_reserved_names, validate_submission


def test_valid_submission_is_trimmed_and_slugged(policy, reserved_names, submission_factory) -> None:
    submission = submission_factory(
        name="  Capital Cities ",
        description_short=f"  {SHORT_DESCRIPTION}\n",
    )
    validated = validate_submission(submission, policy, reserved_names)
    assert validated.name == "Capital Cities"
    assert validated.slug == "capital-cities"
    assert validated.description_short == SHORT_DESCRIPTION
    assert len(validated.points) == 6


@pytest.mark.parametrize("field", ["name", "data", "description_short", "description_long"])
@pytest.mark.parametrize("value", [None, ""])
def test_missing_fields(policy, reserved_names, submission_factory, field, value) -> None:
    with pytest.raises(MissingFieldsError) as excinfo:
        validate_submission(submission_factory(**{field: value}), policy, reserved_names)
    assert excinfo.value.message == "Missing name, data, description_short, or description_long"


def test_name_length_bounds(policy, reserved_names, submission_factory) -> None:
    with pytest.raises(InvalidNameError) as excinfo:
        validate_submission(submission_factory(name="ab"), policy, reserved_names)
    assert excinfo.value.message == "Name must be between 3 and 30 characters"

    with pytest.raises(InvalidNameError):
        validate_submission(submission_factory(name="x" * 31), policy, reserved_names)

    with pytest.raises(InvalidNameError):
        validate_submission(submission_factory(name="   "), policy, reserved_names)

    validated = validate_submission(submission_factory(name="x" * 30), policy, reserved_names)
    assert validated.name == "x" * 30


def test_non_string_name_is_invalid(policy, reserved_names, submission_factory) -> None:
    with pytest.raises(InvalidNameError):
        validate_submission(submission_factory(name=12345), policy, reserved_names)


def test_description_length_bounds(policy, reserved_names, submission_factory) -> None:
    with pytest.raises(InvalidShortDescriptionError) as excinfo:
        validate_submission(submission_factory(description_short="too short"), policy, reserved_names)
    assert excinfo.value.message == "Short description must be between 10 and 100 characters"

    with pytest.raises(InvalidLongDescriptionError) as excinfo:
        validate_submission(submission_factory(description_long="x" * 1001), policy, reserved_names)
    assert excinfo.value.message == "Long description must be between 20 and 1000 characters"


def test_identical_descriptions_are_rejected(policy, reserved_names, submission_factory) -> None:
    text = "Exactly the same words used twice here."
    with pytest.raises(DuplicateDescriptionsError):
        validate_submission(
            submission_factory(description_short=text, description_long=f" {text} "),
            policy,
            reserved_names,
        )


@pytest.mark.parametrize("name", ["All", "all!!", "US!", "Fr!", "-jp-", "France", "United States"])
def test_reserved_names_collide(policy, reserved_names, submission_factory, name) -> None:
    with pytest.raises(NameCollisionError) as excinfo:
        validate_submission(submission_factory(name=name), policy, reserved_names)
    assert excinfo.value.message == "Please choose a different name"


def test_bundled_reserved_names_cover_every_country(policy, submission_factory) -> None:
    reserved = load_reserved_names()
    assert "GB" in reserved.country_codes
    assert "united-kingdom" in reserved.official_slugs
    assert len(reserved.country_codes) == 249
    with pytest.raises(NameCollisionError):
        validate_submission(submission_factory(name="GB!"), policy, reserved)


def test_reserved_names_loaded_from_files(tmp_path) -> None:
    countries = tmp_path / "countries.json"
    countries.write_text(json.dumps(["nz"]), encoding="utf-8")
    official = tmp_path / "official.json"
    official.write_text(json.dumps({"NZ": {"name": "New Zealand", "slug": "new-zealand"}}), encoding="utf-8")

    reserved = load_reserved_names(countries, official)
    assert reserved.collides("NZ".lower())
    assert reserved.collides("new-zealand")
    assert not reserved.collides("new-zealand-roads")


def test_too_few_locations_reports_count(policy, reserved_names, submission_factory) -> None:
    with pytest.raises(InsufficientLocationsError) as excinfo:
        validate_submission(submission_factory(data=make_locations(4)), policy, reserved_names)
    assert excinfo.value.count == 4
    assert excinfo.value.message == "Need at least 5 valid locations (got 4)"


def test_unparseable_data_reports_zero(policy, reserved_names, submission_factory) -> None:
    with pytest.raises(InsufficientLocationsError) as excinfo:
        validate_submission(submission_factory(data="definitely not json"), policy, reserved_names)
    assert excinfo.value.message == "Need at least 5 valid locations (got 0)"


def test_invalid_entries_do_not_count(policy, reserved_names, submission_factory) -> None:
    data = make_locations(4) + [{"lat": 120, "lng": 0}, {"lat": 0}]
    with pytest.raises(InsufficientLocationsError) as excinfo:
        validate_submission(submission_factory(data=data), policy, reserved_names)
    assert excinfo.value.count == 4


def test_too_many_locations(policy, reserved_names, submission_factory) -> None:
    with pytest.raises(TooManyLocationsError) as excinfo:
        validate_submission(
            submission_factory(data=make_locations(policy.max_locations + 1)),
            policy,
            reserved_names,
            contact_email="maps@example.org",
        )
    assert excinfo.value.message == (
        "To make a map with more than 10 locations, please contact us at maps@example.org"
    )


def test_boundary_location_counts_pass(policy, reserved_names, submission_factory) -> None:
    for count in (policy.min_locations, policy.max_locations):
        validated = validate_submission(submission_factory(data=make_locations(count)), policy, reserved_names)
        assert len(validated.points) == count


def test_first_failing_check_wins(policy, reserved_names, submission_factory) -> None:
    submission = submission_factory(
        name="France",
        description_short="short",
        description_long="short",
        data=make_locations(50),
    )
    with pytest.raises(InvalidShortDescriptionError):
        validate_submission(submission, policy, reserved_names)

    submission = submission_factory(name="France", data=make_locations(50))
    with pytest.raises(NameCollisionError):
        validate_submission(submission, policy, reserved_names)


def test_custom_collaborators_are_used(policy, submission_factory) -> None:
    calls = []

    def fake_parser(raw):
        calls.append(raw)
        return None

    with pytest.raises(InsufficientLocationsError):
        validate_submission(
            submission_factory(data="opaque"),
            policy,
            ReservedNames(),
            parser=fake_parser,
            slugify=lambda name: "custom-slug",
        )
    assert calls == ["opaque"]

    with pytest.raises(NameCollisionError):
        validate_submission(
            submission_factory(),
            policy,
            ReservedNames(),
            slugify=lambda name: "all",
        )


def test_policy_rejects_inverted_bounds() -> None:
    with pytest.raises(ValueError):
        ValidationPolicy(min_locations=10, max_locations=5)
    with pytest.raises(ValueError):
        ValidationPolicy(min_name_length=-1)


def test_empty_location_list_counts_as_present(policy, reserved_names, submission_factory) -> None:
    with pytest.raises(InsufficientLocationsError) as excinfo:
        validate_submission(submission_factory(data=[]), policy, reserved_names)
    assert excinfo.value.message == "Need at least 5 valid locations (got 0)"


def test_lengths_count_utf16_code_units(reserved_names, submission_factory) -> None:
    narrow = ValidationPolicy(
        min_name_length=3,
        max_name_length=4,
        min_short_description_length=10,
        max_short_description_length=100,
        min_long_description_length=20,
        max_long_description_length=1000,
        min_locations=5,
        max_locations=10,
    )
    with pytest.raises(InvalidNameError):
        validate_submission(submission_factory(name="\U0001F30D\U0001F30D\U0001F30Dx"), narrow, reserved_names)

    validated = validate_submission(submission_factory(name="\U0001F30Dxy"), narrow, reserved_names)
    assert validated.name == "\U0001F30Dxy"
    assert validated.slug == "xy"
