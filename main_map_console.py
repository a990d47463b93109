"""Mini README: Operator CLI for checking community map submissions.

Commands:
    * validate - run the submission checks on a JSON file.
    * spread - print the estimated maxDist of a location file.
    * create - run the full create path against a throwaway in-memory store.

Settings (policy bounds, reserved-name data, log level) come from
``WORLDMAPS_`` environment variables. Map errors are reported on stderr
with exit code 1.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, NoReturn

import typer

from worldmaps.configuration import get_settings
from worldmaps.errors import MapActionError
from worldmaps.geometry import estimate_diameter, project_many
from worldmaps.logging_utils import configure_root_logger, get_logger
from worldmaps.maps import MapService
from worldmaps.models import MapSubmission
from worldmaps.parsing import parse_map_data
from worldmaps.storage import InMemoryMapStore, InMemoryUserDirectory
from worldmaps.validation import validate_submission

cli = typer.Typer(help="Validate community maps and compute their spread.")
LOGGER = get_logger(__name__)


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as error:
        typer.echo(f"Could not read {path}: {error}", err=True)
        raise typer.Exit(code=2) from error


def _load_submission(path: Path) -> MapSubmission:
    payload = _load_json(path)
    if not isinstance(payload, dict):
        typer.echo(f"{path} must contain a JSON object", err=True)
        raise typer.Exit(code=2)
    return MapSubmission.from_payload(payload)


def _fail(error: MapActionError) -> NoReturn:
    typer.echo(f"Rejected ({error.code}): {error.message}", err=True)
    raise typer.Exit(code=1)


@cli.callback()
def main() -> None:
    """Configure logging from settings before any command runs."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    LOGGER.debug("Running in %s environment", settings.environment)


@cli.command()
def validate(submission_file: Path = typer.Argument(..., help="JSON file with the submission fields.")) -> None:
    """Check a submission without storing it."""

    settings = get_settings()
    submission = _load_submission(submission_file)
    try:
        validated = validate_submission(
            submission,
            settings.policy(),
            settings.reserved_names(),
            contact_email=settings.contact_email,
        )
    except MapActionError as error:
        _fail(error)
    typer.echo(f"OK: slug '{validated.slug}' with {len(validated.points)} locations")


@cli.command()
def spread(data_file: Path = typer.Argument(..., help="JSON file with map locations.")) -> None:
    """Print the maxDist a map with these locations would get."""

    settings = get_settings()
    points = parse_map_data(_load_json(data_file)) or []
    try:
        max_dist = estimate_diameter(project_many(points, settings.earth_radius_km))
    except MapActionError as error:
        _fail(error)
    typer.echo(f"{len(points)} locations, maxDist={max_dist:.3f} km")


@cli.command()
def create(
    submission_file: Path = typer.Argument(..., help="JSON file with the submission fields."),
    user_id: str = typer.Option("local-operator", help="Identifier recorded as created_by."),
) -> None:
    """Run the create path and print the resulting map record."""

    settings = get_settings()
    service = MapService.from_settings(InMemoryMapStore(), InMemoryUserDirectory(), settings)
    submission = _load_submission(submission_file)
    try:
        record = service.create_map(submission, user_id)
    except MapActionError as error:
        _fail(error)
    payload: Dict[str, Any] = record.as_dict()
    typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    cli()
