"""CLI for validating and repairing the FlightChord dataset."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from flightchord_core import calculate_coverage
from flightchord_core.schemas import ResultKind, ValidationResult

from .attribution import SourceCatalog, backfill_store
from .checker import has_errors, validate
from .config import settings
from .repair import repair_store
from .store import ShardStore

logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

_SECTIONS: list[tuple[ResultKind, str]] = [
    (ResultKind.INFO, "Information"),
    (ResultKind.WARNING, "Warnings"),
    (ResultKind.ERROR, "Errors"),
]


def _print_results(results: list[ValidationResult]) -> None:
    by_kind = {kind: [r for r in results if r.kind == kind] for kind, _ in _SECTIONS}

    click.echo("\nValidation Results:")
    click.echo(f"  Info: {len(by_kind[ResultKind.INFO])}")
    click.echo(f"  Warnings: {len(by_kind[ResultKind.WARNING])}")
    click.echo(f"  Errors: {len(by_kind[ResultKind.ERROR])}\n")

    for kind, title in _SECTIONS:
        items = by_kind[kind]
        if not items:
            continue
        click.echo(f"{title}:")
        for r in items:
            click.echo(f"   {r.message}")
        click.echo("")


def _store(ctx: click.Context) -> ShardStore:
    return ShardStore(ctx.obj["data_dir"])


def _fail(exc: Exception) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Dataset directory (defaults to FLIGHTCHORD_DATA_DIR or public/data).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """FlightChord dataset maintenance CLI."""
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir or settings.data_dir


@cli.command("validate")
@click.option("--json-output", is_flag=True, help="Output results as JSON")
@click.pass_context
def validate_cmd(ctx: click.Context, json_output: bool) -> None:
    """Run every consistency check; exit 1 if any error is found."""
    store = _store(ctx)
    try:
        results = validate(
            store.load_shards(),
            store.load_airport_index(),
            store.load_airline_index(),
            store.load_manifest(),
        )
    except (FileNotFoundError, ValueError) as exc:
        _fail(exc)

    if json_output:
        click.echo(
            json.dumps(
                [r.model_dump(mode="json") for r in results],
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        _print_results(results)

    if has_errors(results):
        if not json_output:
            click.echo("Data validation failed! Please fix the errors above.")
        sys.exit(1)
    if not json_output:
        click.echo("Data validation passed! No critical errors found.")


@cli.command("repair")
@click.pass_context
def repair_cmd(ctx: click.Context) -> None:
    """Add missing reverse routes to the airport shards."""
    catalog = SourceCatalog(fallback_url=settings.placeholder_source_url)
    try:
        result = repair_store(_store(ctx), catalog)
    except (FileNotFoundError, ValueError) as exc:
        _fail(exc)

    click.echo("\nSummary:")
    click.echo(f"   Missing bidirectional routes found: {result.missing_found}")
    click.echo(f"   Files updated: {len(result.updated_shards)}")
    click.echo(f"   Routes added: {result.added_edges}")
    if result.skipped:
        click.echo(f"   Skipped: {result.skipped}")


@cli.command("backfill-sources")
@click.pass_context
def backfill_cmd(ctx: click.Context) -> None:
    """Attach timetable citations to routes that have none."""
    catalog = SourceCatalog(fallback_url=settings.placeholder_source_url)
    try:
        result = backfill_store(_store(ctx), catalog)
    except (FileNotFoundError, ValueError) as exc:
        _fail(exc)

    click.echo("\nSummary:")
    click.echo(f"   Total routes processed: {result.processed_routes}")
    click.echo(f"   Routes updated with sources: {result.updated_routes}")
    click.echo(f"   Placeholders requiring verification: {result.placeholders}")
    click.echo(f"   Files updated: {len(result.updated_shards)}")


@cli.command("coverage")
@click.option("--json-output", is_flag=True, help="Output as JSON")
@click.pass_context
def coverage_cmd(ctx: click.Context, json_output: bool) -> None:
    """Show airline and airport coverage from the coverage manifest."""
    store = _store(ctx)
    try:
        store.require_dirs()
        manifest = store.load_manifest()
    except (FileNotFoundError, ValueError) as exc:
        _fail(exc)

    report = calculate_coverage(manifest)
    if json_output:
        click.echo(json.dumps(report.model_dump(mode="json"), indent=2))
        return
    for name, stats in (("Airlines", report.airlines), ("Airports", report.airports)):
        click.echo(
            f"  {name}: {stats.implemented}/{stats.total} ({stats.coverage}%), "
            f"{stats.planned} planned"
        )


if __name__ == "__main__":
    cli()
