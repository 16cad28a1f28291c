"""Command-line interface for sweepdedupe.

Provides CLI commands for parsing reference libraries and detecting
duplicates.
"""

import importlib.metadata
import sys
from pathlib import Path

import click

from sweepdedupe.engine.config import Action, DupeRef, FieldWeight

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("sweepdedupe")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="sweepdedupe")
def cli() -> None:
    """Sort-sweep duplicate detection for bibliographic references.

    Use 'sweepdedupe COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def parse(input_path: str, output: str, verbose: bool) -> None:
    """Parse a reference library to flat JSONL records.

    Format is taken from the file extension, or sniffed from the content.

    Supported formats: RIS (.ris), BibTeX (.bib), JSON (.json),
    JSON Lines (.jsonl)

    Examples
    --------
        sweepdedupe parse references.ris -o records.jsonl
    """
    from sweepdedupe.api import write_jsonl
    from sweepdedupe.parse import ingest_file

    try:
        if verbose:
            click.echo(f"Parsing file: {Path(input_path).name}", err=True)

        records, warnings, errors = ingest_file(input_path)

        if verbose:
            for message in [*warnings, *errors]:
                click.echo(f"  {message}", err=True)
            click.echo(f"Found {len(records)} records", err=True)
            click.echo(f"Writing to: {output}", err=True)

        write_jsonl(records, output)

        click.secho(f"✓ Successfully wrote {len(records)} records to {output}", fg="green")

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--strategy",
    "-s",
    type=str,
    default="clark",
    show_default=True,
    help="Strategy name (see 'sweepdedupe strategies')",
)
@click.option(
    "--strategy-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON strategy descriptor to register and use",
)
@click.option(
    "--action",
    type=click.Choice([a.value for a in Action]),
    default=Action.STATS.value,
    show_default=True,
    help="stats annotates, mark labels, delete drops duplicates",
)
@click.option(
    "--action-field",
    type=str,
    default="dedupe",
    show_default=True,
    help="Output field written by stats and mark",
)
@click.option(
    "--threshold",
    type=click.FloatRange(0.0, 1.0),
    default=0.1,
    show_default=True,
    help="Score at or above which a record is a duplicate",
)
@click.option("--mark-ok", type=str, default="OK", show_default=True, help="Mark for unique records")
@click.option("--mark-dupe", type=str, default="DUPE", show_default=True, help="Mark for duplicates")
@click.option(
    "--dupe-ref",
    type=click.Choice([d.value for d in DupeRef]),
    default=DupeRef.INDEX.value,
    show_default=True,
    help="How dupeOf refers to other records",
)
@click.option(
    "--field-weight",
    type=click.Choice([w.value for w in FieldWeight]),
    default=FieldWeight.MINIMUM.value,
    show_default=True,
    help="How field scores combine within a step",
)
@click.option(
    "--mark-original",
    is_flag=True,
    help="Score the first record of each duplicate group too",
)
@click.option(
    "--no-validate",
    is_flag=True,
    help="Skip strategy validation",
)
@click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSONL audit log to this path",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def dedupe(
    input_path: str,
    output: str,
    strategy: str,
    strategy_file: str | None,
    action: str,
    action_field: str,
    threshold: float,
    mark_ok: str,
    mark_dupe: str,
    dupe_ref: str,
    field_weight: str,
    mark_original: bool,
    no_validate: bool,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Detect duplicates in INPUT_PATH and write the result as JSONL.

    INPUT_PATH is a reference library (RIS, BibTeX, JSON or JSON Lines).

    Examples
    --------
        sweepdedupe dedupe references.ris -o annotated.jsonl
        sweepdedupe dedupe refs.bib -o unique.jsonl --action delete --threshold 0.5
        sweepdedupe dedupe refs.ris -o out.jsonl --strategy-file mine.json --log run.jsonl
    """
    from sweepdedupe.api import write_jsonl
    from sweepdedupe.audit import AuditLogger, generate_run_id
    from sweepdedupe.engine import Deduper
    from sweepdedupe.strategies import load_strategy_file

    if verbose:
        click.echo("Starting duplicate detection...", err=True)
        click.echo(f"  Input: {input_path}", err=True)
        click.echo(f"  Output: {output}", err=True)

    logger = None
    try:
        if strategy_file is not None:
            strategy, _ = load_strategy_file(strategy_file)

        if log_path is not None:
            logger = AuditLogger(generate_run_id(), Path(log_path))

        deduper = Deduper(
            strategy=strategy,
            validate_strategy=not no_validate,
            action=action,
            action_field=action_field,
            threshold=threshold,
            mark_ok=mark_ok,
            mark_dupe=mark_dupe,
            dupe_ref=dupe_ref,
            field_weight=field_weight,
            mark_original=mark_original,
            logger=logger,
        )

        if verbose:
            click.echo(f"  Strategy: {strategy}", err=True)
            click.echo(f"  Action: {action} (threshold {threshold})", err=True)

        records = deduper.run(input_path)
        count = write_jsonl(records, output)

        click.secho(f"✓ Wrote {count} records to {output}", fg="green")

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)

    finally:
        if logger is not None:
            logger.close()


@cli.command()
def strategies() -> None:
    """List the available strategies."""
    from sweepdedupe.strategies import list_strategies

    for name, strategy in list_strategies():
        click.echo(f"{name}: {strategy.title} ({len(strategy.steps)} steps)")
        click.echo(f"    {strategy.description}")


if __name__ == "__main__":
    cli()
