"""Command-line interface for risparse.

Provides CLI commands for parsing and validating RIS citation files.
"""

import importlib.metadata
import json
import sys
import time
import traceback
from pathlib import Path

import click

from risparse.models import REFERENCE_TYPE_DESCRIPTIONS

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("risparse")
except importlib.metadata.PackageNotFoundError:
    from risparse import __version__


@click.group()
@click.version_option(version=__version__, prog_name="risparse")
def cli() -> None:
    """Parse RIS (Research Information Systems) citation files.

    Use 'risparse COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output JSONL file path (default: print JSON to stdout)",
)
@click.option(
    "--all",
    "all_records",
    is_flag=True,
    help="Parse every record in the file instead of a single citation",
)
@click.option(
    "--lenient",
    is_flag=True,
    help="With --all, skip records that fail instead of aborting",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="File encoding (default: auto-detect)",
)
@click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def parse(
    input_path: str,
    output: str | None,
    all_records: bool,
    lenient: bool,
    encoding: str | None,
    log_path: str | None,
    verbose: bool,
) -> None:
    """Parse an RIS file into JSON.

    INPUT_PATH holds one citation, or several consecutive records when
    --all is given.

    Examples
    --------
        risparse parse citation.ris
        risparse parse library.ris --all -o library.jsonl
        risparse parse library.ris --all --lenient --log events.jsonl
    """
    from risparse import ParserConfig, parse_file, parse_records_file, write_jsonl
    from risparse.audit import AuditLogger, generate_run_id

    logger = AuditLogger(generate_run_id(), Path(log_path)) if log_path else None
    start = time.perf_counter()

    try:
        config = ParserConfig(encoding=encoding, strict=not lenient)

        if logger is not None:
            parameters = {"input": input_path, "parser_version": __version__, **config.to_dict()}
            logger.run_started(sys.argv, parameters)

        if verbose:
            click.echo(f"Parsing: {input_path} (all={all_records})", err=True)

        if all_records:
            citations, errors = parse_records_file(input_path, config=config, logger=logger)
        else:
            citations, errors = [parse_file(input_path, config=config, logger=logger)], []

        for message in errors:
            click.secho(f"Warning: {message}", fg="yellow", err=True)

        if output:
            count = write_jsonl(citations, output)
            click.secho(f"✓ Successfully wrote {count} citations to {output}", fg="green")
        elif all_records:
            for citation in citations:
                click.echo(json.dumps(citation.to_dict(), ensure_ascii=False, sort_keys=True))
        else:
            click.echo(json.dumps(citations[0].to_dict(), ensure_ascii=False, indent=2))

        if logger is not None:
            logger.run_finished(
                "partial" if errors else "success",
                time.perf_counter() - start,
                citations_parsed=len(citations),
            )

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        tb = traceback.format_exc() if verbose else None
        if tb is not None:
            click.echo(tb, err=True)
        if logger is not None:
            logger.error(
                type(e).__name__,
                str(e),
                source=Path(input_path).name,
                traceback=tb,
            )
            logger.run_finished("failed", time.perf_counter() - start)
        sys.exit(1)

    finally:
        if logger is not None:
            logger.close()


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="File encoding (default: auto-detect)",
)
def validate(input_path: str, encoding: str | None) -> None:
    """Check that INPUT_PATH holds one valid RIS citation.

    Exits with status 1 and prints the reason when it does not.
    """
    from risparse import ParseError, ParserConfig, RISFormatError, parse_file

    try:
        citation = parse_file(input_path, config=ParserConfig(encoding=encoding))
    except (RISFormatError, ParseError, ValueError) as e:
        click.secho(f"✗ {input_path}: {e}", fg="red", err=True)
        sys.exit(1)

    click.secho(
        f"✓ {input_path}: valid {citation.reference_type} "
        f"({citation.reference_type.description})",
        fg="green",
    )


@cli.command("types")
def list_types() -> None:
    """List every RIS reference type code and its meaning."""
    for ref_type, description in REFERENCE_TYPE_DESCRIPTIONS.items():
        click.echo(f"{ref_type.value:<8} {description}")


if __name__ == "__main__":
    cli()
