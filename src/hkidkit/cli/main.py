"""Command-line interface for hkidkit.

Provides CLI commands for checking, computing and formatting HKID numbers.
"""

import importlib.metadata
import json
import sys
from pathlib import Path

import click

from hkidkit.checksum import ChecksumScheme
from hkidkit.models import Invalid, ValidationOutcome, is_acceptable

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("hkidkit")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.3.0"  # Fallback for development

_SCHEME_CHOICE = click.Choice([s.value for s in ChecksumScheme])


def _describe(outcome: ValidationOutcome) -> str:
    if isinstance(outcome, Invalid):
        if outcome.expected is not None:
            return f"invalid ({outcome.kind.value}: expected {outcome.expected}, got {outcome.actual})"
        return f"invalid ({outcome.kind.value})"
    return f"valid {outcome.identifier.display}"


@click.group()
@click.version_option(version=__version__, prog_name="hkidkit")
def cli() -> None:
    """Validate and format Hong Kong Identity Card numbers.

    Use 'hkidkit COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--scheme",
    type=_SCHEME_CHOICE,
    default=ChecksumScheme.POSITIONAL.value,
    show_default=True,
    help="Checksum weight alignment for single-letter bodies",
)
@click.option(
    "--allow-empty",
    is_flag=True,
    help="Treat empty values as acceptable (optional field)",
)
@click.option("--json", "as_json", is_flag=True, help="Print one JSON outcome per value")
def check(values: tuple[str, ...], scheme: str, allow_empty: bool, as_json: bool) -> None:
    """Validate one or more identifiers.

    Exits with status 1 if any value is not acceptable.

    Examples
    --------
        hkidkit check "K123456(8)"
        hkidkit check k1234568 "KA123456 (4)" --json
    """
    from hkidkit.engine import EngineConfig, IdentifierEngine

    engine = IdentifierEngine(EngineConfig(scheme=scheme))
    all_ok = True

    for value in values:
        outcome = engine.validate(value)
        ok = is_acceptable(outcome, required=not allow_empty)
        all_ok = all_ok and ok

        if as_json:
            click.echo(json.dumps({"input": value, **outcome.to_dict()}, ensure_ascii=False))
        else:
            click.secho(f"{value}: {_describe(outcome)}", fg="green" if ok else "red")

    if not all_ok:
        sys.exit(1)


@cli.command("check-digit")
@click.argument("bodies", nargs=-1, required=True)
@click.option(
    "--scheme",
    type=_SCHEME_CHOICE,
    default=ChecksumScheme.POSITIONAL.value,
    show_default=True,
    help="Checksum weight alignment for single-letter bodies",
)
def check_digit(bodies: tuple[str, ...], scheme: str) -> None:
    """Compute the check character for identifier bodies such as K123456.

    Examples
    --------
        hkidkit check-digit K123456 KA123456
    """
    from hkidkit.engine import EngineConfig, IdentifierEngine
    from hkidkit.exceptions import MalformedIdentifierError

    engine = IdentifierEngine(EngineConfig(scheme=scheme))
    failed = False

    for body in bodies:
        try:
            check_char = engine.compute_check_digit(body)
        except MalformedIdentifierError as e:
            click.secho(f"Error: {e}", fg="red", err=True)
            failed = True
            continue
        click.echo(f"{body.strip().upper()}({check_char})")

    if failed:
        sys.exit(1)


@cli.command("format")
@click.argument("values", nargs=-1, required=True)
def format_(values: tuple[str, ...]) -> None:
    """Print the canonical display form of each value.

    Examples
    --------
        hkidkit format k1234568
    """
    from hkidkit.formatter import format_identifier

    for value in values:
        click.echo(format_identifier(value))


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--audit-log",
    type=click.Path(dir_okay=False),
    default=None,
    help="Audit event log path (default: <output stem>.events.jsonl)",
)
@click.option(
    "--scheme",
    type=_SCHEME_CHOICE,
    default=ChecksumScheme.POSITIONAL.value,
    show_default=True,
    help="Checksum weight alignment for single-letter bodies",
)
@click.option(
    "--keep-blank",
    is_flag=True,
    help="Report blank lines as empty outcomes instead of skipping them",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def batch(
    input_path: str,
    output: str,
    audit_log: str | None,
    scheme: str,
    keep_blank: bool,
    verbose: bool,
) -> None:
    """Validate one identifier per line of INPUT_PATH.

    Writes one JSON outcome per checked line to OUTPUT and a JSONL audit
    log in which identifiers appear only as per-run keyed digests.

    Examples
    --------
        hkidkit batch ids.txt -o outcomes.jsonl
        hkidkit batch ids.txt -o out/outcomes.jsonl --audit-log out/events.jsonl
    """
    from hkidkit.engine import BatchConfig, run_batch

    try:
        config = BatchConfig(
            input_path=Path(input_path),
            output_path=Path(output),
            audit_log_path=Path(audit_log) if audit_log else None,
            scheme=scheme,
            skip_blank_lines=not keep_blank,
        )

        if verbose:
            click.echo(f"Processing: {input_path}", err=True)
            click.echo(f"  Scheme: {config.scheme.value}", err=True)
            click.echo(f"  Audit log: {config.audit_log_path}", err=True)

        result = run_batch(config)

        if verbose:
            for kind, count in sorted(result.error_counts.items()):
                click.echo(f"  {kind}: {count}", err=True)

        click.secho(
            f"✓ Checked {result.total_checked} values "
            f"({result.total_valid} valid, {result.total_invalid} invalid)",
            fg="green",
        )

    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
