"""Batch validation runner.

Validates one identifier per line of a text file, writing one JSON outcome
per checked line and a structured audit event log.
"""

import json
import sys
import time
from collections import Counter
from pathlib import Path
from typing import Any

from hkidkit.audit import AuditLogger, file_digest, generate_run_id
from hkidkit.audit.helpers import get_package_version, get_python_version
from hkidkit.engine.config import BatchConfig, BatchResult, EngineConfig
from hkidkit.engine.engine import IdentifierEngine
from hkidkit.exceptions import BatchInputError
from hkidkit.models import Invalid
from hkidkit.normalize import clean_input

__all__ = ["run_batch", "read_lines"]


def read_lines(path: Path) -> list[str]:
    """Read input lines, without line terminators.

    Lines end at LF, CRLF or CR only. Form feeds, U+2028 and the other
    characters str.splitlines also breaks on stay inside the line, so line
    numbers match what a text editor shows.

    Parameters
    ----------
    path : Path
        Text file (UTF-8, a leading BOM is ignored).

    Returns
    -------
    list[str]
        Lines in file order.

    Raises
    ------
    BatchInputError
        If the file is missing, not a regular file, or not valid UTF-8.
    """
    if not path.is_file():
        raise BatchInputError(f"Input file not found: {path}", file=str(path))
    try:
        with path.open(encoding="utf-8-sig") as f:
            return [line.rstrip("\n") for line in f]
    except UnicodeDecodeError as e:
        raise BatchInputError(f"Input file is not valid UTF-8: {path} ({e})", file=str(path)) from e


def run_batch(config: BatchConfig, command_argv: list[str] | None = None) -> BatchResult:
    """Validate every line of config.input_path.

    Each output line is the outcome's to_dict() plus the 1-based input
    line number under "line". Blank lines are skipped unless
    config.skip_blank_lines is False, in which case they yield EMPTY
    outcomes.

    Parameters
    ----------
    config : BatchConfig
        Batch configuration.
    command_argv : list[str] | None, optional
        Command-line arguments for the audit log, uses sys.argv if None.

    Returns
    -------
    BatchResult
        Counters and output paths.

    Raises
    ------
    BatchInputError
        If the input file cannot be read. The failure is recorded in the
        audit log before the exception propagates.
    """
    run_id = generate_run_id()
    engine = IdentifierEngine(EngineConfig(scheme=config.scheme))
    start = time.perf_counter()

    parameters: dict[str, Any] = {
        **config.to_dict(),
        "package_version": get_package_version(),
        "python_version": get_python_version(),
    }

    with AuditLogger(run_id=run_id, log_path=config.audit_log_path) as audit:
        audit.run_started(command=command_argv or sys.argv, parameters=parameters)

        try:
            lines = read_lines(config.input_path)
        except BatchInputError as e:
            audit.error(type(e).__name__, str(e))
            audit.run_finished("failed", time.perf_counter() - start)
            raise

        total_checked = 0
        total_valid = 0
        error_counts: Counter[str] = Counter()

        config.output_path.parent.mkdir(parents=True, exist_ok=True)
        with config.output_path.open("w", encoding="utf-8") as out:
            for line_no, text in enumerate(lines, start=1):
                if config.skip_blank_lines and not text.strip():
                    continue

                outcome = engine.validate(text)
                total_checked += 1
                if isinstance(outcome, Invalid):
                    error_counts[outcome.kind.value] += 1
                else:
                    total_valid += 1

                audit.value_checked(line_no, clean_input(text), outcome)

                record = {"line": line_no, **outcome.to_dict()}
                json.dump(record, out, ensure_ascii=False, separators=(",", ":"))
                out.write("\n")

        audit.artifact_written(
            path=str(config.output_path),
            sha256=file_digest(config.output_path),
            record_count=total_checked,
        )

        counters = {
            "values_checked": total_checked,
            "values_valid": total_valid,
            "values_invalid": total_checked - total_valid,
        }
        audit.run_finished("success", time.perf_counter() - start, counters=counters)

    return BatchResult(
        run_id=run_id,
        total_checked=total_checked,
        total_valid=total_valid,
        error_counts=dict(error_counts),
        output_files={
            "outcomes": str(config.output_path),
            "events": str(config.audit_log_path),
        },
    )
