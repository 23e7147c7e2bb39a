"""End-to-end tests for batch validation runs.

Outputs and audit events are checked against the bundled JSON schemas.
"""

import json
from pathlib import Path

import jsonschema
import pytest

from hkidkit.engine import BatchConfig, run_batch
from hkidkit.exceptions import BatchInputError


def _read_jsonl(path: Path) -> list[dict]:
    with path.open(encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.fixture(scope="module")
def outcome_schema(schemas_dir: Path) -> dict:
    """Load validation outcome JSON schema."""
    with (schemas_dir / "validation_outcome.schema.json").open() as f:
        return json.load(f)


@pytest.fixture(scope="module")
def event_schema(schemas_dir: Path) -> dict:
    """Load log event JSON schema."""
    with (schemas_dir / "log_event.schema.json").open() as f:
        return json.load(f)


@pytest.mark.integration
def test_run_batch_outcomes(fixtures_dir: Path, tmp_path: Path, outcome_schema: dict) -> None:
    """Test one schema-valid outcome per non-blank line."""
    config = BatchConfig(
        input_path=fixtures_dir / "sample_ids.txt",
        output_path=tmp_path / "outcomes.jsonl",
    )

    result = run_batch(config, command_argv=["hkidkit", "batch"])

    assert result.total_checked == 8
    assert result.total_valid == 4
    assert result.error_counts == {
        "checksum_mismatch": 1,
        "malformed_input": 2,
        "missing_check_character": 1,
    }
    assert result.output_files["outcomes"] == str(config.output_path)

    records = _read_jsonl(config.output_path)
    assert [r["line"] for r in records] == [1, 2, 4, 5, 6, 7, 8, 9]
    assert records[1]["identifier"] == "KA123456(4)"
    assert records[3]["expected"] == "8"
    assert records[3]["actual"] == "7"
    for record in records:
        jsonschema.validate(instance=record, schema=outcome_schema)


@pytest.mark.integration
def test_run_batch_events(fixtures_dir: Path, tmp_path: Path, event_schema: dict) -> None:
    """Test audit events are schema-valid and free of raw identifiers."""
    config = BatchConfig(
        input_path=fixtures_dir / "sample_ids.txt",
        output_path=tmp_path / "outcomes.jsonl",
        audit_log_path=tmp_path / "logs" / "events.jsonl",
    )

    result = run_batch(config, command_argv=["hkidkit", "batch"])

    events = _read_jsonl(config.audit_log_path)
    for event in events:
        jsonschema.validate(instance=event, schema=event_schema)
        assert event["run_id"] == result.run_id

    names = [e["event"] for e in events]
    assert names[0] == "run_started"
    assert names[-2:] == ["artifact_written", "run_finished"]
    assert names.count("value_checked") == 8
    assert events[-1]["data"]["counters"] == {
        "values_checked": 8,
        "values_valid": 4,
        "values_invalid": 4,
    }

    log_text = config.audit_log_path.read_text(encoding="utf-8")
    assert "K123456" not in log_text
    assert "M000000" not in log_text


@pytest.mark.integration
def test_run_batch_keep_blank_lines(fixtures_dir: Path, tmp_path: Path) -> None:
    """Test blank lines become EMPTY outcomes when not skipped."""
    config = BatchConfig(
        input_path=fixtures_dir / "sample_ids.txt",
        output_path=tmp_path / "outcomes.jsonl",
        skip_blank_lines=False,
    )

    result = run_batch(config, command_argv=[])

    assert result.total_checked == 9
    assert result.error_counts["empty"] == 1
    assert _read_jsonl(config.output_path)[2] == {
        "line": 3,
        "valid": False,
        "error": "empty",
        "detail": "no identifier entered",
    }


@pytest.mark.integration
def test_run_batch_space_padded(tmp_path: Path) -> None:
    """Test the configured scheme is applied to every line."""
    input_path = tmp_path / "ids.txt"
    input_path.write_text("A123456(3)\nKA123456(4)\n", encoding="utf-8")
    config = BatchConfig(
        input_path=input_path,
        output_path=tmp_path / "outcomes.jsonl",
        scheme="space_padded",  # type: ignore[arg-type]
    )

    result = run_batch(config, command_argv=[])

    assert result.total_valid == 2


@pytest.mark.integration
def test_run_batch_missing_input_logged(tmp_path: Path) -> None:
    """Test unreadable input raises and is recorded in the audit log."""
    config = BatchConfig(
        input_path=tmp_path / "missing.txt",
        output_path=tmp_path / "outcomes.jsonl",
    )

    with pytest.raises(BatchInputError) as exc_info:
        run_batch(config, command_argv=[])

    assert exc_info.value.file == str(config.input_path)
    assert not config.output_path.exists()

    events = _read_jsonl(config.audit_log_path)
    assert [e["event"] for e in events] == ["run_started", "error", "run_finished"]
    assert events[-1]["data"]["status"] == "failed"


@pytest.mark.integration
def test_run_batch_rejects_non_utf8(tmp_path: Path) -> None:
    """Test non-UTF-8 input raises BatchInputError."""
    input_path = tmp_path / "ids.txt"
    input_path.write_bytes(b"K123456(8)\n\xff\xfe\xfa\n")
    config = BatchConfig(input_path=input_path, output_path=tmp_path / "out.jsonl")

    with pytest.raises(BatchInputError, match="not valid UTF-8"):
        run_batch(config, command_argv=[])


@pytest.mark.integration
def test_run_batch_line_numbers_ignore_unicode_breaks(tmp_path: Path) -> None:
    """Test outcome line numbers follow LF/CRLF/CR line ends only."""
    input_path = tmp_path / "ids.txt"
    input_path.write_bytes("K123456(8)\x0cjunk\r\nM000000(0)\nW123456(A)\u2028\n".encode())
    config = BatchConfig(input_path=input_path, output_path=tmp_path / "outcomes.jsonl")

    result = run_batch(config, command_argv=[])

    assert result.total_checked == 3
    records = _read_jsonl(config.output_path)
    assert [(r["line"], r["valid"]) for r in records] == [(1, False), (2, True), (3, True)]
    assert records[0]["error"] == "malformed_input"


@pytest.mark.integration
def test_run_batch_digests_differ_between_runs(fixtures_dir: Path, tmp_path: Path) -> None:
    """Test the same input gives unrelated value digests in separate runs."""

    def value_digests(name: str) -> list[str]:
        config = BatchConfig(
            input_path=fixtures_dir / "sample_ids.txt",
            output_path=tmp_path / f"{name}.jsonl",
        )
        run_batch(config, command_argv=[])
        events = _read_jsonl(config.audit_log_path)
        return [e["data"]["value_digest"] for e in events if e["event"] == "value_checked"]

    first, second = value_digests("first"), value_digests("second")

    assert len(first) == len(second) == 8
    assert not set(first) & set(second)
