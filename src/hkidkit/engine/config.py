"""Engine and batch configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from hkidkit.checksum import ChecksumScheme


def _coerce_scheme(value: ChecksumScheme | str) -> ChecksumScheme:
    if isinstance(value, ChecksumScheme):
        return value
    try:
        return ChecksumScheme(value)
    except ValueError:
        choices = ", ".join(s.value for s in ChecksumScheme)
        raise ValueError(f"scheme must be one of {choices}, got {value!r}") from None


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for an IdentifierEngine.

    Attributes
    ----------
    scheme : ChecksumScheme
        Checksum weight alignment for single-letter bodies
        (default: POSITIONAL). Accepts the enum or its string value.
    """

    scheme: ChecksumScheme = ChecksumScheme.POSITIONAL

    def __post_init__(self) -> None:
        """Validate and coerce fields."""
        object.__setattr__(self, "scheme", _coerce_scheme(self.scheme))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"scheme": self.scheme.value}


@dataclass
class BatchConfig:
    """Configuration for validating a file of identifiers.

    Attributes
    ----------
    input_path : Path
        Text file with one identifier per line.
    output_path : Path
        JSONL file receiving one outcome per checked line.
    audit_log_path : Path | None
        JSONL event log. If None, written next to output_path as
        '<output stem>.events.jsonl'.
    scheme : ChecksumScheme
        Checksum weight alignment (default: POSITIONAL).
    skip_blank_lines : bool
        Skip lines that are empty after stripping (default: True). When
        False, blank lines are reported as EMPTY outcomes.
    """

    input_path: Path
    output_path: Path
    audit_log_path: Path | None = None
    scheme: ChecksumScheme = ChecksumScheme.POSITIONAL
    skip_blank_lines: bool = True

    def __post_init__(self) -> None:
        """Set defaults and validate."""
        self.input_path = Path(self.input_path)
        self.output_path = Path(self.output_path)
        self.scheme = _coerce_scheme(self.scheme)

        if self.audit_log_path is None:
            self.audit_log_path = self.output_path.with_name(
                f"{self.output_path.stem}.events.jsonl"
            )
        else:
            self.audit_log_path = Path(self.audit_log_path)

        if self.audit_log_path == self.output_path:
            raise ValueError("audit_log_path must differ from output_path")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "input_path": str(self.input_path),
            "output_path": str(self.output_path),
            "audit_log_path": str(self.audit_log_path),
            "scheme": self.scheme.value,
            "skip_blank_lines": self.skip_blank_lines,
        }


@dataclass
class BatchResult:
    """Results from a batch validation run.

    Attributes
    ----------
    run_id : str
        Run identifier recorded in the audit log.
    total_checked : int
        Lines validated.
    total_valid : int
        Lines that produced a Valid outcome.
    error_counts : dict[str, int]
        Invalid outcomes per error kind value.
    output_files : dict[str, str]
        Map of artifact type to file path.
    """

    run_id: str
    total_checked: int
    total_valid: int
    error_counts: dict[str, int] = field(default_factory=dict)
    output_files: dict[str, str] = field(default_factory=dict)

    @property
    def total_invalid(self) -> int:
        """Lines that produced an Invalid outcome."""
        return self.total_checked - self.total_valid

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["total_invalid"] = self.total_invalid
        return data
