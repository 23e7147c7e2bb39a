"""Validation outcome types.

A validation either yields Valid(identifier) or Invalid(kind, ...). Invalid
outcomes are ordinary values: callers turn them into user-facing (and
localized) messages from the error kind and the expected/actual fields.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from hkidkit.models.identifier import Identifier

__all__ = [
    "ErrorKind",
    "Valid",
    "Invalid",
    "ValidationOutcome",
    "is_acceptable",
]


class ErrorKind(StrEnum):
    """Reason a value failed validation."""

    EMPTY = "empty"
    MALFORMED_INPUT = "malformed_input"
    MISSING_CHECK_CHARACTER = "missing_check_character"
    CHECKSUM_MISMATCH = "checksum_mismatch"


@dataclass(frozen=True)
class Valid:
    """Successful validation.

    Attributes
    ----------
    identifier : Identifier
        Verified identifier.
    """

    identifier: Identifier

    @property
    def is_valid(self) -> bool:
        """Always True."""
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serialisable dictionary."""
        return {
            "valid": True,
            "identifier": self.identifier.display,
            "letters": self.identifier.body.letters,
            "digits": self.identifier.body.digits,
            "check": self.identifier.check,
        }


@dataclass(frozen=True)
class Invalid:
    """Failed validation.

    Attributes
    ----------
    kind : ErrorKind
        Error category.
    detail : str
        Human-readable (English) diagnostic. Not intended for end users.
    raw : str | None
        Original input, when the input was a single string.
    expected : str | None
        Computed check character (CHECKSUM_MISMATCH only).
    actual : str | None
        Claimed check character (CHECKSUM_MISMATCH only).
    """

    kind: ErrorKind
    detail: str
    raw: str | None = None
    expected: str | None = None
    actual: str | None = None

    @property
    def is_valid(self) -> bool:
        """Always False."""
        return False

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serialisable dictionary."""
        data: dict[str, Any] = {
            "valid": False,
            "error": self.kind.value,
            "detail": self.detail,
        }
        if self.expected is not None:
            data["expected"] = self.expected
        if self.actual is not None:
            data["actual"] = self.actual
        return data


ValidationOutcome = Valid | Invalid


def is_acceptable(outcome: ValidationOutcome, required: bool = False) -> bool:
    """Apply the form-level required-ness rule to an outcome.

    An empty value is acceptable for an optional field and rejected for a
    required one; every other outcome stands as is.

    Parameters
    ----------
    outcome : ValidationOutcome
        Outcome from validate().
    required : bool, optional
        Whether the field must be filled, by default False.

    Returns
    -------
    bool
        True if the form layer should accept the value.
    """
    if isinstance(outcome, Invalid) and outcome.kind is ErrorKind.EMPTY:
        return not required
    return outcome.is_valid
