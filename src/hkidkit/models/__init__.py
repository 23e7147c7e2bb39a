"""Shared data types for hkidkit.

This package contains the immutable value objects passed between the
normalizer, checksum engine, validator and formatter.
"""

from hkidkit.models.identifier import (
    CHECK_CHARACTERS,
    Identifier,
    NormalizedIdentifier,
    is_check_character,
)
from hkidkit.models.outcome import (
    ErrorKind,
    Invalid,
    Valid,
    ValidationOutcome,
    is_acceptable,
)

__all__ = [
    # Identifier models
    "CHECK_CHARACTERS",
    "NormalizedIdentifier",
    "Identifier",
    "is_check_character",
    # Outcome models
    "ErrorKind",
    "Valid",
    "Invalid",
    "ValidationOutcome",
    "is_acceptable",
]
