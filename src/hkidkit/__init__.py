"""Normalization, checksum and validation of Hong Kong Identity Card numbers.

This package provides:
- Data models (hkidkit.models) — identifier and outcome value objects
- Normalization (hkidkit.normalize) — free-form input to structured body
- Checksum (hkidkit.checksum) — check character computation
- Validation (hkidkit.validator) — single- and two-field validation
- Formatting (hkidkit.formatter) — canonical display rendering
- Shapes (hkidkit.shapes) — widget value conversions
- Engine (hkidkit.engine) — configured facade and batch runs
- Audit (hkidkit.audit) — JSONL event logging
- CLI (hkidkit.cli) — command-line interface
"""

__version__ = "0.3.0"
__license__ = "MIT"

from hkidkit.checksum import ChecksumScheme, compute_check_digit
from hkidkit.engine import EngineConfig, IdentifierEngine
from hkidkit.exceptions import BatchInputError, HkidError, MalformedIdentifierError
from hkidkit.formatter import format_identifier
from hkidkit.models import (
    ErrorKind,
    Identifier,
    Invalid,
    NormalizedIdentifier,
    Valid,
    ValidationOutcome,
    is_acceptable,
)
from hkidkit.normalize import NormalizeResult, normalize
from hkidkit.validator import validate

__all__ = [
    "__version__",
    "__license__",
    # Operations
    "normalize",
    "compute_check_digit",
    "validate",
    "format_identifier",
    "is_acceptable",
    # Engine
    "IdentifierEngine",
    "EngineConfig",
    "ChecksumScheme",
    # Models
    "NormalizedIdentifier",
    "Identifier",
    "NormalizeResult",
    "ErrorKind",
    "Valid",
    "Invalid",
    "ValidationOutcome",
    # Errors
    "HkidError",
    "MalformedIdentifierError",
    "BatchInputError",
]
