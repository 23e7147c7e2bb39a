"""Input normalization for HKID values.

Turns arbitrary user text into a structured body plus optional check
character. Pure and deterministic; malformed input is reported in the
result rather than raised.
"""

from ._helpers import clean_check_field, clean_input, keep_alphanumeric, strip_ignorable
from ._result_types import NormalizeResult
from .normalizer import normalize

__all__ = [
    "NormalizeResult",
    "clean_check_field",
    "clean_input",
    "keep_alphanumeric",
    "normalize",
    "strip_ignorable",
]
