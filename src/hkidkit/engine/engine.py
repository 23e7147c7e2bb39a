"""IdentifierEngine: the four identifier operations behind one object.

Hosts build an engine from an explicit EngineConfig and hand it to the
rendering layer; nothing is registered globally at import time.
"""

from typing import Any

from hkidkit.checksum import compute_check_digit
from hkidkit.engine.config import EngineConfig
from hkidkit.formatter import format_identifier
from hkidkit.models import NormalizedIdentifier, ValidationOutcome
from hkidkit.normalize import NormalizeResult, normalize
from hkidkit.validator import validate

__all__ = ["IdentifierEngine"]


class IdentifierEngine:
    """Stateless facade over normalize, checksum, validate and format.

    Attributes
    ----------
    config : EngineConfig
        Engine configuration (immutable).

    Examples
    --------
        >>> engine = IdentifierEngine()
        >>> engine.validate("K123456(8)").is_valid
        True
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        """Initialize engine.

        Parameters
        ----------
        config : EngineConfig | None, optional
            Engine configuration, defaults to EngineConfig().
        """
        self.config = config or EngineConfig()

    def normalize(self, raw: str) -> NormalizeResult:
        """Normalize raw input (see hkidkit.normalize.normalize)."""
        return normalize(raw)

    def compute_check_digit(self, body: NormalizedIdentifier | str) -> str:
        """Compute the check character using the configured scheme."""
        return compute_check_digit(body, self.config.scheme)

    def validate(self, value: Any, check: Any = None) -> ValidationOutcome:
        """Validate any supported input form using the configured scheme."""
        return validate(value, check, scheme=self.config.scheme)

    def format(self, raw: str | None) -> str:
        """Render input in canonical display form."""
        return format_identifier(raw)

    def __repr__(self) -> str:
        return f"IdentifierEngine(scheme={self.config.scheme.value!r})"
