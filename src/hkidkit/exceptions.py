"""Exception hierarchy for hkidkit.

Validation outcomes are plain values (see hkidkit.models.outcome); the
exceptions below are raised only when a caller hands an API seam something
it cannot work with at all.
"""

__all__ = [
    "HkidError",
    "MalformedIdentifierError",
    "BatchInputError",
]


class HkidError(Exception):
    """Base exception for all hkidkit errors."""


class MalformedIdentifierError(HkidError, ValueError):
    """Raised when an identifier body does not match the letters+digits grammar."""

    def __init__(self, message: str, value: object = None) -> None:
        """Initialize malformed identifier error.

        Parameters
        ----------
        message : str
            Error message.
        value : object, optional
            Offending value, kept for diagnostics.
        """
        super().__init__(message)
        self.value = value


class BatchInputError(HkidError):
    """Raised when a batch input file cannot be read."""

    def __init__(self, message: str, file: str | None = None) -> None:
        """Initialize batch input error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where error occurred.
        """
        super().__init__(message)
        self.file = file
