"""Result dataclass for normalization."""

from dataclasses import dataclass

from hkidkit.models import ErrorKind, Identifier, NormalizedIdentifier


@dataclass(frozen=True)
class NormalizeResult:
    """Result of normalizing raw input.

    Attributes
    ----------
    raw : str
        Original input, kept for diagnostics.
    cleaned : str
        Input after removing whitespace and uppercasing.
    body : NormalizedIdentifier | None
        Parsed body, None if the grammar did not match.
    check : str | None
        Trailing check character candidate, if one was typed.
    error : ErrorKind | None
        MALFORMED_INPUT on failure, None on success.
    """

    raw: str
    cleaned: str
    body: NormalizedIdentifier | None
    check: str | None
    error: ErrorKind | None

    @property
    def ok(self) -> bool:
        """Whether the input matched the grammar."""
        return self.error is None

    @property
    def identifier(self) -> Identifier | None:
        """Complete candidate when both body and check character are present.

        The candidate is not checksum-verified; use validate() for that.
        """
        if self.body is None or self.check is None:
            return None
        return Identifier(body=self.body, check=self.check)
