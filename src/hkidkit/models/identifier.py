"""Canonical identifier value objects.

An HKID is modelled as a NormalizedIdentifier (the letters+digits body)
paired with a single check character. Both are immutable and validate their
own invariants on construction.
"""

import re
from dataclasses import dataclass

from hkidkit.exceptions import MalformedIdentifierError

__all__ = [
    "CHECK_CHARACTERS",
    "NormalizedIdentifier",
    "Identifier",
    "is_check_character",
]

CHECK_CHARACTERS = frozenset("0123456789A")

_LETTERS_RE = re.compile(r"[A-Z]{1,2}")
_DIGITS_RE = re.compile(r"[0-9]{6}")
_BODY_RE = re.compile(r"([A-Z]{1,2})([0-9]{6})")


def is_check_character(value: object) -> bool:
    """Return True if value is exactly one canonical check character."""
    return isinstance(value, str) and len(value) == 1 and value in CHECK_CHARACTERS


@dataclass(frozen=True)
class NormalizedIdentifier:
    """Identifier body before the check character.

    Attributes
    ----------
    letters : str
        One or two ASCII uppercase letters.
    digits : str
        Exactly six ASCII decimal digits.

    Raises
    ------
    MalformedIdentifierError
        If either component violates its character class or length.
    """

    letters: str
    digits: str

    def __post_init__(self) -> None:
        """Enforce the letters/digits invariants."""
        if not isinstance(self.letters, str) or not _LETTERS_RE.fullmatch(self.letters):
            raise MalformedIdentifierError(
                f"letters must be 1 or 2 uppercase letters A-Z, got {self.letters!r}",
                value=self.letters,
            )
        if not isinstance(self.digits, str) or not _DIGITS_RE.fullmatch(self.digits):
            raise MalformedIdentifierError(
                f"digits must be exactly 6 decimal digits, got {self.digits!r}",
                value=self.digits,
            )

    @property
    def body(self) -> str:
        """Letters followed by digits, e.g. 'K123456'."""
        return f"{self.letters}{self.digits}"

    @classmethod
    def parse(cls, text: str) -> "NormalizedIdentifier":
        """Build a body from text such as ' k123456 '.

        Only surrounding whitespace and letter case are tolerated here; use
        hkidkit.normalize for free-form user input.

        Parameters
        ----------
        text : str
            Body text.

        Returns
        -------
        NormalizedIdentifier
            Parsed body.

        Raises
        ------
        MalformedIdentifierError
            If text is not 1-2 letters followed by 6 digits.
        """
        if not isinstance(text, str):
            raise MalformedIdentifierError(f"body must be a string, got {type(text).__name__}", text)
        match = _BODY_RE.fullmatch(text.strip().upper()) if text.isascii() else None
        if match is None:
            raise MalformedIdentifierError(
                f"body must be 1-2 letters followed by 6 digits, got {text!r}",
                value=text,
            )
        return cls(letters=match.group(1), digits=match.group(2))

    def __str__(self) -> str:
        return self.body


@dataclass(frozen=True)
class Identifier:
    """Complete, checksum-verifiable identifier.

    Attributes
    ----------
    body : NormalizedIdentifier
        Letters+digits body.
    check : str
        Check character ('0'-'9' or 'A').
    """

    body: NormalizedIdentifier
    check: str

    def __post_init__(self) -> None:
        """Enforce the check character invariant."""
        if not is_check_character(self.check):
            raise MalformedIdentifierError(
                f"check character must be one of 0-9 or 'A', got {self.check!r}",
                value=self.check,
            )

    @property
    def compact(self) -> str:
        """Identifier without punctuation, e.g. 'K1234568'."""
        return f"{self.body.body}{self.check}"

    @property
    def display(self) -> str:
        """Canonical display form, e.g. 'K123456(8)'."""
        return f"{self.body.body}({self.check})"

    def __str__(self) -> str:
        return self.display
