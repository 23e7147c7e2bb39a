"""Check character computation for HKID bodies.

Every character of the body is mapped to a value (digits 0-9, letters
A-Z -> 10-35, blank -> 36), multiplied by a positional weight from
9 down to 2, and summed. The check character is derived from the sum
modulo 11: remainder 0 gives '0', remainder 1 gives 'A', anything else
gives the digit 11 - remainder.

Two weight alignments are supported:

POSITIONAL (default)
    Weights 9, 8, 7, ... are applied to the body characters from the left.
    A single-letter body therefore places its letter at weight 9 and its
    digits at weights 8 to 3: K123456 -> 8, M000000 -> 0, W123456 -> A.
SPACE_PADDED
    The body is left-padded with a blank to eight characters first, so a
    single letter sits at weight 8 behind a blank (value 36) at weight 9 and
    the digits always occupy weights 7 to 2: A123456 -> 3.

Two-letter bodies produce the same result under both alignments.
"""

from enum import StrEnum

from hkidkit.exceptions import MalformedIdentifierError
from hkidkit.models import NormalizedIdentifier

__all__ = [
    "ChecksumScheme",
    "WEIGHTS",
    "BLANK_VALUE",
    "char_value",
    "checksum_total",
    "check_character_for_total",
    "compute_check_digit",
]

WEIGHTS = (9, 8, 7, 6, 5, 4, 3, 2)
BLANK_VALUE = 36
MODULUS = 11


class ChecksumScheme(StrEnum):
    """Weight alignment used for single-letter bodies."""

    POSITIONAL = "positional"
    SPACE_PADDED = "space_padded"


def char_value(char: str) -> int:
    """Map a body character to its checksum value.

    Parameters
    ----------
    char : str
        A digit, an uppercase letter A-Z, or a single blank.

    Returns
    -------
    int
        0-9 for digits, 10-35 for letters, 36 for blank.

    Raises
    ------
    MalformedIdentifierError
        If char is anything else.
    """
    if char == " ":
        return BLANK_VALUE
    if len(char) == 1 and "0" <= char <= "9":
        return ord(char) - ord("0")
    if len(char) == 1 and "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    raise MalformedIdentifierError(f"no checksum value for character {char!r}", value=char)


def _as_body(body: NormalizedIdentifier | str) -> NormalizedIdentifier:
    if isinstance(body, NormalizedIdentifier):
        return body
    return NormalizedIdentifier.parse(body)


def checksum_total(
    body: NormalizedIdentifier | str,
    scheme: ChecksumScheme = ChecksumScheme.POSITIONAL,
) -> int:
    """Compute the weighted sum over the body.

    Parameters
    ----------
    body : NormalizedIdentifier | str
        Identifier body ('K123456' or a parsed body).
    scheme : ChecksumScheme, optional
        Weight alignment, by default POSITIONAL.

    Returns
    -------
    int
        Sum of weight x value over the body positions.

    Raises
    ------
    MalformedIdentifierError
        If a body string is not 1-2 letters followed by 6 digits.
    """
    text = _as_body(body).body
    if scheme is ChecksumScheme.SPACE_PADDED:
        text = text.rjust(len(WEIGHTS), " ")
    return sum(weight * char_value(char) for weight, char in zip(WEIGHTS, text))


def check_character_for_total(total: int) -> str:
    """Derive the check character from a weighted sum.

    Parameters
    ----------
    total : int
        Weighted sum from checksum_total().

    Returns
    -------
    str
        '0' for remainder 0, 'A' for remainder 1, else str(11 - remainder).
    """
    remainder = total % MODULUS
    if remainder == 0:
        return "0"
    check_value = MODULUS - remainder
    if check_value == 10:
        return "A"
    return str(check_value)


def compute_check_digit(
    body: NormalizedIdentifier | str,
    scheme: ChecksumScheme = ChecksumScheme.POSITIONAL,
) -> str:
    """Compute the check character for an identifier body.

    Parameters
    ----------
    body : NormalizedIdentifier | str
        Identifier body ('K123456' or a parsed body). Body strings may carry
        surrounding whitespace and lowercase letters.
    scheme : ChecksumScheme, optional
        Weight alignment, by default POSITIONAL.

    Returns
    -------
    str
        One of '0'-'9' or 'A'.

    Raises
    ------
    MalformedIdentifierError
        If a body string is not 1-2 letters followed by 6 digits.

    Examples
    --------
        >>> compute_check_digit("K123456")
        '8'
        >>> compute_check_digit("KA123456")
        '4'
        >>> compute_check_digit("A123456", scheme=ChecksumScheme.SPACE_PADDED)
        '3'
    """
    return check_character_for_total(checksum_total(body, scheme))
