"""Normalization of free-form identifier input."""

from hkidkit.models import ErrorKind, NormalizedIdentifier

from ._helpers import IDENTIFIER_RE, clean_input
from ._result_types import NormalizeResult


def normalize(raw: str) -> NormalizeResult:
    """Normalize raw user input into a body and optional check character.

    Whitespace is removed anywhere in the string and the rest is uppercased
    before matching ``[A-Z]{1,2}[0-9]{6}`` followed by an optional check
    character, bare or in parentheses. Parentheses anywhere else make the
    input malformed, so ``K12345(8)`` is never read as ``K123458``.

    Parameters
    ----------
    raw : str
        Text as typed or pasted by a user.

    Returns
    -------
    NormalizeResult
        Parsed body and check candidate, or a MALFORMED_INPUT failure.
        Never raises.

    Examples
    --------
        >>> normalize("k123456 (8)").identifier.display
        'K123456(8)'
        >>> normalize("KA123456").check is None
        True
    """
    if not isinstance(raw, str):
        return NormalizeResult(repr(raw), "", None, None, ErrorKind.MALFORMED_INPUT)

    cleaned = clean_input(raw)
    match = IDENTIFIER_RE.fullmatch(cleaned)
    if match is None:
        return NormalizeResult(raw, cleaned, None, None, ErrorKind.MALFORMED_INPUT)

    letters, digits, paren_check, bare_check = match.groups()
    check = paren_check or bare_check
    body = NormalizedIdentifier(letters=letters, digits=digits)
    return NormalizeResult(raw, cleaned, body, check, None)
