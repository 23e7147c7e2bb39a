"""Canonical display formatting for partial or complete input.

Used to re-render a text field while the user types: 'k1234568' becomes
'K123456(8)', 'k12' becomes 'K12'. Cursor handling is left to the caller.
"""

from hkidkit.normalize import keep_alphanumeric
from hkidkit.normalize._helpers import LEADING_LETTERS_RE

__all__ = ["format_identifier"]

BODY_DIGITS = 6


def format_identifier(raw: str | None) -> str:
    """Render input in the canonical ``LL999999(C)`` / ``L999999(C)`` form.

    Everything except ASCII letters and digits is dropped and the rest is
    uppercased. Up to two leading letters form the prefix; the next six
    characters form the digit run; a seventh is wrapped in parentheses as
    the check character and anything after it is discarded. Text without a
    leading letter is returned cleaned but otherwise ungrouped.

    The result is idempotent (formatting it again returns it unchanged) and
    formatting a prefix of the input yields a prefix of the full rendering,
    up to the closing parenthesis.

    Parameters
    ----------
    raw : str | None
        Partial or complete user input.

    Returns
    -------
    str
        Best-effort canonical rendering; '' for empty input.

    Examples
    --------
        >>> format_identifier("k123456 8")
        'K123456(8)'
        >>> format_identifier("ka12")
        'KA12'
    """
    if not raw:
        return ""
    cleaned = keep_alphanumeric(raw)
    prefix = LEADING_LETTERS_RE.match(cleaned)
    if prefix is None:
        return cleaned

    letters = prefix.group(0)
    rest = cleaned[len(letters) :]
    if len(rest) > BODY_DIGITS:
        return f"{letters}{rest[:BODY_DIGITS]}({rest[BODY_DIGITS]})"
    return f"{letters}{rest}"
