"""Compiled patterns and cleaning helpers for identifier input.

This module provides the grammar shared by the normalizer, validator and
formatter so the three agree on what counts as an identifier.
"""

import re
import string

# Pre-compiled regex patterns
WHITESPACE_RE = re.compile(r"\s+")
IGNORABLE_RE = re.compile(r"[()\s]+")
# A parenthesised character is only accepted in the trailing check position.
IDENTIFIER_RE = re.compile(r"([A-Z]{1,2})([0-9]{6})(?:\(([0-9A])\)|([0-9A]))?")
LEADING_LETTERS_RE = re.compile(r"[A-Z]{1,2}")

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def _upper_ascii(text: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in text)


def strip_ignorable(text: str) -> str:
    """Remove parentheses and whitespace anywhere in text.

    Used to decide whether a field holds anything at all and to read a
    separate check field such as ``"(8)"``. Never used on a full identifier.

    Parameters
    ----------
    text : str
        Raw user input.

    Returns
    -------
    str
        Text without '(' ')' or whitespace, case preserved.
    """
    return IGNORABLE_RE.sub("", text)


def clean_input(text: str) -> str:
    """Strip whitespace and uppercase ASCII letters.

    Parentheses are kept so that the grammar can tell ``K123456(8)`` from
    ``K12345(8)``. Non-ASCII characters are kept as they are so that they
    fail the ASCII grammar instead of being folded into look-alike Latin
    letters.

    Parameters
    ----------
    text : str
        Raw user input.

    Returns
    -------
    str
        Cleaned text ready for grammar matching.
    """
    return _upper_ascii(WHITESPACE_RE.sub("", text))


def clean_check_field(text: str) -> str:
    """Strip parentheses/whitespace from a separate check field and uppercase it.

    Parameters
    ----------
    text : str
        Content of a check-character field, e.g. ``"(a)"``.

    Returns
    -------
    str
        Cleaned check candidate.
    """
    return _upper_ascii(strip_ignorable(text))


def keep_alphanumeric(text: str) -> str:
    """Keep only ASCII letters and digits, uppercased.

    Parameters
    ----------
    text : str
        Partial or complete user input.

    Returns
    -------
    str
        Uppercased ASCII alphanumerics in their original order.
    """
    return "".join(c for c in text if c in _ASCII_ALNUM).upper()
