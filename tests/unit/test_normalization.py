"""Tests for input normalization.

Tests focus on the grammar and the tolerated formatting, not on how the
cleaning is implemented.
"""

import pytest

from hkidkit.models import ErrorKind
from hkidkit.normalize import (
    clean_check_field,
    clean_input,
    keep_alphanumeric,
    normalize,
    strip_ignorable,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "letters", "digits", "check"),
    [
        ("K123456(8)", "K", "123456", "8"),
        ("K1234568", "K", "123456", "8"),
        (" K123456 8 ", "K", "123456", "8"),
        ("k123456(8)", "K", "123456", "8"),
        ("ka123456(4)", "KA", "123456", "4"),
        ("W 123 456 (a)", "W", "123456", "A"),
        ("K123456\t(8)\n", "K", "123456", "8"),
    ],
)
def test_normalize_complete_candidates(raw: str, letters: str, digits: str, check: str) -> None:
    """Test tolerated formatting yields body plus check candidate."""
    result = normalize(raw)

    assert result.ok
    assert result.error is None
    assert result.body is not None
    assert result.body.letters == letters
    assert result.body.digits == digits
    assert result.check == check
    assert result.identifier is not None
    assert result.raw == raw


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["K123456", "ka123456", " AB 000000 "])
def test_normalize_body_only(raw: str) -> None:
    """Test input without trailing character yields body with no check."""
    result = normalize(raw)

    assert result.ok
    assert result.body is not None
    assert result.check is None
    assert result.identifier is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        "",
        "K12345(8)",
        "1234567",
        "ABC1234567",
        "K123456(B)",
        "K123456(88)",
        "K-123456(8)",
        "Ｋ123456(8)",
        "K１２３４５６(8)",
        "K123456[8]",
        "(K123456)8",
        "K(123456)8",
        "K123456()",
        "K123456(8",
    ],
)
def test_normalize_malformed(raw: str) -> None:
    """Test input outside the grammar fails with MALFORMED_INPUT."""
    result = normalize(raw)

    assert not result.ok
    assert result.error is ErrorKind.MALFORMED_INPUT
    assert result.body is None
    assert result.check is None
    assert result.raw == raw


@pytest.mark.unit
def test_normalize_non_string_does_not_raise() -> None:
    """Test non-string input is reported, never raised."""
    result = normalize(None)  # type: ignore[arg-type]

    assert result.error is ErrorKind.MALFORMED_INPUT


@pytest.mark.unit
def test_normalize_deterministic() -> None:
    """Test same input gives equal results."""
    assert normalize(" k123456 (8) ") == normalize(" k123456 (8) ")


@pytest.mark.unit
def test_cleaning_helpers() -> None:
    """Test helper behavior on mixed input."""
    assert strip_ignorable(" k1 (2) ") == "k12"
    assert clean_input(" k1 (2) ") == "K1(2)"
    assert clean_check_field(" (a) ") == "A"
    assert clean_input("ı1") == "ı1"
    assert keep_alphanumeric("k-1/2.(a)é") == "K12A"


@pytest.mark.unit
def test_normalize_parenthesised_digit_stays_in_place() -> None:
    """Test a parenthesised character is never pulled into a short body."""
    result = normalize("K12345(8)")

    assert not result.ok
    assert result.cleaned == "K12345(8)"
    assert result.body is None


@pytest.mark.unit
def test_normalize_parenthesised_and_bare_check_agree() -> None:
    """Test '(8)' and '8' in the check position parse to the same candidate."""
    assert normalize("K123456(8)").identifier == normalize("K1234568").identifier
