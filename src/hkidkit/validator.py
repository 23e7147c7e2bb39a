"""Validation of complete identifiers.

Supports single-field input ("K123456(8)") and two-field input
(body + separately typed check character). Every failure is reported as an
Invalid outcome; nothing here raises for string input.
"""

from collections.abc import Mapping
from typing import Any

from hkidkit.checksum import ChecksumScheme, compute_check_digit
from hkidkit.models import (
    ErrorKind,
    Identifier,
    Invalid,
    NormalizedIdentifier,
    Valid,
    ValidationOutcome,
    is_check_character,
)
from hkidkit.normalize import clean_check_field, normalize, strip_ignorable
from hkidkit.shapes import detect_shape, split_value

__all__ = ["validate", "validate_text", "validate_parts"]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not strip_ignorable(value)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def _compare(
    body: NormalizedIdentifier,
    claimed: str,
    scheme: ChecksumScheme,
    raw: str | None,
) -> ValidationOutcome:
    expected = compute_check_digit(body, scheme)
    if expected == claimed:
        return Valid(Identifier(body=body, check=claimed))
    return Invalid(
        ErrorKind.CHECKSUM_MISMATCH,
        f"check character for {body.body} is {expected}, got {claimed}",
        raw=raw,
        expected=expected,
        actual=claimed,
    )


def validate_text(
    raw: Any,
    scheme: ChecksumScheme = ChecksumScheme.POSITIONAL,
) -> ValidationOutcome:
    """Validate a single-field value such as 'K123456(8)'.

    Parameters
    ----------
    raw : Any
        User input; None and blank strings count as empty.
    scheme : ChecksumScheme, optional
        Checksum weight alignment, by default POSITIONAL.

    Returns
    -------
    ValidationOutcome
        Valid(identifier) or Invalid(kind, ...).
    """
    if _is_blank(raw):
        return Invalid(ErrorKind.EMPTY, "no identifier entered", raw=raw)
    if not isinstance(raw, str):
        return Invalid(
            ErrorKind.MALFORMED_INPUT,
            f"expected text, got {type(raw).__name__}",
            raw=repr(raw),
        )

    result = normalize(raw)
    if not result.ok or result.body is None:
        return Invalid(
            ErrorKind.MALFORMED_INPUT,
            "expected 1 or 2 letters, 6 digits and a check character",
            raw=raw,
        )
    if result.check is None:
        return Invalid(
            ErrorKind.MISSING_CHECK_CHARACTER,
            f"no check character after {result.body.body}",
            raw=raw,
        )
    return _compare(result.body, result.check, scheme, raw)


def validate_parts(
    body_text: Any,
    check_text: Any,
    scheme: ChecksumScheme = ChecksumScheme.POSITIONAL,
) -> ValidationOutcome:
    """Validate a two-field value: body and check character typed separately.

    Parameters
    ----------
    body_text : Any
        Body field, e.g. 'K123456'. A trailing check character is accepted
        here only when the check field is empty.
    check_text : Any
        Check field, e.g. '8' or 'a'.
    scheme : ChecksumScheme, optional
        Checksum weight alignment, by default POSITIONAL.

    Returns
    -------
    ValidationOutcome
        Valid(identifier) or Invalid(kind, ...).
    """
    body_blank = _is_blank(body_text)
    check_blank = _is_blank(check_text)

    if body_blank and check_blank:
        return Invalid(ErrorKind.EMPTY, "no identifier entered")
    if body_blank:
        return Invalid(ErrorKind.MALFORMED_INPUT, "check character given without a body")

    result = normalize(_as_text(body_text))
    if not result.ok or result.body is None:
        return Invalid(
            ErrorKind.MALFORMED_INPUT,
            "expected 1 or 2 letters followed by 6 digits",
            raw=_as_text(body_text),
        )

    if check_blank:
        if result.check is None:
            return Invalid(
                ErrorKind.MISSING_CHECK_CHARACTER,
                f"no check character for {result.body.body}",
            )
        return _compare(result.body, result.check, scheme, None)

    if result.check is not None:
        return Invalid(
            ErrorKind.MALFORMED_INPUT,
            "check character supplied in both the body and the check field",
        )

    claimed = clean_check_field(_as_text(check_text))
    if not is_check_character(claimed):
        return Invalid(
            ErrorKind.MALFORMED_INPUT,
            f"check character must be a digit or 'A', got {check_text!r}",
        )
    return _compare(result.body, claimed, scheme, None)


def validate(
    value: Any,
    check: Any = None,
    *,
    scheme: ChecksumScheme = ChecksumScheme.POSITIONAL,
) -> ValidationOutcome:
    """Validate an identifier in any supported input form.

    Parameters
    ----------
    value : Any
        A raw string ('K123456(8)'), a body string when check is given, or a
        widget mapping ({'hkidPrefix', 'checkDigit'} or
        {'hkid_main', 'hkid_checkdigit'}).
    check : Any, optional
        Separately supplied check character for the two-field form.
    scheme : ChecksumScheme, optional
        Checksum weight alignment, by default POSITIONAL.

    Returns
    -------
    ValidationOutcome
        Valid(identifier) or Invalid(kind, ...).

    Examples
    --------
        >>> validate("K123456(8)").is_valid
        True
        >>> validate("K123456", "7").kind
        <ErrorKind.CHECKSUM_MISMATCH: 'checksum_mismatch'>
    """
    if isinstance(value, Mapping):
        if detect_shape(value) is None:
            if not value:
                return Invalid(ErrorKind.EMPTY, "no identifier entered")
            return Invalid(
                ErrorKind.MALFORMED_INPUT,
                f"unrecognised identifier fields: {sorted(map(str, value))}",
            )
        body_text, check_text = split_value(value)
        return validate_parts(body_text, check_text, scheme)
    if check is not None:
        return validate_parts(value, check, scheme)
    return validate_text(value, scheme)
