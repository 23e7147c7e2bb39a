"""Tests for widget value shape conversions."""

import pytest

from hkidkit.models import Identifier, NormalizedIdentifier
from hkidkit.shapes import ValueShape, detect_shape, split_value, to_shape
from hkidkit.validator import validate


@pytest.fixture
def identifier() -> Identifier:
    """Provide KA123456(4)."""
    return Identifier(body=NormalizedIdentifier(letters="KA", digits="123456"), check="4")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "shape"),
    [
        ("K123456(8)", ValueShape.COMBINED),
        (None, ValueShape.COMBINED),
        ({"hkidPrefix": "K123456", "checkDigit": "8"}, ValueShape.PREFIX_CHECK),
        ({"hkid_main": "K123456"}, ValueShape.MAIN_CHECKDIGIT),
        ({"other": 1}, None),
        (42, None),
    ],
)
def test_detect_shape(value: object, shape: ValueShape | None) -> None:
    """Test shape detection for each supported representation."""
    assert detect_shape(value) is shape


@pytest.mark.unit
def test_split_value() -> None:
    """Test splitting into (body, check) pairs."""
    assert split_value("K123456(8)") == ("K123456(8)", None)
    assert split_value({"hkidPrefix": "K123456", "checkDigit": "8"}) == ("K123456", "8")
    assert split_value({"hkid_main": "K123456", "hkid_checkdigit": "8"}) == ("K123456", "8")
    assert split_value({"hkid_main": "K123456"}) == ("K123456", None)


@pytest.mark.unit
def test_split_value_unsupported() -> None:
    """Test unsupported values raise TypeError."""
    with pytest.raises(TypeError):
        split_value(42)


@pytest.mark.unit
def test_to_shape(identifier: Identifier) -> None:
    """Test rendering into each shape."""
    assert to_shape(identifier) == "KA123456(4)"
    assert to_shape(identifier, ValueShape.PREFIX_CHECK) == {
        "hkidPrefix": "KA123456",
        "checkDigit": "4",
    }
    assert to_shape(identifier, ValueShape.MAIN_CHECKDIGIT) == {
        "hkid_main": "KA123456",
        "hkid_checkdigit": "4",
    }


@pytest.mark.unit
@pytest.mark.parametrize("shape", list(ValueShape))
def test_shapes_validate_back_to_same_identifier(identifier: Identifier, shape: ValueShape) -> None:
    """Test every rendered shape validates to the original identifier."""
    outcome = validate(to_shape(identifier, shape))

    assert outcome.is_valid
    assert outcome.identifier == identifier


@pytest.mark.unit
def test_value_shape_names() -> None:
    """Test shapes compare equal to their string names."""
    assert ValueShape.PREFIX_CHECK == "prefix_check"
    assert ValueShape("main_checkdigit") is ValueShape.MAIN_CHECKDIGIT
