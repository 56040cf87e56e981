import pytest

from bodyscan.core import Config
from bodyscan.measure import Height, HeightUnit, parse_height, validate_height


@pytest.mark.parametrize("height, cm", [
    (Height(175.0), 175.0),
    (Height(1.8, HeightUnit.METERS), 180.0),
    (Height(5.5, HeightUnit.FEET_INCHES), 5 * 30.48 + 6 * 2.54),
    (Height(6.0, HeightUnit.FEET_INCHES), 182.88),
])
def test_to_centimeters(height, cm):
    assert height.to_centimeters() == pytest.approx(cm)


@pytest.mark.parametrize("height, text", [
    (Height(175.4), "175 cm"),
    (Height(1.756, HeightUnit.METERS), "1.76 m"),
    (Height(5.5, HeightUnit.FEET_INCHES), "5'6\""),
    (Height(5 + 11.9 / 12, HeightUnit.FEET_INCHES), "6'0\""),
])
def test_display(height, text):
    assert height.display() == text


@pytest.mark.parametrize("text, cm", [
    ("175", 175.0),
    ("175cm", 175.0),
    ("175.5 CM", 175.5),
    ("1.75m", 175.0),
    ("5'10\"", 177.8),
    ("5ft 10in", 177.8),
    ("6'", 182.88),
    ("5'11.9\"", 182.88),
])
def test_parse_height(text, cm):
    assert parse_height(text).to_centimeters() == pytest.approx(cm)


@pytest.mark.parametrize("text", ["", "tall", "5'13\"", "-170"])
def test_parse_height_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_height(text)


def test_validate_height_bounds():
    config = Config()
    assert validate_height(Height(175.0), config) == (True, None)
    assert validate_height(Height(100.0), config) == (True, None)

    ok, message = validate_height(Height(90.0), config)
    assert not ok
    assert message == "Height must be at least 100 cm (3'3\")"

    ok, message = validate_height(Height(2.6, HeightUnit.METERS), config)
    assert not ok
    assert message == "Height must not exceed 250 cm (8'2\")"
