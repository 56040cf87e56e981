import pytest

from bodyscan.core import Config
from bodyscan.measure import (
    DEFAULT_RANGES, MeasurementIndex, MeasurementRange, MeasurementValidator, validate,
)


@pytest.mark.parametrize("value, expected", [
    (45.0, 45.0),
    (30.0, 30.0),
    (60.0, 60.0),
    (29.99, 0.0),
    (90.0, 0.0),
    (-5.0, 0.0),
    (float("nan"), 0.0),
    (float("inf"), 0.0),
    (float("-inf"), 0.0),
    (None, 0.0),
])
def test_validate(value, expected):
    assert validate(value, 30.0, 60.0) == expected


def test_default_ranges_match_config():
    validator = MeasurementValidator(Config())
    assert validator.ranges == DEFAULT_RANGES
    assert validator.range_for(MeasurementIndex.SHOULDER_WIDTH) == MeasurementRange(30.0, 60.0)
    assert validator.range_for(MeasurementIndex.NECK_WIDTH) == MeasurementRange(8.0, 15.0)


def test_validator_screens_per_measurement():
    validator = MeasurementValidator(Config())
    assert validator.validate(MeasurementIndex.NECK_WIDTH, 12.0) == 12.0
    assert validator.validate(MeasurementIndex.NECK_WIDTH, 40.0) == 0.0
    assert validator.validate(MeasurementIndex.LEG_LENGTH, 40.0) == 0.0
    assert validator.validate(MeasurementIndex.LEG_LENGTH, None) == 0.0


def test_rejection_is_logged(caplog):
    validator = MeasurementValidator(Config())
    with caplog.at_level("DEBUG", logger="bodyscan"):
        validator.validate(MeasurementIndex.SHOULDER_WIDTH, 90.0)
    assert "shoulder_width" in caplog.text


def test_ranges_can_be_overridden(tmp_path):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text("measurement:\n  ranges:\n    neck_width: [5, 20]\n")
    validator = MeasurementValidator(Config(str(cfg_file)))

    assert validator.validate(MeasurementIndex.NECK_WIDTH, 18.0) == 18.0
    # Unlisted measurements keep their defaults
    assert validator.range_for(MeasurementIndex.HIP_WIDTH) == DEFAULT_RANGES[MeasurementIndex.HIP_WIDTH]


@pytest.mark.parametrize("bounds", ["[20, 10]", "[1]", "oops"])
def test_bad_range_config_is_an_error(tmp_path, bounds):
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(f"measurement:\n  ranges:\n    neck_width: {bounds}\n")
    with pytest.raises(ValueError):
        MeasurementValidator(Config(str(cfg_file)))
