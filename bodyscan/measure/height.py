"""User height input: units, conversion and accepted range"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from bodyscan.core import Config


CM_PER_FOOT = 30.48
CM_PER_INCH = 2.54


class HeightUnit(Enum):
    CENTIMETERS = "cm"
    METERS = "m"
    FEET_INCHES = "ft"


@dataclass(frozen=True)
class Height:
    """
    A height as entered by the user.

    For FEET_INCHES the fractional part of value is a fraction of a foot,
    so 5.5 means 5'6".
    """
    value: float
    unit: HeightUnit = HeightUnit.CENTIMETERS

    def _feet_inches(self) -> Tuple[int, int]:
        feet = int(self.value)
        inches = int(round((self.value - feet) * 12))
        if inches == 12:
            feet, inches = feet + 1, 0
        return feet, inches

    def to_centimeters(self) -> float:
        if self.unit is HeightUnit.CENTIMETERS:
            return float(self.value)
        if self.unit is HeightUnit.METERS:
            return float(self.value) * 100.0
        feet, inches = self._feet_inches()
        return feet * CM_PER_FOOT + inches * CM_PER_INCH

    def display(self) -> str:
        if self.unit is HeightUnit.CENTIMETERS:
            return f"{int(round(self.value))} cm"
        if self.unit is HeightUnit.METERS:
            return f"{self.value:.2f} m"
        feet, inches = self._feet_inches()
        return f"{feet}'{inches}\""


def validate_height(height: Height, config: Optional[Config] = None) -> Tuple[bool, Optional[str]]:
    """
    Check a height against the accepted input range.

    Returns:
        (True, None) when accepted, else (False, reason)
    """
    config = config or Config()
    min_cm = float(config.height.get("min_cm", 100.0))
    max_cm = float(config.height.get("max_cm", 250.0))

    cm = height.to_centimeters()
    if cm < min_cm:
        return False, f"Height must be at least {min_cm:.0f} cm ({_as_feet(min_cm)})"
    if cm > max_cm:
        return False, f"Height must not exceed {max_cm:.0f} cm ({_as_feet(max_cm)})"
    return True, None


def _as_feet(cm: float) -> str:
    total_inches = int(cm / CM_PER_INCH)
    return f"{total_inches // 12}'{total_inches % 12}\""


_CM_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(?:cm)?\s*$", re.IGNORECASE)
_M_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*m\s*$", re.IGNORECASE)
_FT_RE = re.compile(
    r"^\s*(\d+)\s*(?:'|ft)\s*(?:(\d+(?:\.\d+)?)\s*(?:\"|''|in)?)?\s*$", re.IGNORECASE
)


def parse_height(text: str) -> Height:
    """
    Parse "175", "175cm", "1.75m", "5'10\"" or "5ft 10in".

    Raises:
        ValueError: if the text is not a recognized height
    """
    match = _CM_RE.match(text)
    if match:
        return Height(float(match.group(1)), HeightUnit.CENTIMETERS)

    match = _M_RE.match(text)
    if match:
        return Height(float(match.group(1)), HeightUnit.METERS)

    match = _FT_RE.match(text)
    if match:
        feet = int(match.group(1))
        inches = float(match.group(2) or 0.0)
        if inches >= 12:
            raise ValueError(f"Inches must be below 12: {text!r}")
        return Height(feet + inches / 12.0, HeightUnit.FEET_INCHES)

    raise ValueError(f"Unrecognized height: {text!r}")
