"""Measurement vector and named measurement types"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterator, List, Sequence
import numpy as np


class MeasurementIndex(IntEnum):
    """Slot order of the measurement vector."""
    SHOULDER_WIDTH = 0
    ARM_LENGTH = 1
    LEG_LENGTH = 2
    HIP_WIDTH = 3
    UPPER_BODY_LENGTH = 4
    LOWER_BODY_LENGTH = 5
    NECK_WIDTH = 6
    THIGH_WIDTH = 7


MEASUREMENT_COUNT = len(MeasurementIndex)

MEASUREMENT_KEYS: Dict[MeasurementIndex, str] = {
    idx: idx.name.lower() for idx in MeasurementIndex
}

MEASUREMENT_LABELS: Dict[MeasurementIndex, str] = {
    MeasurementIndex.SHOULDER_WIDTH: "Shoulder Width",
    MeasurementIndex.ARM_LENGTH: "Arm Length",
    MeasurementIndex.LEG_LENGTH: "Leg Length",
    MeasurementIndex.HIP_WIDTH: "Hip Width",
    MeasurementIndex.UPPER_BODY_LENGTH: "Upper Body Length",
    MeasurementIndex.LOWER_BODY_LENGTH: "Lower Body Length",
    MeasurementIndex.NECK_WIDTH: "Neck Width",
    MeasurementIndex.THIGH_WIDTH: "Thigh Width",
}


@dataclass
class BodyMeasurement:
    """A single named measurement."""
    name: str
    value: float
    unit: str = "cm"

    @property
    def is_computed(self) -> bool:
        return self.value > 0.0

    def display(self) -> str:
        """Example: "Shoulder Width: 45.2 cm"."""
        return f"{self.name}: {self.value:.1f} {self.unit}"


@dataclass
class MeasurementVector:
    """
    Fixed-order vector of 8 measurements in centimeters.

    A slot holds 0.0 when the measurement was not computed or was rejected.
    """
    values: List[float] = field(default_factory=lambda: [0.0] * MEASUREMENT_COUNT)

    def __post_init__(self):
        if len(self.values) != MEASUREMENT_COUNT:
            raise ValueError(
                f"Measurement vector needs {MEASUREMENT_COUNT} values, got {len(self.values)}"
            )
        self.values = [float(v) for v in self.values]

    @classmethod
    def zeros(cls) -> "MeasurementVector":
        return cls()

    @classmethod
    def from_dict(cls, named: Dict[str, float]) -> "MeasurementVector":
        return cls([float(named.get(MEASUREMENT_KEYS[idx], 0.0)) for idx in MeasurementIndex])

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __len__(self) -> int:
        return MEASUREMENT_COUNT

    def __getattr__(self, name: str) -> float:
        # shoulder_width, arm_length, ... resolve to their slot
        try:
            idx = MeasurementIndex[name.upper()]
        except KeyError:
            raise AttributeError(name) from None
        return self.values[idx]

    @property
    def computed_count(self) -> int:
        return sum(1 for v in self.values if v > 0.0)

    @property
    def is_empty(self) -> bool:
        return self.computed_count == 0

    def to_list(self) -> List[float]:
        return list(self.values)

    def to_array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=np.float32)

    def to_dict(self) -> Dict[str, float]:
        return {MEASUREMENT_KEYS[idx]: self.values[idx] for idx in MeasurementIndex}

    def as_measurements(self) -> List[BodyMeasurement]:
        return [
            BodyMeasurement(MEASUREMENT_LABELS[idx], self.values[idx])
            for idx in MeasurementIndex
        ]


def format_measurements(measurements: Sequence[BodyMeasurement], skip_missing: bool = False) -> str:
    """One display line per measurement."""
    lines = []
    for m in measurements:
        if skip_missing and not m.is_computed:
            continue
        lines.append(m.display() if m.is_computed else f"{m.name}: n/a")
    return "\n".join(lines)
