"""2D keypoint model and validity predicate"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple
import numpy as np

from bodyscan.core import Landmark, LANDMARK_COUNT, LANDMARK_NAMES, get_landmark


# Coordinate used for slots the detector did not fill
INVALID_COORD = -1.0


@dataclass(frozen=True)
class Keypoint:
    """Single 2D keypoint in image-normalized coordinates."""
    x: float  # Normalized 0-1
    y: float  # Normalized 0-1

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def is_valid(self) -> bool:
        return is_valid(self)

    def pixel_coords(self, width: int, height: int) -> Tuple[int, int]:
        """Convert normalized coords to pixel coordinates."""
        return (int(self.x * width), int(self.y * height))


MISSING = Keypoint(INVALID_COORD, INVALID_COORD)


def is_valid(point: Optional[Keypoint]) -> bool:
    """True iff both coordinates lie in [0, 1]; NaN is never valid."""
    if point is None:
        return False
    return 0.0 <= point.x <= 1.0 and 0.0 <= point.y <= 1.0


def distance(a: Keypoint, b: Keypoint) -> float:
    """Euclidean distance in normalized units."""
    return math.hypot(a.x - b.x, a.y - b.y)


def midpoint(a: Keypoint, b: Keypoint) -> Keypoint:
    """Arithmetic mean of two keypoints."""
    return Keypoint((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


@dataclass(frozen=True)
class KeypointSet:
    """
    The 33 anatomical landmarks of one detected pose.

    Every slot is present; undetected landmarks hold an invalid keypoint.
    """
    points: Dict[Landmark, Keypoint] = field(default_factory=dict)

    def __post_init__(self):
        filled = {lm: self.points.get(lm, MISSING) for lm in Landmark}
        object.__setattr__(self, "points", filled)

    def __getitem__(self, landmark: Landmark) -> Keypoint:
        return self.points[Landmark(landmark)]

    def __iter__(self) -> Iterator[Landmark]:
        return iter(Landmark)

    def __len__(self) -> int:
        return LANDMARK_COUNT

    def get(self, landmark: Landmark) -> Optional[Keypoint]:
        """Return the keypoint if it is valid, else None."""
        point = self.points[Landmark(landmark)]
        return point if is_valid(point) else None

    def all_valid(self, *landmarks: Landmark) -> bool:
        return all(is_valid(self.points[Landmark(lm)]) for lm in landmarks)

    def valid_points(self) -> Dict[Landmark, Keypoint]:
        return {lm: p for lm, p in self.points.items() if is_valid(p)}

    @property
    def num_valid(self) -> int:
        return sum(1 for p in self.points.values() if is_valid(p))

    def midpoint_of(self, a: Landmark, b: Landmark) -> Optional[Keypoint]:
        """Midpoint of two landmarks, or None unless both are valid."""
        pa, pb = self.get(a), self.get(b)
        if pa is None or pb is None:
            return None
        return midpoint(pa, pb)

    @property
    def hip_center(self) -> Optional[Keypoint]:
        return self.midpoint_of(Landmark.LEFT_HIP, Landmark.RIGHT_HIP)

    @property
    def ankle_center(self) -> Optional[Keypoint]:
        return self.midpoint_of(Landmark.LEFT_ANKLE, Landmark.RIGHT_ANKLE)

    def replace(self, **named: Tuple[float, float]) -> "KeypointSet":
        """
        Return a copy with some landmarks moved.

        Example:
            pose.replace(nose=(0.5, 0.08), left_eye=(-1, -1))
        """
        points = dict(self.points)
        for name, (x, y) in named.items():
            points[get_landmark(name)] = Keypoint(float(x), float(y))
        return KeypointSet(points)

    def invalidate(self, *landmarks: Landmark) -> "KeypointSet":
        """Return a copy with the given landmarks marked undetected."""
        points = dict(self.points)
        for lm in landmarks:
            points[Landmark(lm)] = MISSING
        return KeypointSet(points)

    @classmethod
    def from_array(cls, array) -> "KeypointSet":
        """
        Build from a detector output array.

        Args:
            array: (N, 2) or (N, 3) array-like with N >= 33; the 135-slot
                detector layout is accepted and slots past 33 are ignored.
                A third column (visibility) is ignored.

        Raises:
            ValueError: if the array has the wrong shape
        """
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim == 1 and arr.size % 2 == 0:
            arr = arr.reshape(-1, 2)
        if arr.ndim != 2 or arr.shape[1] not in (2, 3):
            raise ValueError(f"Expected an (N, 2) or (N, 3) keypoint array, got shape {arr.shape}")
        if arr.shape[0] < LANDMARK_COUNT:
            raise ValueError(
                f"Expected at least {LANDMARK_COUNT} keypoints, got {arr.shape[0]}"
            )

        points = {
            lm: Keypoint(float(arr[lm, 0]), float(arr[lm, 1]))
            for lm in Landmark
        }
        return cls(points)

    @classmethod
    def from_dict(cls, named: Mapping[str, Sequence[float]]) -> "KeypointSet":
        """
        Build from {"left_shoulder": (x, y), ...}; missing names are undetected.

        Raises:
            ValueError: on an unknown landmark name or an entry that is not
                an (x, y) pair
        """
        points = {}
        for name, coords in named.items():
            try:
                lm = get_landmark(name)
            except KeyError:
                raise ValueError(f"Unknown landmark: {name!r}") from None
            try:
                x, y = coords[0], coords[1]
                points[lm] = Keypoint(float(x), float(y))
            except (TypeError, IndexError, ValueError):
                raise ValueError(f"{name}: expected an (x, y) pair, got {coords!r}") from None
        return cls(points)

    def to_array(self) -> np.ndarray:
        """Convert to numpy array (33, 2) - x, y."""
        arr = np.full((LANDMARK_COUNT, 2), INVALID_COORD, dtype=np.float32)
        for lm, point in self.points.items():
            arr[lm] = [point.x, point.y]
        return arr

    def to_dict(self) -> Dict[str, Tuple[float, float]]:
        return {LANDMARK_NAMES[lm]: p.position for lm, p in self.points.items()}
