"""Keypoint-geometry measurement calculators.

Each calculator takes the pose and the image calibration and returns a raw
centimeter value, or None when a required landmark was not detected.
Normalized distances are converted with

    distance * reference_dimension * cm_per_pixel

where the reference dimension is the image width for horizontal measures,
the image height for vertical ones, and the larger of the two for paths
that run through several joints.
"""

from typing import Callable, Dict, Optional

from bodyscan.core import Landmark, Side, ARM_CHAINS, LEG_CHAINS
from bodyscan.pose.keypoints import KeypointSet, distance
from bodyscan.measure.calibration import Calibration
from bodyscan.measure.results import MeasurementIndex


Calculator = Callable[[KeypointSet, Calibration], Optional[float]]


def _horizontal(normalized: float, calib: Calibration) -> float:
    return normalized * calib.image_width * calib.cm_per_pixel


def _vertical(normalized: float, calib: Calibration) -> float:
    return normalized * calib.image_height * calib.cm_per_pixel


def _path(normalized: float, calib: Calibration) -> float:
    return normalized * max(calib.image_width, calib.image_height) * calib.cm_per_pixel


def _pair_distance(keypoints: KeypointSet, a: Landmark, b: Landmark) -> Optional[float]:
    pa, pb = keypoints.get(a), keypoints.get(b)
    if pa is None or pb is None:
        return None
    return distance(pa, pb)


def _chain_length(keypoints: KeypointSet, chain) -> Optional[float]:
    """Sum of segment lengths along a joint chain, None if any joint is missing."""
    points = [keypoints.get(lm) for lm in chain]
    if any(p is None for p in points):
        return None
    return sum(distance(a, b) for a, b in zip(points, points[1:]))


def _bilateral_mean(keypoints: KeypointSet, chains: Dict[Side, tuple]) -> Optional[float]:
    lengths = [_chain_length(keypoints, chains[side]) for side in Side]
    if any(length is None for length in lengths):
        return None
    return sum(lengths) / len(lengths)


def shoulder_width(keypoints: KeypointSet, calib: Calibration) -> Optional[float]:
    d = _pair_distance(keypoints, Landmark.LEFT_SHOULDER, Landmark.RIGHT_SHOULDER)
    return None if d is None else _horizontal(d, calib)


def arm_length(keypoints: KeypointSet, calib: Calibration) -> Optional[float]:
    """Mean shoulder-elbow-wrist path of both arms."""
    d = _bilateral_mean(keypoints, ARM_CHAINS)
    return None if d is None else _path(d, calib)


def leg_length(keypoints: KeypointSet, calib: Calibration) -> Optional[float]:
    """Mean hip-knee-ankle path of both legs."""
    d = _bilateral_mean(keypoints, LEG_CHAINS)
    return None if d is None else _path(d, calib)


def hip_width(keypoints: KeypointSet, calib: Calibration) -> Optional[float]:
    d = _pair_distance(keypoints, Landmark.LEFT_HIP, Landmark.RIGHT_HIP)
    return None if d is None else _horizontal(d, calib)


def upper_body_length(keypoints: KeypointSet, calib: Calibration) -> Optional[float]:
    """Vertical drop from the highest detected landmark to the hip midpoint."""
    hip_center = keypoints.hip_center
    if hip_center is None:
        return None
    # Image y grows downward, so the highest point has the smallest y
    highest_y = min(p.y for p in keypoints.valid_points().values())
    return _vertical(hip_center.y - highest_y, calib)


def lower_body_length(keypoints: KeypointSet, calib: Calibration) -> Optional[float]:
    hip_center = keypoints.hip_center
    ankle_center = keypoints.ankle_center
    if hip_center is None or ankle_center is None:
        return None
    return _vertical(distance(hip_center, ankle_center), calib)


def neck_width(keypoints: KeypointSet, calib: Calibration) -> Optional[float]:
    """Eye-to-eye distance as a neck width proxy."""
    d = _pair_distance(keypoints, Landmark.LEFT_EYE, Landmark.RIGHT_EYE)
    return None if d is None else _horizontal(d, calib)


CALCULATORS: Dict[MeasurementIndex, Calculator] = {
    MeasurementIndex.SHOULDER_WIDTH: shoulder_width,
    MeasurementIndex.ARM_LENGTH: arm_length,
    MeasurementIndex.LEG_LENGTH: leg_length,
    MeasurementIndex.HIP_WIDTH: hip_width,
    MeasurementIndex.UPPER_BODY_LENGTH: upper_body_length,
    MeasurementIndex.LOWER_BODY_LENGTH: lower_body_length,
    MeasurementIndex.NECK_WIDTH: neck_width,
}
