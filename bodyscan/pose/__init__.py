"""Pose keypoint model and framing check"""

from .keypoints import Keypoint, KeypointSet, MISSING, is_valid, distance, midpoint
from .framing import FramingChecker, FramingResult, assess_framing

__all__ = [
    "Keypoint", "KeypointSet", "MISSING", "is_valid", "distance", "midpoint",
    "FramingChecker", "FramingResult", "assess_framing",
]
