"""Core systems - config, logging, landmarks"""

from .config import Config
from .logging import setup_logging, get_logger
from .landmarks import (
    # Constants
    DETECTOR_KEYPOINT_COUNT,
    LANDMARK_COUNT,
    # Enums
    Landmark,
    Side,
    # Name mappings
    LANDMARK_NAMES,
    LANDMARK_BY_NAME,
    # Landmark groups
    FOOT_LANDMARKS,
    ARM_CHAINS,
    LEG_CHAINS,
    HAND_LANDMARKS,
    FOOT_TIP_LANDMARKS,
    EYE_LANDMARKS,
    # Utility functions
    get_landmark,
)

__all__ = [
    "Config", "setup_logging", "get_logger",
    "DETECTOR_KEYPOINT_COUNT", "LANDMARK_COUNT",
    "Landmark", "Side",
    "LANDMARK_NAMES", "LANDMARK_BY_NAME",
    "FOOT_LANDMARKS", "ARM_CHAINS", "LEG_CHAINS",
    "HAND_LANDMARKS", "FOOT_TIP_LANDMARKS", "EYE_LANDMARKS",
    "get_landmark",
]
