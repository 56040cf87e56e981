import logging

import numpy as np
import pytest

from bodyscan.core import Config, Landmark
from bodyscan.pose import Keypoint, KeypointSet


IMAGE_WIDTH = 1080
IMAGE_HEIGHT = 1920
HEIGHT_CM = 175.0

# Front-facing standing pose; the subject's left side is on the image right.
CANONICAL_POSE = {
    Landmark.NOSE: (0.50, 0.10),
    Landmark.LEFT_EYE_INNER: (0.525, 0.09),
    Landmark.LEFT_EYE: (0.545, 0.09),
    Landmark.LEFT_EYE_OUTER: (0.565, 0.09),
    Landmark.RIGHT_EYE_INNER: (0.475, 0.09),
    Landmark.RIGHT_EYE: (0.455, 0.09),
    Landmark.RIGHT_EYE_OUTER: (0.435, 0.09),
    Landmark.LEFT_EAR: (0.57, 0.095),
    Landmark.RIGHT_EAR: (0.43, 0.095),
    Landmark.MOUTH_LEFT: (0.52, 0.115),
    Landmark.MOUTH_RIGHT: (0.48, 0.115),
    Landmark.LEFT_SHOULDER: (0.66, 0.25),
    Landmark.RIGHT_SHOULDER: (0.34, 0.25),
    Landmark.LEFT_ELBOW: (0.70, 0.38),
    Landmark.RIGHT_ELBOW: (0.30, 0.38),
    Landmark.LEFT_WRIST: (0.73, 0.51),
    Landmark.RIGHT_WRIST: (0.27, 0.51),
    Landmark.LEFT_PINKY: (0.74, 0.54),
    Landmark.RIGHT_PINKY: (0.26, 0.54),
    Landmark.LEFT_INDEX: (0.735, 0.55),
    Landmark.RIGHT_INDEX: (0.265, 0.55),
    Landmark.LEFT_THUMB: (0.72, 0.54),
    Landmark.RIGHT_THUMB: (0.28, 0.54),
    Landmark.LEFT_HIP: (0.61, 0.44),
    Landmark.RIGHT_HIP: (0.39, 0.44),
    Landmark.LEFT_KNEE: (0.60, 0.65),
    Landmark.RIGHT_KNEE: (0.40, 0.65),
    Landmark.LEFT_ANKLE: (0.58, 0.86),
    Landmark.RIGHT_ANKLE: (0.42, 0.86),
    Landmark.LEFT_HEEL: (0.57, 0.88),
    Landmark.RIGHT_HEEL: (0.43, 0.88),
    Landmark.LEFT_FOOT_INDEX: (0.60, 0.90),
    Landmark.RIGHT_FOOT_INDEX: (0.40, 0.90),
}

# Columns of the rectangular person region in person_mask (inclusive)
MASK_LEFT_COL = 400
MASK_RIGHT_COL = 680


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the packaged config.yaml."""
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def quiet_logging():
    """Drop handlers installed by setup_logging() during a test."""
    yield
    logger = logging.getLogger("bodyscan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def pose() -> KeypointSet:
    return KeypointSet({lm: Keypoint(x, y) for lm, (x, y) in CANONICAL_POSE.items()})


@pytest.fixture
def detector_array(pose) -> np.ndarray:
    """The canonical pose in the 135-slot detector layout."""
    arr = np.zeros((135, 2), dtype=np.float32)
    arr[:33] = pose.to_array()
    arr[33:] = 0.5
    return arr


@pytest.fixture
def person_mask() -> np.ndarray:
    mask = np.zeros((IMAGE_HEIGHT, IMAGE_WIDTH), dtype=np.float32)
    mask[150:1801, MASK_LEFT_COL:MASK_RIGHT_COL + 1] = 1.0
    return mask


@pytest.fixture
def scale() -> float:
    """Expected cm per pixel for the canonical pose at HEIGHT_CM."""
    return HEIGHT_CM / ((0.90 - 0.10) * IMAGE_HEIGHT)
