"""Body landmark definitions.

This module defines the 33 anatomical landmark slots produced by the
MediaPipe-style pose detector, their names, and the landmark groups the
measurement code works with.
"""

from enum import IntEnum
from typing import Dict, Tuple


# Slot count of the raw detector output; only the first 33 are anatomical
DETECTOR_KEYPOINT_COUNT = 135
LANDMARK_COUNT = 33


class Landmark(IntEnum):
    """Pose landmark indices in detector order."""
    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32

    @property
    def label(self) -> str:
        """snake_case name, e.g. "left_shoulder"."""
        return LANDMARK_NAMES[self]


class Side(IntEnum):
    """Body side of a bilateral landmark."""
    LEFT = 0
    RIGHT = 1


LANDMARK_NAMES: Dict[Landmark, str] = {lm: lm.name.lower() for lm in Landmark}

LANDMARK_BY_NAME: Dict[str, Landmark] = {name: lm for lm, name in LANDMARK_NAMES.items()}


FOOT_LANDMARKS: Tuple[Landmark, ...] = (
    Landmark.LEFT_ANKLE, Landmark.RIGHT_ANKLE,
    Landmark.LEFT_HEEL, Landmark.RIGHT_HEEL,
    Landmark.LEFT_FOOT_INDEX, Landmark.RIGHT_FOOT_INDEX,
)


# (shoulder, elbow, wrist) per side
ARM_CHAINS: Dict[Side, Tuple[Landmark, Landmark, Landmark]] = {
    Side.LEFT: (Landmark.LEFT_SHOULDER, Landmark.LEFT_ELBOW, Landmark.LEFT_WRIST),
    Side.RIGHT: (Landmark.RIGHT_SHOULDER, Landmark.RIGHT_ELBOW, Landmark.RIGHT_WRIST),
}

# (hip, knee, ankle) per side
LEG_CHAINS: Dict[Side, Tuple[Landmark, Landmark, Landmark]] = {
    Side.LEFT: (Landmark.LEFT_HIP, Landmark.LEFT_KNEE, Landmark.LEFT_ANKLE),
    Side.RIGHT: (Landmark.RIGHT_HIP, Landmark.RIGHT_KNEE, Landmark.RIGHT_ANKLE),
}

HAND_LANDMARKS: Dict[Side, Tuple[Landmark, ...]] = {
    Side.LEFT: (Landmark.LEFT_PINKY, Landmark.LEFT_INDEX, Landmark.LEFT_THUMB),
    Side.RIGHT: (Landmark.RIGHT_PINKY, Landmark.RIGHT_INDEX, Landmark.RIGHT_THUMB),
}

FOOT_TIP_LANDMARKS: Dict[Side, Tuple[Landmark, ...]] = {
    Side.LEFT: (Landmark.LEFT_HEEL, Landmark.LEFT_FOOT_INDEX),
    Side.RIGHT: (Landmark.RIGHT_HEEL, Landmark.RIGHT_FOOT_INDEX),
}

EYE_LANDMARKS: Dict[Side, Tuple[Landmark, ...]] = {
    Side.LEFT: (Landmark.LEFT_EYE, Landmark.LEFT_EYE_INNER, Landmark.LEFT_EYE_OUTER),
    Side.RIGHT: (Landmark.RIGHT_EYE, Landmark.RIGHT_EYE_INNER, Landmark.RIGHT_EYE_OUTER),
}


def get_landmark(name: str) -> Landmark:
    """
    Look up a landmark by its snake_case name.

    Raises:
        KeyError: if the name is not one of the 33 landmarks
    """
    return LANDMARK_BY_NAME[name.lower()]
