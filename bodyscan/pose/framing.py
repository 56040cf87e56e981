"""Person and full-body framing check from detected keypoints"""

from dataclasses import dataclass
from typing import Optional

from bodyscan.core import (
    Config, get_logger, Landmark, Side, LANDMARK_COUNT,
    ARM_CHAINS, LEG_CHAINS, HAND_LANDMARKS, FOOT_TIP_LANDMARKS, EYE_LANDMARKS,
)
from bodyscan.pose.keypoints import Keypoint, KeypointSet, is_valid


@dataclass
class FramingResult:
    """Outcome of checking whether a photo is usable for measuring."""
    has_person: bool
    is_full_body: bool
    confidence: float  # 0-1
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.has_person and self.is_full_body


def is_detected(point: Keypoint) -> bool:
    """Valid and not the detector's zero fill at the exact origin."""
    return is_valid(point) and not (point.x == 0.0 and point.y == 0.0)


class FramingChecker:
    """
    Checks that a person is present and the full body is in frame.

    Region order for the message is head, upper body, hands, lower body,
    feet; the first failing region is reported.
    """

    def __init__(self, config: Optional[Config] = None):
        self.logger = get_logger("pose.framing")
        self.config = config or Config()

        framing_config = self.config.framing

        self._min_landmarks = int(framing_config.get("min_landmarks", 10))
        self._full_body_bonus = float(framing_config.get("full_body_bonus", 0.2))

    def check(self, keypoints: KeypointSet) -> FramingResult:
        seen = {lm: is_detected(keypoints[lm]) for lm in Landmark}
        count = sum(seen.values())

        if count < self._min_landmarks:
            self.logger.debug(f"Only {count} landmarks detected")
            return FramingResult(False, False, 0.0, "No person detected")

        confidence = min(1.0, count / float(LANDMARK_COUNT))

        has_nose = seen[Landmark.NOSE]
        has_eye = {side: any(seen[lm] for lm in EYE_LANDMARKS[side]) for side in Side}
        has_ear = {Side.LEFT: seen[Landmark.LEFT_EAR], Side.RIGHT: seen[Landmark.RIGHT_EAR]}
        has_head = has_nose and any(has_eye.values()) and any(has_ear.values())

        shoulders = {side: seen[ARM_CHAINS[side][0]] for side in Side}
        elbows = {side: seen[ARM_CHAINS[side][1]] for side in Side}
        wrists = {side: seen[ARM_CHAINS[side][2]] for side in Side}
        has_upper = all(shoulders.values()) and all(elbows.values()) and all(wrists.values())

        hands = {
            side: wrists[side] and any(seen[lm] for lm in HAND_LANDMARKS[side])
            for side in Side
        }

        hips = {side: seen[LEG_CHAINS[side][0]] for side in Side}
        knees = {side: seen[LEG_CHAINS[side][1]] for side in Side}
        ankles = {side: seen[LEG_CHAINS[side][2]] for side in Side}
        has_lower = all(hips.values()) and all(knees.values()) and all(ankles.values())

        feet = {
            side: ankles[side] and any(seen[lm] for lm in FOOT_TIP_LANDMARKS[side])
            for side in Side
        }

        if has_head and has_upper and all(hands.values()) and has_lower and all(feet.values()):
            return FramingResult(True, True, min(1.0, confidence + self._full_body_bonus), "")

        if not has_head:
            if not has_nose:
                message = "Head not fully visible - nose not detected"
            elif not any(has_eye.values()):
                message = "Face not clearly visible - eyes not detected"
            else:
                message = "Head not fully visible - ears not detected"
        elif not has_upper:
            message = _missing_pair_message(
                [
                    (shoulders, "Upper body not visible - shoulders not detected"),
                    (elbows, "Arms not fully visible - elbows not detected"),
                    (wrists, "Arms not fully visible - wrists not detected"),
                ],
                "Upper body not fully visible",
            )
        elif not all(hands.values()):
            side = Side.LEFT if not hands[Side.LEFT] else Side.RIGHT
            message = f"{side.name.capitalize()} hand not fully visible"
        elif not has_lower:
            message = _missing_pair_message(
                [
                    (hips, "Lower body not visible - hips not detected"),
                    (knees, "Legs not fully visible - knees not detected"),
                    (ankles, "Legs not fully visible - ankles not detected"),
                ],
                "Lower body not fully visible",
            )
        else:
            side = Side.LEFT if not feet[Side.LEFT] else Side.RIGHT
            message = f"{side.name.capitalize()} foot not fully visible"

        self.logger.debug(f"Framing incomplete: {message}")
        return FramingResult(True, False, confidence, message)


def _missing_pair_message(checks, fallback: str) -> str:
    """First message whose joint pair is missing on both sides."""
    for per_side, message in checks:
        if not any(per_side.values()):
            return message
    return fallback


def assess_framing(keypoints, config: Optional[Config] = None) -> FramingResult:
    """
    Check a pose for person presence and full-body visibility.

    Args:
        keypoints: KeypointSet or detector array accepted by KeypointSet.from_array

    Returns:
        FramingResult
    """
    if not isinstance(keypoints, KeypointSet):
        keypoints = KeypointSet.from_array(keypoints)
    return FramingChecker(config).check(keypoints)
