import pytest

from bodyscan import assess_framing
from bodyscan.core import Landmark


def test_full_body_pose(pose):
    result = assess_framing(pose)

    assert result.has_person
    assert result.is_full_body
    assert result.ok
    assert result.message == ""
    assert result.confidence == pytest.approx(1.0)


def test_detector_array_input(detector_array):
    assert assess_framing(detector_array).is_full_body


def test_too_few_landmarks_means_no_person(pose):
    keep = list(Landmark)[:9]
    sparse = pose.invalidate(*[lm for lm in Landmark if lm not in keep])
    result = assess_framing(sparse)

    assert not result.has_person
    assert result.confidence == 0.0
    assert result.message == "No person detected"


def test_zero_filled_landmarks_are_not_detected(pose):
    zeroed = pose.replace(**{lm.label: (0.0, 0.0) for lm in list(Landmark)[9:]})
    assert not assess_framing(zeroed).has_person


def test_partial_confidence_without_bonus(pose):
    result = assess_framing(pose.invalidate(Landmark.LEFT_HEEL, Landmark.LEFT_FOOT_INDEX))

    assert result.has_person
    assert not result.is_full_body
    assert result.confidence == pytest.approx(31 / 33)
    assert result.message == "Left foot not fully visible"


@pytest.mark.parametrize("missing, message", [
    ([Landmark.NOSE], "Head not fully visible - nose not detected"),
    ([Landmark.LEFT_EAR, Landmark.RIGHT_EAR], "Head not fully visible - ears not detected"),
    ([Landmark.LEFT_EYE, Landmark.LEFT_EYE_INNER, Landmark.LEFT_EYE_OUTER,
      Landmark.RIGHT_EYE, Landmark.RIGHT_EYE_INNER, Landmark.RIGHT_EYE_OUTER],
     "Face not clearly visible - eyes not detected"),
    ([Landmark.LEFT_SHOULDER, Landmark.RIGHT_SHOULDER],
     "Upper body not visible - shoulders not detected"),
    ([Landmark.LEFT_ELBOW, Landmark.RIGHT_ELBOW], "Arms not fully visible - elbows not detected"),
    ([Landmark.RIGHT_ELBOW], "Upper body not fully visible"),
    ([Landmark.LEFT_PINKY, Landmark.LEFT_INDEX, Landmark.LEFT_THUMB], "Left hand not fully visible"),
    ([Landmark.RIGHT_PINKY, Landmark.RIGHT_INDEX, Landmark.RIGHT_THUMB], "Right hand not fully visible"),
    ([Landmark.LEFT_KNEE, Landmark.RIGHT_KNEE], "Legs not fully visible - knees not detected"),
    ([Landmark.LEFT_ANKLE, Landmark.RIGHT_ANKLE], "Legs not fully visible - ankles not detected"),
    ([Landmark.RIGHT_HEEL, Landmark.RIGHT_FOOT_INDEX], "Right foot not fully visible"),
])
def test_first_missing_region_is_reported(pose, missing, message):
    result = assess_framing(pose.invalidate(*missing))
    assert not result.is_full_body
    assert result.message == message


def test_single_eye_side_is_enough(pose):
    one_side = pose.invalidate(Landmark.RIGHT_EYE, Landmark.RIGHT_EYE_INNER, Landmark.RIGHT_EYE_OUTER)
    assert assess_framing(one_side).is_full_body
