"""Body measurement engine.

Turns one detected pose, the detection image size, an optional person mask
and the subject's height into the 8-slot measurement vector. The engine
never raises: a failed calibration or an unexpected error yields the
all-zero vector, and a measurement that cannot be computed or is
implausible yields 0.0 in its slot only.
"""

from typing import Dict, Optional, Union
import numpy as np

from bodyscan.core import Config, get_logger, LANDMARK_COUNT, DETECTOR_KEYPOINT_COUNT
from bodyscan.pose.keypoints import KeypointSet
from bodyscan.measure.calibration import Calibration, ScaleCalibrator
from bodyscan.measure.calculators import CALCULATORS
from bodyscan.measure.results import MeasurementIndex, MeasurementVector, MEASUREMENT_KEYS
from bodyscan.measure.thigh import ThighWidthEstimator
from bodyscan.measure.validator import MeasurementValidator


KeypointInput = Union[KeypointSet, np.ndarray, list]


class MeasurementEngine:
    """
    Stateless measurement pipeline.

    Configuration is read once at construction; each call to measure() only
    uses call-local state, so one engine can serve several threads.
    """

    def __init__(self, config: Optional[Config] = None):
        self.logger = get_logger("measure.engine")
        self.config = config or Config()

        self.calibrator = ScaleCalibrator(self.config)
        self.thigh_estimator = ThighWidthEstimator(self.config)
        self.validator = MeasurementValidator(self.config)

    def calibrate(
        self,
        keypoints: KeypointInput,
        image_width: int,
        image_height: int,
        height_cm: float,
    ) -> Optional[Calibration]:
        return self.calibrator.calibrate(
            self._as_keypoint_set(keypoints), height_cm, image_width, image_height
        )

    def _as_keypoint_set(self, keypoints: KeypointInput) -> KeypointSet:
        if isinstance(keypoints, KeypointSet):
            return keypoints

        pose = KeypointSet.from_array(keypoints)
        arr = np.asarray(keypoints)
        rows = arr.shape[0] if arr.ndim == 2 else arr.size // 2
        if rows not in (LANDMARK_COUNT, DETECTOR_KEYPOINT_COUNT):
            self.logger.debug(
                f"Keypoint array has {rows} rows, expected {LANDMARK_COUNT} or "
                f"{DETECTOR_KEYPOINT_COUNT}; using the first {LANDMARK_COUNT}"
            )
        return pose

    def compute_raw(
        self,
        keypoints: KeypointInput,
        image_width: int,
        image_height: int,
        height_cm: float,
        mask: Optional[np.ndarray] = None,
    ) -> Optional[Dict[str, Optional[float]]]:
        """
        Unvalidated centimeter values keyed by measurement name.

        Returns:
            None if calibration fails; otherwise a dict where a missing
            measurement maps to None. May raise on malformed input.
        """
        pose = self._as_keypoint_set(keypoints)
        calib = self.calibrator.calibrate(pose, height_cm, image_width, image_height)
        if calib is None:
            return None
        return self._raw_values(pose, calib, mask)

    def _raw_values(
        self, pose: KeypointSet, calib: Calibration, mask
    ) -> Dict[str, Optional[float]]:
        raw: Dict[str, Optional[float]] = {}
        for idx, calculator in CALCULATORS.items():
            raw[MEASUREMENT_KEYS[idx]] = calculator(pose, calib)

        thigh = self.thigh_estimator.estimate(pose, calib, mask)
        if thigh.methods:
            self.logger.debug(
                "Thigh width via " + ", ".join(
                    f"{side.name.lower()}={method}" for side, method in thigh.methods.items()
                )
            )
        raw[MEASUREMENT_KEYS[MeasurementIndex.THIGH_WIDTH]] = thigh.width_cm
        return raw

    def measure(
        self,
        keypoints: KeypointInput,
        image_width: int,
        image_height: int,
        height_cm: float,
        mask: Optional[np.ndarray] = None,
    ) -> MeasurementVector:
        """
        Compute the validated measurement vector for one image.

        Args:
            keypoints: KeypointSet or detector array (N >= 33 rows of x, y)
            image_width: Width in pixels of the image the keypoints refer to
            image_height: Height in pixels of the image the keypoints refer to
            height_cm: Subject's true height, 0 < h <= 300
            mask: Optional (image_height, image_width) person probability mask

        Returns:
            MeasurementVector; all zeros if calibration fails
        """
        try:
            raw = self.compute_raw(keypoints, image_width, image_height, height_cm, mask)
            if raw is None:
                return MeasurementVector.zeros()

            values = []
            for idx in MeasurementIndex:
                value = raw[MEASUREMENT_KEYS[idx]]
                if value is None:
                    self.logger.debug(f"{MEASUREMENT_KEYS[idx]}: required landmarks missing")
                values.append(self.validator.validate(idx, value))

            result = MeasurementVector(values)
        except Exception:
            self.logger.exception("Measurement failed, returning empty result")
            return MeasurementVector.zeros()

        self.logger.info(f"Computed {result.computed_count}/{len(result)} measurements")
        return result


def measure_body(
    keypoints: KeypointInput,
    image_width: int,
    image_height: int,
    height_cm: float,
    mask: Optional[np.ndarray] = None,
    config: Optional[Config] = None,
) -> MeasurementVector:
    """Convenience wrapper around MeasurementEngine.measure()."""
    return MeasurementEngine(config).measure(keypoints, image_width, image_height, height_cm, mask)
