"""Pixel-to-centimeter scale calibration from the subject's known height"""

import math
from dataclasses import dataclass
from typing import Optional

from bodyscan.core import Config, get_logger, Landmark, FOOT_LANDMARKS
from bodyscan.pose.keypoints import KeypointSet


@dataclass(frozen=True)
class Calibration:
    """
    Result of a successful calibration.

    cm_per_pixel is strictly positive and finite.
    """
    head_y: float  # Normalized 0-1
    foot_y: float  # Normalized 0-1
    body_height_px: float
    cm_per_pixel: float
    image_width: int
    image_height: int
    used_foot_fallback: bool = False

    def to_cm(self, pixels: float) -> float:
        return pixels * self.cm_per_pixel


class ScaleCalibrator:
    """
    Derives centimeters-per-pixel from detected body extent and true height.

    Head reference is the nose; foot reference is the lowest valid
    ankle/heel/foot-index landmark, or the lowest valid landmark overall
    when no foot landmark was detected.
    """

    def __init__(self, config: Optional[Config] = None):
        self.logger = get_logger("measure.calibration")
        self.config = config or Config()

        self._max_height_cm = float(self.config.calibration.get("max_height_cm", 300.0))

    @property
    def max_height_cm(self) -> float:
        return self._max_height_cm

    def calibrate(
        self,
        keypoints: KeypointSet,
        height_cm: float,
        image_width: int,
        image_height: int,
    ) -> Optional[Calibration]:
        """
        Compute the scale for one image.

        Args:
            keypoints: Detected pose
            height_cm: Subject's true height
            image_width: Width in pixels of the detection image
            image_height: Height in pixels of the detection image

        Returns:
            Calibration or None if the image cannot be calibrated
        """
        if not (height_cm > 0.0) or height_cm > self._max_height_cm:
            self.logger.warning(
                f"Height {height_cm} cm outside (0, {self._max_height_cm:.0f}] cm"
            )
            return None

        if image_width <= 0 or image_height <= 0:
            self.logger.warning(f"Invalid image size {image_width}x{image_height}")
            return None

        head = keypoints.get(Landmark.NOSE)
        if head is None:
            self.logger.warning("Head reference (nose) not detected")
            return None

        foot_ys = [p.y for p in (keypoints.get(lm) for lm in FOOT_LANDMARKS) if p is not None]
        used_fallback = not foot_ys
        if used_fallback:
            foot_ys = [p.y for p in keypoints.valid_points().values()]
            self.logger.debug("No foot landmarks detected, using lowest valid landmark")

        foot_y = max(foot_ys)
        extent = foot_y - head.y
        if extent <= 0.0:
            self.logger.warning(f"Non-positive body extent {extent:.4f}")
            return None

        body_height_px = extent * image_height
        cm_per_pixel = height_cm / body_height_px
        if not math.isfinite(cm_per_pixel) or cm_per_pixel <= 0.0:
            self.logger.warning(f"Degenerate scale factor {cm_per_pixel}")
            return None

        self.logger.debug(
            f"Calibrated: head_y={head.y:.3f}, foot_y={foot_y:.3f}, "
            f"body={body_height_px:.1f}px, scale={cm_per_pixel:.4f} cm/px"
        )

        return Calibration(
            head_y=head.y,
            foot_y=foot_y,
            body_height_px=body_height_px,
            cm_per_pixel=cm_per_pixel,
            image_width=int(image_width),
            image_height=int(image_height),
            used_foot_fallback=used_fallback,
        )
