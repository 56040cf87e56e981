"""Thigh width estimation from a segmentation mask or from hip geometry.

Two strategies share one interface:

- MaskEdgeStrategy scans the person mask along the row halfway between hip
  and knee and measures the distance between the outer and inner thigh edges.
- KeypointGeometryStrategy expands the hip-to-centerline distance into a
  coarse width estimate. It is the fallback when there is no usable mask or
  the scan finds no edges, and its values are lower confidence.

Widths are reported in pixels; the estimator converts to centimeters.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional
import numpy as np

from bodyscan.core import Config, get_logger, Side, LEG_CHAINS
from bodyscan.pose.keypoints import KeypointSet
from bodyscan.measure.calibration import Calibration


class ThighEdgeStrategy(ABC):
    """Per-leg thigh width in pixels."""

    name = "base"

    @abstractmethod
    def leg_width_px(
        self,
        keypoints: KeypointSet,
        side: Side,
        image_width: int,
        image_height: int,
    ) -> Optional[float]:
        """Return the thigh width in pixels, or None if it cannot be estimated."""


class KeypointGeometryStrategy(ThighEdgeStrategy):
    """Hip half-width scaled by an expansion factor, doubled."""

    name = "geometry"

    def __init__(self, expansion_factor: float = 1.5):
        self.expansion_factor = expansion_factor

    def leg_width_px(self, keypoints, side, image_width, image_height):
        hip_lm, knee_lm, _ = LEG_CHAINS[side]
        hip = keypoints.get(hip_lm)
        if hip is None or keypoints.get(knee_lm) is None:
            return None

        center = keypoints.hip_center
        center_x = center.x if center is not None else 0.5

        half_width = abs(hip.x - center_x) * self.expansion_factor
        width_px = half_width * 2.0 * image_width
        return width_px if width_px > 0.0 else None


class MaskEdgeStrategy(ThighEdgeStrategy):
    """
    Edge scan on a person-probability mask shaped (image_height, image_width).

    The outer edge is the first person pixel met when scanning from the image
    border on the leg's side in toward the body centerline. The inner edge is
    the first person pixel met when scanning from the centerline out toward
    the hip, for at most twice the centerline-to-hip distance.
    """

    name = "mask"

    def __init__(self, mask: np.ndarray, threshold: float = 0.5):
        self.mask = mask
        self.threshold = threshold

    def leg_width_px(self, keypoints, side, image_width, image_height):
        hip_lm, knee_lm, _ = LEG_CHAINS[side]
        hip = keypoints.get(hip_lm)
        knee = keypoints.get(knee_lm)
        center = keypoints.hip_center
        if hip is None or knee is None or center is None:
            return None

        row_y = int((hip.y + knee.y) / 2.0 * image_height)
        if row_y < 0 or row_y >= image_height:
            return None

        center_x = int(center.x * image_width)
        hip_x = min(int(hip.x * image_width), image_width - 1)
        if hip_x == center_x:
            return None
        direction = 1 if hip_x > center_x else -1

        person = self.mask[row_y] > self.threshold

        outer = self._outer_edge(person, center_x, direction)
        reach = 2 * abs(hip_x - center_x)
        bound = int(np.clip(center_x + direction * reach, 0, image_width - 1))
        inner = self._inner_edge(person, center_x, bound, direction)

        if outer is None or inner is None:
            return None
        # The outer edge must lie farther from the centerline than the inner one
        if (outer - center_x) * direction <= (inner - center_x) * direction:
            return None
        return float(abs(outer - inner))

    @staticmethod
    def _outer_edge(person: np.ndarray, center_x: int, direction: int) -> Optional[int]:
        if direction > 0:
            hits = np.flatnonzero(person[center_x:])
            return int(center_x + hits[-1]) if hits.size else None
        hits = np.flatnonzero(person[:center_x + 1])
        return int(hits[0]) if hits.size else None

    @staticmethod
    def _inner_edge(person: np.ndarray, center_x: int, bound: int, direction: int) -> Optional[int]:
        if direction > 0:
            hits = np.flatnonzero(person[center_x:bound + 1])
            return int(center_x + hits[0]) if hits.size else None
        hits = np.flatnonzero(person[bound:center_x + 1])
        return int(bound + hits[-1]) if hits.size else None


@dataclass
class ThighEstimate:
    """Combined thigh width and how each leg was measured."""
    width_cm: Optional[float]
    leg_widths_px: Dict[Side, float]
    methods: Dict[Side, str]


class ThighWidthEstimator:
    """Selects a strategy per call and combines both legs."""

    def __init__(self, config: Optional[Config] = None):
        self.logger = get_logger("measure.thigh")
        self.config = config or Config()

        thigh_config = self.config.thigh

        self._threshold = float(thigh_config.get("mask_threshold", 0.5))
        self._fallback = KeypointGeometryStrategy(
            float(thigh_config.get("expansion_factor", 1.5))
        )

    def select_strategy(self, mask, image_width: int, image_height: int) -> ThighEdgeStrategy:
        """Mask scanning when the mask matches the image exactly, else geometry."""
        if mask is None:
            return self._fallback

        mask = np.asarray(mask)
        if mask.ndim != 2 or mask.shape != (image_height, image_width):
            self.logger.debug(
                f"Mask shape {mask.shape} does not match image "
                f"{image_width}x{image_height}, using keypoint geometry"
            )
            return self._fallback

        return MaskEdgeStrategy(mask, self._threshold)

    def estimate(self, keypoints: KeypointSet, calib: Calibration, mask=None) -> ThighEstimate:
        strategy = self.select_strategy(mask, calib.image_width, calib.image_height)

        widths: Dict[Side, float] = {}
        methods: Dict[Side, str] = {}
        for side in Side:
            width = strategy.leg_width_px(keypoints, side, calib.image_width, calib.image_height)
            method = strategy.name
            if width is None and strategy is not self._fallback:
                width = self._fallback.leg_width_px(
                    keypoints, side, calib.image_width, calib.image_height
                )
                method = self._fallback.name
                if width is not None:
                    self.logger.debug(f"{side.name.lower()} thigh edge scan failed, using geometry")
            if width is not None:
                widths[side] = width
                methods[side] = method

        if not widths:
            return ThighEstimate(None, widths, methods)

        mean_px = sum(widths.values()) / len(widths)
        return ThighEstimate(calib.to_cm(mean_px), widths, methods)
