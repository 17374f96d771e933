"""Configured post-processor built on per-class NMS."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ..config import SuppressionConfig
from ..core.nms import suppress_all_classes
from .base import Detection

LOGGER = logging.getLogger(__name__)


class PostProcessor:
    """Post-processor implementing the Suppressor protocol.

    Attributes:
        iou_threshold: IoU threshold for non-max suppression.
        num_classes: Size of the label space.
        score_threshold: Candidates scoring below this are dropped first.
        max_detections: Maximum detections to return, or None for no cap.
        workers: Threads used to suppress class partitions in parallel.
    """

    def __init__(
        self,
        iou_threshold: float = 0.45,
        num_classes: int = 80,
        score_threshold: float = 0.0,
        max_detections: Optional[int] = None,
        workers: int = 1,
    ):
        """Initialize PostProcessor.

        Args:
            iou_threshold: IoU threshold for non-max suppression (0.0 to 1.0).
            num_classes: Number of classes the decoder can emit.
            score_threshold: Minimum score kept before suppression.
            max_detections: Maximum detections to return per frame.
            workers: Worker threads; 1 runs sequentially.

        Raises:
            ValueError: If any parameter is out of range.
        """
        config = SuppressionConfig(
            iou_threshold=iou_threshold,
            num_classes=num_classes,
            score_threshold=score_threshold,
            max_detections=max_detections,
            workers=workers,
        )
        self.iou_threshold = config.iou_threshold
        self.num_classes = config.num_classes
        self.score_threshold = config.score_threshold
        self.max_detections = config.max_detections
        self.workers = config.workers
        self._executor = ThreadPoolExecutor(max_workers=self.workers) if self.workers > 1 else None

    @classmethod
    def from_config(cls, config: SuppressionConfig) -> "PostProcessor":
        """Create PostProcessor from SuppressionConfig.

        Args:
            config: Suppression configuration.

        Returns:
            Configured PostProcessor instance.
        """
        return cls(
            iou_threshold=config.iou_threshold,
            num_classes=config.num_classes,
            score_threshold=config.score_threshold,
            max_detections=config.max_detections,
            workers=config.workers,
        )

    def suppress(self, candidates: Sequence[Detection]) -> List[Detection]:
        """Filter, suppress and cap one frame's candidates.

        Args:
            candidates: Raw detection candidates.

        Returns:
            Surviving detections in ascending class id, or by descending
            score once capped to max_detections.
        """
        total = len(candidates)
        if self.score_threshold > 0:
            candidates = [c for c in candidates if c.score >= self.score_threshold]

        detections = suppress_all_classes(
            candidates,
            self.iou_threshold,
            self.num_classes,
            executor=self._executor,
        )

        if self.max_detections is not None and len(detections) > self.max_detections:
            ranked = sorted(detections, key=lambda d: d.score, reverse=True)
            detections = ranked[: self.max_detections]

        LOGGER.debug("Kept %d of %d candidates", len(detections), total)
        return detections

    def close(self) -> None:
        """Shut down the worker pool, if any."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
