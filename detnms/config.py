"""Configuration dataclasses for detnms."""

from dataclasses import dataclass, field
from typing import Optional

from .core.nms import check_iou_threshold, check_num_classes


@dataclass
class SuppressionConfig:
    """Configuration for detection post-processing."""

    iou_threshold: float = 0.45
    num_classes: int = 80
    score_threshold: float = 0.0
    max_detections: Optional[int] = None
    workers: int = 1

    def __post_init__(self):
        self.iou_threshold = check_iou_threshold(self.iou_threshold)
        self.num_classes = check_num_classes(self.num_classes)
        if self.max_detections is not None and self.max_detections < 0:
            raise ValueError(f"max_detections must be non-negative, got {self.max_detections}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")


@dataclass
class SyntheticConfig:
    """Configuration for generated benchmark candidates."""

    candidates: int = 200
    width: int = 416
    height: int = 416
    cluster_size: int = 4

    def __post_init__(self):
        for name in ("candidates", "width", "height", "cluster_size"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")


@dataclass
class BenchmarkConfig:
    """Combined configuration for a benchmark run."""

    frames: int = 100
    seed: Optional[int] = None
    verbose: bool = False
    suppression: SuppressionConfig = field(default_factory=SuppressionConfig)
    synthetic: SyntheticConfig = field(default_factory=SyntheticConfig)

    def __post_init__(self):
        if self.frames < 1:
            raise ValueError(f"frames must be positive, got {self.frames}")

    @classmethod
    def from_args(
        cls,
        frames: int = 100,
        seed: Optional[int] = None,
        verbose: bool = False,
        # Suppression config
        iou_threshold: float = 0.45,
        num_classes: int = 80,
        score_threshold: float = 0.0,
        max_detections: Optional[int] = None,
        workers: int = 1,
        # Synthetic config
        candidates: int = 200,
        width: int = 416,
        height: int = 416,
        cluster_size: int = 4,
    ) -> "BenchmarkConfig":
        """Create BenchmarkConfig from CLI arguments."""
        return cls(
            frames=frames,
            seed=seed,
            verbose=verbose,
            suppression=SuppressionConfig(
                iou_threshold=iou_threshold,
                num_classes=num_classes,
                score_threshold=score_threshold,
                max_detections=max_detections,
                workers=workers,
            ),
            synthetic=SyntheticConfig(
                candidates=candidates,
                width=width,
                height=height,
                cluster_size=cluster_size,
            ),
        )
