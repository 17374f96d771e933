"""Per-class non-maximum suppression for object-detection candidates."""

__version__ = "0.1.0"

from .core.geometry import Rectangle, compute_iou
from .core.nms import partition_by_class, suppress_all_classes, suppress_class
from .detection.base import Detection, detections_from_array, detections_to_array
from .detection.postprocess import PostProcessor

__all__ = [
    "__version__",
    "Rectangle",
    "Detection",
    "PostProcessor",
    "compute_iou",
    "partition_by_class",
    "suppress_class",
    "suppress_all_classes",
    "detections_from_array",
    "detections_to_array",
]
