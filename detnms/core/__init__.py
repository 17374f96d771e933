"""Core geometry and suppression routines."""

from .geometry import Rectangle, area, compute_iou, overlap_1d
from .nms import partition_by_class, suppress_all_classes, suppress_class

__all__ = [
    "Rectangle",
    "area",
    "compute_iou",
    "overlap_1d",
    "partition_by_class",
    "suppress_all_classes",
    "suppress_class",
]
