"""Detection types and post-processing."""

from .base import Detection, Suppressor, detections_from_array, detections_to_array
from .postprocess import PostProcessor

__all__ = [
    "Detection",
    "Suppressor",
    "PostProcessor",
    "detections_from_array",
    "detections_to_array",
]
