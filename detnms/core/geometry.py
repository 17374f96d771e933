"""Rectangle geometry and Intersection-over-Union."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned box in [left, top, right, bottom] coordinates.

    No ordering is enforced; a malformed box simply has a zero or
    negative area.
    """

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_xyxy(cls, box: Sequence[float]) -> "Rectangle":
        """Build a rectangle from an [x1, y1, x2, y2] sequence or array."""
        x1, y1, x2, y2 = box
        return cls(float(x1), float(y1), float(x2), float(y2))

    def as_array(self) -> np.ndarray:
        """Return the box as a float [x1, y1, x2, y2] array."""
        return np.array([self.left, self.top, self.right, self.bottom], dtype=np.float64)


def area(rect: Rectangle) -> float:
    """Signed area of a rectangle."""
    return (rect.right - rect.left) * (rect.bottom - rect.top)


def overlap_1d(min_a: float, max_a: float, min_b: float, max_b: float) -> float:
    """Length of the overlap of two intervals, negative when they are apart."""
    return min(max_a, max_b) - max(min_a, min_b)


def compute_iou(a: Rectangle, b: Rectangle) -> float:
    """Compute the Intersection-over-Union of two rectangles.

    Degenerate input never raises: boxes that do not overlap on either
    axis, and pairs whose union is exactly zero, give 0.0. The result is
    not clamped, so malformed boxes may fall outside [0, 1].

    Args:
        a: First rectangle.
        b: Second rectangle.

    Returns:
        Intersection area divided by union area.
    """
    overlap_x = overlap_1d(a.left, a.right, b.left, b.right)
    overlap_y = overlap_1d(a.top, a.bottom, b.top, b.bottom)
    if overlap_x <= 0 or overlap_y <= 0:
        return 0.0

    intersection = overlap_x * overlap_y
    union = area(a) + area(b) - intersection
    if union == 0:
        return 0.0
    return intersection / union
