"""Detection candidate type, suppressor protocol and array hand-off."""

from dataclasses import dataclass
from typing import List, Mapping, Optional, Protocol, Sequence

import numpy as np

from ..core.geometry import Rectangle

ARRAY_COLUMNS = 6


@dataclass(frozen=True)
class Detection:
    """Single detection candidate.

    Attributes:
        rect: Bounding box in [x1, y1, x2, y2] coordinates.
        score: Confidence score.
        class_id: Class integer ID in [0, num_classes).
        label: Optional class label name, carried through untouched.
    """

    rect: Rectangle
    score: float
    class_id: int
    label: Optional[str] = None


class Suppressor(Protocol):
    """Protocol for detection post-processors."""

    def suppress(self, candidates: Sequence[Detection]) -> List[Detection]:
        """Reduce candidates to the surviving detections.

        Args:
            candidates: Raw detection candidates.

        Returns:
            List of surviving Detection objects.
        """
        ...


def detections_from_array(
    array: np.ndarray, labels: Optional[Mapping[int, str]] = None
) -> List[Detection]:
    """Convert decoded model output to detection candidates.

    Args:
        array: (N, 6) array of [x1, y1, x2, y2, score, class_id] rows.
        labels: Optional mapping from class id to label name.

    Returns:
        List of Detection objects in row order.

    Raises:
        ValueError: If the array is not (N, 6) or holds a non-integral class id.
    """
    array = np.asarray(array, dtype=np.float64)
    if array.size == 0:
        return []
    if array.ndim != 2 or array.shape[1] != ARRAY_COLUMNS:
        raise ValueError(f"Expected an (N, {ARRAY_COLUMNS}) array, got shape {array.shape}")

    class_ids = array[:, 5]
    if not np.array_equal(class_ids, np.floor(class_ids)):
        raise ValueError("class_id column must hold integral values")

    detections = []
    for row in array:
        class_id = int(row[5])
        detections.append(
            Detection(
                rect=Rectangle.from_xyxy(row[:4]),
                score=float(row[4]),
                class_id=class_id,
                label=labels.get(class_id) if labels else None,
            )
        )
    return detections


def detections_to_array(detections: Sequence[Detection]) -> np.ndarray:
    """Pack detections into an (N, 6) float array."""
    if not detections:
        return np.zeros((0, ARRAY_COLUMNS), dtype=np.float64)
    return np.array(
        [np.append(d.rect.as_array(), [d.score, d.class_id]) for d in detections]
    )
