"""Per-class greedy non-maximum suppression."""

import logging
import numbers
from concurrent.futures import Executor
from functools import partial
from typing import TYPE_CHECKING, Iterable, List, Optional

from .geometry import compute_iou

if TYPE_CHECKING:
    from ..detection.base import Detection

LOGGER = logging.getLogger(__name__)


def check_iou_threshold(iou_threshold: float) -> float:
    """Validate an IoU threshold.

    Raises:
        ValueError: If the threshold is not a number in [0, 1].
    """
    if isinstance(iou_threshold, bool) or not isinstance(iou_threshold, numbers.Real):
        raise ValueError(f"iou_threshold must be a number, got {iou_threshold!r}")
    if not 0.0 <= iou_threshold <= 1.0:
        raise ValueError(f"iou_threshold must be between 0.0 and 1.0, got {iou_threshold}")
    return float(iou_threshold)


def check_num_classes(num_classes: int) -> int:
    """Validate a class count.

    Raises:
        ValueError: If the count is not a positive integer.
    """
    if isinstance(num_classes, bool) or not isinstance(num_classes, numbers.Integral):
        raise ValueError(f"num_classes must be an integer, got {num_classes!r}")
    if num_classes < 1:
        raise ValueError(f"num_classes must be positive, got {num_classes}")
    return int(num_classes)


def partition_by_class(
    candidates: Iterable["Detection"], num_classes: int
) -> List[List["Detection"]]:
    """Split candidates into one list per class id.

    Each partition keeps the original relative order of its candidates.

    Args:
        candidates: Detection candidates.
        num_classes: Size of the label space.

    Returns:
        ``num_classes`` lists, indexed by class id (possibly empty).

    Raises:
        ValueError: If a candidate's class id is outside [0, num_classes).
    """
    num_classes = check_num_classes(num_classes)
    partitions: List[List["Detection"]] = [[] for _ in range(num_classes)]
    for candidate in candidates:
        class_id = candidate.class_id
        # negative ids would wrap around in list indexing
        if not 0 <= class_id < num_classes:
            raise ValueError(
                f"class_id {class_id} out of range for num_classes={num_classes}"
            )
        partitions[class_id].append(candidate)
    return partitions


def suppress_class(
    candidates: Iterable["Detection"], iou_threshold: float
) -> List["Detection"]:
    """Greedy NMS over candidates that share a class.

    Candidates are visited in descending score order; ties keep their
    original order. A candidate is dropped when its IoU with any already
    kept box is strictly greater than ``iou_threshold``. An IoU equal to
    the threshold does not suppress.

    Args:
        candidates: Candidates of a single class.
        iou_threshold: Overlap above which a lower-scoring box is dropped.

    Returns:
        Kept candidates in selection order.
    """
    iou_threshold = check_iou_threshold(iou_threshold)
    ordered = sorted(candidates, key=lambda candidate: candidate.score, reverse=True)

    kept: List["Detection"] = []
    for candidate in ordered:
        if all(compute_iou(candidate.rect, other.rect) <= iou_threshold for other in kept):
            kept.append(candidate)
    return kept


def suppress_all_classes(
    candidates: Iterable["Detection"],
    iou_threshold: float,
    num_classes: int,
    executor: Optional[Executor] = None,
) -> List["Detection"]:
    """Partition candidates by class and suppress each class independently.

    Boxes of different classes never suppress each other. The result is
    concatenated in ascending class id, also when an executor runs the
    partitions concurrently.

    Args:
        candidates: Detection candidates of all classes.
        iou_threshold: Overlap above which a lower-scoring box is dropped.
        num_classes: Size of the label space.
        executor: Optional executor used to suppress partitions in parallel.

    Returns:
        Surviving candidates.
    """
    iou_threshold = check_iou_threshold(iou_threshold)
    partitions = partition_by_class(candidates, num_classes)

    suppress = partial(suppress_class, iou_threshold=iou_threshold)
    if executor is None:
        survivors = map(suppress, partitions)
    else:
        # Executor.map yields in submission order
        survivors = executor.map(suppress, partitions)

    result: List["Detection"] = []
    for kept in survivors:
        result.extend(kept)
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug(
            "Suppressed %d candidates to %d across %d classes",
            sum(len(partition) for partition in partitions),
            len(result),
            num_classes,
        )
    return result
