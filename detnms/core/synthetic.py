"""Synthetic detection candidates for benchmarking."""

from typing import List

import numpy as np

from ..detection.base import Detection, detections_from_array


def generate_candidates(
    rng: np.random.Generator,
    count: int,
    num_classes: int,
    width: int = 416,
    height: int = 416,
    cluster_size: int = 4,
) -> List[Detection]:
    """Generate clusters of overlapping candidates, like raw detector output.

    Each cluster shares a class and a base box; its members are jittered
    copies of that box with independent scores.

    Args:
        rng: Random generator.
        count: Number of candidates to produce.
        num_classes: Class ids are drawn from [0, num_classes).
        width: Frame width in pixels.
        height: Frame height in pixels.
        cluster_size: Candidates per cluster.

    Returns:
        List of Detection objects.
    """
    if count <= 0:
        return []

    clusters = -(-count // cluster_size)
    box_w = rng.uniform(0.05, 0.4, clusters) * width
    box_h = rng.uniform(0.05, 0.4, clusters) * height
    center_x = rng.uniform(0, width, clusters)
    center_y = rng.uniform(0, height, clusters)
    class_ids = rng.integers(0, num_classes, clusters)

    member = np.arange(count) // cluster_size
    jitter = rng.normal(0.0, 0.08, (count, 4))
    cx = center_x[member] + jitter[:, 0] * box_w[member]
    cy = center_y[member] + jitter[:, 1] * box_h[member]
    w = box_w[member] * (1.0 + jitter[:, 2])
    h = box_h[member] * (1.0 + jitter[:, 3])

    rows = np.stack(
        [
            np.clip(cx - w / 2, 0, width),
            np.clip(cy - h / 2, 0, height),
            np.clip(cx + w / 2, 0, width),
            np.clip(cy + h / 2, 0, height),
            rng.uniform(0.05, 1.0, count),
            class_ids[member],
        ],
        axis=1,
    )
    return detections_from_array(rows)
