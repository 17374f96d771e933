"""Batch post-processing runner."""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from ..config import BenchmarkConfig, SuppressionConfig
from ..core.synthetic import generate_candidates
from ..detection.base import Detection
from ..detection.postprocess import PostProcessor

LOGGER = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Outcome of post-processing a sequence of frames."""

    detections: List[List[Detection]] = field(default_factory=list)
    total_candidates: int = 0
    total_kept: int = 0
    total_seconds: float = 0.0

    @property
    def frames(self) -> int:
        return len(self.detections)

    @property
    def average_seconds(self) -> float:
        """Mean post-process time per frame."""
        if not self.detections:
            return 0.0
        return self.total_seconds / len(self.detections)

    @property
    def fps(self) -> float:
        """Frames per second of post-processing alone."""
        if self.total_seconds <= 0:
            return 0.0
        return len(self.detections) / self.total_seconds


def run_batch(
    frames: Iterable[Sequence[Detection]],
    config: SuppressionConfig,
    processor: Optional[PostProcessor] = None,
    total: Optional[int] = None,
    progress: bool = True,
) -> BatchResult:
    """Post-process every frame's candidates and time each call.

    Args:
        frames: Candidate lists, one per frame.
        config: Suppression configuration, used when no processor is given.
        processor: Optional pre-built processor; left open after the run.
        total: Frame count for the progress bar, if known.
        progress: Show a tqdm progress bar.

    Returns:
        BatchResult with per-frame detections and timing totals.
    """
    owns_processor = processor is None
    if processor is None:
        processor = PostProcessor.from_config(config)

    result = BatchResult()
    try:
        for candidates in tqdm(frames, total=total, desc="Suppressing", disable=not progress):
            start = time.perf_counter()
            kept = processor.suppress(candidates)
            result.total_seconds += time.perf_counter() - start
            result.detections.append(kept)
            result.total_candidates += len(candidates)
            result.total_kept += len(kept)
    finally:
        if owns_processor:
            processor.close()

    LOGGER.info(
        "Processed %d frames: kept %d of %d candidates",
        result.frames,
        result.total_kept,
        result.total_candidates,
    )
    return result


def format_report(result: BatchResult) -> List[str]:
    """Render the summary lines for a batch run."""
    return [
        f"Frames processed: {result.frames}",
        f"Detections kept: {result.total_kept} / {result.total_candidates} candidates",
        f"Average postprocess cost: {result.average_seconds:.6f} s",
        f"FPS: {result.fps:.6f}",
    ]


def run_benchmark(config: BenchmarkConfig, progress: bool = True) -> BatchResult:
    """Run the post-processor over generated frames and print the report.

    Args:
        config: Benchmark configuration.
        progress: Show a tqdm progress bar.

    Returns:
        BatchResult of the run.
    """
    rng = np.random.default_rng(config.seed)
    synthetic = config.synthetic
    frames = (
        generate_candidates(
            rng,
            synthetic.candidates,
            config.suppression.num_classes,
            width=synthetic.width,
            height=synthetic.height,
            cluster_size=synthetic.cluster_size,
        )
        for _ in range(config.frames)
    )

    result = run_batch(frames, config.suppression, total=config.frames, progress=progress)
    for line in format_report(result):
        print(line)
    return result
