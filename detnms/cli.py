"""Command-line interface for detnms."""

import argparse
import logging
import sys

from . import __version__
from .config import BenchmarkConfig
from .runners.batch import run_benchmark

EPILOG = """\
Examples:
  detnms
  detnms --frames 500 --candidates 1000 --num-classes 20 --iou 0.5
  detnms --workers 4 --score-threshold 0.3 --max-detections 100 --seed 7

Candidates are generated as jittered clusters of boxes so that
suppression has realistic overlap to remove.
"""

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(args=None) -> BenchmarkConfig:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv).

    Returns:
        BenchmarkConfig with parsed options.
    """
    parser = build_parser()
    parsed = parser.parse_args(args)

    try:
        return BenchmarkConfig.from_args(
            frames=parsed.frames,
            seed=parsed.seed,
            verbose=parsed.verbose,
            iou_threshold=parsed.iou,
            num_classes=parsed.num_classes,
            score_threshold=parsed.score_threshold,
            max_detections=parsed.max_detections,
            workers=parsed.workers,
            candidates=parsed.candidates,
            width=parsed.width,
            height=parsed.height,
            cluster_size=parsed.cluster_size,
        )
    except ValueError as e:
        parser.error(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="detnms",
        description="Benchmark per-class non-maximum suppression on generated detections.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--frames",
        type=int,
        default=100,
        help="Number of frames to post-process (default: 100)",
    )

    parser.add_argument(
        "--candidates",
        type=int,
        default=200,
        help="Raw candidates per frame (default: 200)",
    )

    parser.add_argument(
        "--cluster-size",
        type=int,
        default=4,
        help="Candidates generated around each object (default: 4)",
    )

    parser.add_argument(
        "--width",
        type=int,
        default=416,
        help="Frame width in pixels (default: 416)",
    )

    parser.add_argument(
        "--height",
        type=int,
        default=416,
        help="Frame height in pixels (default: 416)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible candidates",
    )

    # Suppression arguments
    parser.add_argument(
        "--num-classes",
        type=int,
        default=80,
        help="Size of the class label space (default: 80)",
    )

    parser.add_argument(
        "--iou",
        type=float,
        default=0.45,
        help="IoU above which a lower-scoring box is suppressed; 0.0-1.0 (default: 0.45)",
    )

    parser.add_argument(
        "--score-threshold",
        type=float,
        default=0.0,
        help="Drop candidates scoring below this before suppression (default: 0.0)",
    )

    parser.add_argument(
        "--max-detections",
        type=int,
        default=None,
        help="Keep at most this many detections per frame (default: unlimited)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used to suppress classes in parallel (default: 1)",
    )

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line runs."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, handlers=[handler])


def main(args=None) -> int:
    """Parse arguments and run the benchmark.

    Returns:
        Process exit code.
    """
    config = parse_args(args)
    setup_logging(config.verbose)
    try:
        run_benchmark(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
