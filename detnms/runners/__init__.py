"""Runners that drive the post-processor over many frames."""

from .batch import BatchResult, format_report, run_batch, run_benchmark

__all__ = ["BatchResult", "format_report", "run_batch", "run_benchmark"]
