"""
Batch Runner Module

Converts the selected files one at a time. A failing file is recorded and the
run moves on; nothing already written is rolled back.
"""

import os
from typing import Callable, Dict, Optional, Sequence

from .compression import convert_image
from .logger_setup import setup_logger
from .models import (
    DEFAULT_QUALITY,
    ConversionError,
    ConversionResult,
    Failure,
    OutputStrategy,
    RunSummary,
    Skipped,
    Success,
    is_vector,
)
from .paths import resolve_output_path

log = setup_logger()

ResultCallback = Callable[[ConversionResult], None]


def convert_one(
        root: str,
        rel_path: str,
        strategy: OutputStrategy,
        quality: int = DEFAULT_QUALITY
) -> ConversionResult:
    """
    Resolve the output path for one file and convert it.

    Never raises for per-file problems: vector files come back as ``Skipped``,
    codec and filesystem errors as ``Failure``.
    """
    if is_vector(rel_path):
        return Skipped(rel_path, "vector images are not converted")

    input_path = os.path.join(root, rel_path)
    try:
        output_path = resolve_output_path(root, rel_path, strategy)
    except OSError as e:
        return Failure(rel_path, f"cannot create output directory: {e}")

    try:
        orig_size, new_size, elapsed = convert_image(input_path, output_path, quality)
    except ConversionError as e:
        return Failure(rel_path, e.reason)
    return Success(rel_path, output_path, orig_size, new_size, elapsed)


def log_result(result: ConversionResult) -> None:
    """Log one result with aligned columns."""
    if isinstance(result, Success):
        ratio = 100 - (result.new_size / result.original_size * 100) if result.original_size else 0
        log.info(
            f"{result.input_path:<45} | {result.original_size/1024:7.1f}KB -> {result.new_size/1024:7.1f}KB "
            f"({-ratio:+6.1f}%) | {result.elapsed:5.2f}s"
        )
    elif isinstance(result, Failure):
        log.error(f"Failed to optimize {result.input_path}: {result.reason}")
    elif isinstance(result, Skipped):
        log.warning(f"Skipped {result.input_path}: {result.reason}")


class CollisionTracker:
    """Warns when two inputs write the same output file."""

    def __init__(self):
        self._owners: Dict[str, str] = {}

    def check(self, result: ConversionResult) -> None:
        if not isinstance(result, Success):
            return
        previous = self._owners.setdefault(result.output_path, result.input_path)
        if previous != result.input_path:
            log.warning(
                f"{result.input_path} overwrote {result.output_path}, "
                f"previously written from {previous}"
            )
            self._owners[result.output_path] = result.input_path


def run_batch(
        root: str,
        files: Sequence[str],
        strategy: OutputStrategy,
        quality: int = DEFAULT_QUALITY,
        on_result: Optional[ResultCallback] = None
) -> RunSummary:
    """
    Convert ``files`` (relative to ``root``) sequentially, in the given order.

    Args:
        root (str): Scan root the relative paths refer to.
        files (Sequence[str]): Selected files.
        strategy (OutputStrategy): Where outputs are written.
        quality (int): WebP quality, 0-100.
        on_result (callable, optional): Called with each result as it is recorded.

    Returns:
        RunSummary: Counts of succeeded, failed and skipped files.
    """
    summary = RunSummary(strategy=strategy)
    collisions = CollisionTracker()

    for rel_path in files:
        log.debug(f"Optimizing: {rel_path}")
        result = convert_one(root, rel_path, strategy, quality)
        summary.record(result)
        collisions.check(result)
        log_result(result)
        if on_result is not None:
            on_result(result)

    return summary
