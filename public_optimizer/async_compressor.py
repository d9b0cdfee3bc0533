"""
Asynchronous Batch Runner Module.

Runs conversions in a bounded ``ProcessPoolExecutor`` for CPU-bound encoding,
with the same per-file fault isolation and summary semantics as
``run_batch``.

Functions:
    - run_batch_async: Convert the selected files with a pool of worker processes.
    - process_image: Convert a single file in a separate process.
    - logger_worker: Reads results from a queue and logs them in real time.
"""

import asyncio
import os
from concurrent.futures import ProcessPoolExecutor
from typing import Optional, Sequence

from .batch import CollisionTracker, ResultCallback, convert_one, log_result
from .logger_setup import setup_logger
from .models import DEFAULT_QUALITY, ConversionResult, OutputStrategy, RunSummary

log = setup_logger()


async def process_image(
        executor: ProcessPoolExecutor,
        root: str,
        rel_path: str,
        strategy: OutputStrategy,
        quality: int,
        log_queue: asyncio.Queue
) -> ConversionResult:
    """
    Convert a single file in a separate process and send the result to a queue.

    Args:
        executor (ProcessPoolExecutor): Executor for running CPU-bound conversion.
        root (str): Scan root.
        rel_path (str): File to convert, relative to ``root``.
        strategy (OutputStrategy): Where the output is written.
        quality (int): WebP quality.
        log_queue (asyncio.Queue): Queue feeding the logger worker.
    """
    loop = asyncio.get_running_loop()
    result = await loop.run_in_executor(executor, convert_one, root, rel_path, strategy, quality)
    await log_queue.put(result)
    return result


async def logger_worker(log_queue: asyncio.Queue, on_result: Optional[ResultCallback] = None) -> None:
    """
    Log results as they arrive. Exits when ``None`` is put into the queue.
    """
    while True:
        result = await log_queue.get()
        if result is None:
            log_queue.task_done()
            break
        log_result(result)
        if on_result is not None:
            on_result(result)
        log_queue.task_done()


async def run_batch_async(
        root: str,
        files: Sequence[str],
        strategy: OutputStrategy,
        max_workers: Optional[int] = None,
        quality: int = DEFAULT_QUALITY,
        on_result: Optional[ResultCallback] = None
) -> RunSummary:
    """
    Convert ``files`` with up to ``max_workers`` processes.

    Progress is logged in completion order; the returned summary lists
    results in selection order.

    Args:
        root (str): Scan root the relative paths refer to.
        files (Sequence[str]): Selected files.
        strategy (OutputStrategy): Where outputs are written.
        max_workers (int, optional): Pool size. Defaults to the CPU count.
        quality (int): WebP quality, 0-100.
        on_result (callable, optional): Called with each result as it completes.
    """
    summary = RunSummary(strategy=strategy)
    if not files:
        return summary

    max_workers = max_workers or os.cpu_count() or 1
    log.info(f"Using {max_workers} parallel processes for conversion")

    log_queue: asyncio.Queue = asyncio.Queue()
    log_task = asyncio.create_task(logger_worker(log_queue, on_result))

    try:
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            tasks = [process_image(executor, root, f, strategy, quality, log_queue) for f in files]
            results = await asyncio.gather(*tasks)
    finally:
        await log_queue.put(None)
        await log_task

    collisions = CollisionTracker()
    for result in results:
        summary.record(result)
        collisions.check(result)
    return summary
