"""
Interactive optimization workflow.

Scan -> choose selection -> choose output strategy -> confirm -> convert.
"""

import asyncio
from typing import List, Optional

from .async_compressor import run_batch_async
from .batch import run_batch
from .logger_setup import setup_logger
from .models import (
    AllFiles,
    ByFile,
    ByFolder,
    EmptySelectionError,
    NewFolder,
    Overwrite,
    OutputStrategy,
    RunSummary,
    SelectionScope,
)
from .prompts import Prompter
from .scanner import scan_images
from .selection import folder_label, list_folders, select_files
from .settings import OptimizerSettings

log = setup_logger()


def ask_scope(prompter: Prompter, files: List[str], root_name: str) -> SelectionScope:
    mode = prompter.choose(
        "How would you like to select images?",
        [
            ("Optimize All Images", "all"),
            ("Select by Folder", "folder"),
            ("Select Individual Files", "file"),
        ],
    )
    if mode == "all":
        return AllFiles()
    if mode == "folder":
        dirs = prompter.choose_many(
            "Select folders to optimize:",
            [(folder_label(d, root_name), d) for d in list_folders(files)],
            "You must choose at least one folder.",
        )
        return ByFolder(frozenset(dirs))
    chosen = prompter.choose_many(
        "Select files to optimize:",
        [(f, f) for f in files],
        "You must choose at least one file.",
    )
    return ByFile(tuple(chosen))


def ask_strategy(prompter: Prompter, default_suffix: str) -> OutputStrategy:
    strategy = prompter.choose(
        "Choose optimization strategy:",
        [
            (f"Create new folder with suffix (e.g., images{default_suffix})", "new_folder"),
            ("Replace original files (Overwrite)", "overwrite"),
        ],
    )
    if strategy == "overwrite":
        return Overwrite()
    return NewFolder(prompter.ask_text("Enter folder suffix", default=default_suffix))


def execute(root: str, files: List[str], strategy: OutputStrategy, settings: OptimizerSettings) -> RunSummary:
    if settings.workers > 1:
        return asyncio.run(run_batch_async(root, files, strategy, settings.workers, settings.quality))
    return run_batch(root, files, strategy, settings.quality)


def report(summary: RunSummary) -> None:
    log.info("Optimization Complete!")
    log.info(f"  Processed: {summary.succeeded}")
    if summary.failed:
        log.error(f"  Failed:    {summary.failed}")
    if summary.skipped:
        log.warning(f"  Skipped:   {summary.skipped} (vector images are not converted)")
    if isinstance(summary.strategy, Overwrite):
        log.warning("Note: Optimized WebP files were created alongside originals.")


def run_interactive(
        root: str,
        prompter: Prompter,
        settings: Optional[OptimizerSettings] = None
) -> Optional[RunSummary]:
    """
    Drive one interactive run against ``root``.

    Returns:
        RunSummary, or None when there was nothing to do or the user cancelled.

    Raises:
        RootNotFoundError: If ``root`` does not exist.
    """
    settings = settings or OptimizerSettings()

    log.info("Scanning for images...")
    files = scan_images(root)
    if not files:
        log.warning("No images found to optimize.")
        return None
    log.info(f"Found {len(files)} images.")

    while True:
        scope = ask_scope(prompter, files, settings.root_name)
        try:
            selected = select_files(files, scope)
            break
        except EmptySelectionError as e:
            log.warning(str(e))
    log.info(f"Selected {len(selected)} files for optimization.")

    strategy = ask_strategy(prompter, settings.default_suffix)

    if not prompter.confirm("Ready to start?", default=True):
        log.warning("Operation cancelled.")
        return None

    summary = execute(root, selected, strategy, settings)
    report(summary)
    return summary
