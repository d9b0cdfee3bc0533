"""
Path Resolver Module

Computes where the converted version of a scanned file is written.
"""

import os

from .models import TARGET_EXTENSION, NewFolder, Overwrite, OutputStrategy


def output_dir_for(rel_path: str, strategy: OutputStrategy) -> str:
    """
    Output directory relative to the scan root.

    ``Overwrite`` keeps the source directory. ``NewFolder`` appends the suffix
    to the source directory name, so ``images/a.jpg`` lands in
    ``images_optimized`` and a root-level file lands in a directory named by
    the suffix alone.
    """
    rel_dir = os.path.dirname(rel_path)
    if isinstance(strategy, Overwrite):
        return rel_dir
    if isinstance(strategy, NewFolder):
        return f"{rel_dir}{strategy.suffix}" if rel_dir else strategy.suffix
    raise TypeError(f"Unknown output strategy: {strategy!r}")


def output_name_for(rel_path: str, target_extension: str = TARGET_EXTENSION) -> str:
    base = os.path.splitext(os.path.basename(rel_path))[0]
    return base + target_extension


def resolve_output_path(
        root: str,
        rel_path: str,
        strategy: OutputStrategy,
        target_extension: str = TARGET_EXTENSION
) -> str:
    """
    Absolute output path for ``rel_path``, creating its directory if needed.

    Raises:
        OSError: If the output directory cannot be created.
    """
    out_dir = os.path.abspath(os.path.join(root, output_dir_for(rel_path, strategy)))
    os.makedirs(out_dir, exist_ok=True)
    return os.path.join(out_dir, output_name_for(rel_path, target_extension))
