"""
File Scanner Module

Walks a scan root and collects image files, returned as paths relative to
the root in a stable, sorted order.
"""

import os
from typing import List, Sequence

from .logger_setup import setup_logger
from .models import IMAGE_EXTENSIONS, RootNotFoundError

log = setup_logger()


def scan_images(root: str, extensions: Sequence[str] = IMAGE_EXTENSIONS) -> List[str]:
    """
    Collect image files under ``root``.

    Args:
        root (str): Directory to scan.
        extensions (Sequence[str]): Recognized extensions, matched case-insensitively.

    Returns:
        List[str]: Paths relative to ``root``, sorted per directory level.

    Raises:
        RootNotFoundError: If ``root`` is not an existing directory.

    Notes:
        - Symbolic links to directories are not followed.
        - Hidden files and directories (leading dot) are skipped.
        - Directories without matching files contribute nothing.
    """
    if not os.path.isdir(root):
        raise RootNotFoundError(root)

    suffixes = tuple(ext.lower() for ext in extensions)
    found = []
    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        rel_dir = os.path.relpath(current, root)
        for name in sorted(filenames):
            if name.startswith(".") or not name.lower().endswith(suffixes):
                continue
            found.append(name if rel_dir == os.curdir else os.path.join(rel_dir, name))

    log.debug(f"Scanned {root}: {len(found)} image(s)")
    return found
