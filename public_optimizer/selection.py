"""
Selection Engine Module

Maps a scan result and a selection scope to the files a run will process.
"""

import os
from typing import Dict, List, Sequence

from .models import ROOT_DIR, AllFiles, ByFile, ByFolder, EmptySelectionError, SelectionScope


def containing_dir(path: str) -> str:
    """Directory identifier of a relative path, ``ROOT_DIR`` for root-level files."""
    return os.path.dirname(path) or ROOT_DIR


def list_folders(files: Sequence[str]) -> List[str]:
    """Distinct containing directories of ``files``, in first-seen order."""
    return list(group_by_folder(files))


def group_by_folder(files: Sequence[str]) -> Dict[str, List[str]]:
    groups: Dict[str, List[str]] = {}
    for f in files:
        groups.setdefault(containing_dir(f), []).append(f)
    return groups


def folder_label(folder: str, root_name: str = "public") -> str:
    return f"Root ({root_name}/)" if folder == ROOT_DIR else folder


def select_files(files: Sequence[str], scope: SelectionScope) -> List[str]:
    """
    Apply a selection scope to the scanned files.

    Order always follows ``files``. ``ByFile`` entries that were not part of
    the scan are ignored, as are duplicates.

    Raises:
        EmptySelectionError: If the scope selects nothing.
    """
    if isinstance(scope, AllFiles):
        selected = list(files)
    elif isinstance(scope, ByFolder):
        selected = [f for f in files if containing_dir(f) in scope.dirs]
    elif isinstance(scope, ByFile):
        wanted = set(scope.files)
        selected = [f for f in dict.fromkeys(files) if f in wanted]
    else:
        raise TypeError(f"Unknown selection scope: {scope!r}")

    if not selected:
        raise EmptySelectionError("The selection does not contain any files.")
    return selected
