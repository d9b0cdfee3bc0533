"""
Data model shared by the scanner, selection engine, path resolver and runners.

Selection scopes, output strategies and conversion results are closed sets of
small frozen dataclasses; consumers dispatch on them with ``isinstance``.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple, Union

# Containing-directory identifier for files that sit directly in the scan root.
# No real subdirectory can be named ".", so it never collides.
ROOT_DIR = "."

RASTER_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif")
VECTOR_EXTENSIONS = (".svg",)
IMAGE_EXTENSIONS = RASTER_EXTENSIONS + VECTOR_EXTENSIONS

TARGET_EXTENSION = ".webp"
DEFAULT_QUALITY = 80
DEFAULT_SUFFIX = "_optimized"


class OptimizerError(Exception):
    """Base class for all optimizer errors."""


class RootNotFoundError(OptimizerError):
    """The scan root does not exist. Fatal for the whole run."""

    def __init__(self, root: str):
        super().__init__(f'Scan root "{root}" not found.')
        self.root = root


class EmptySelectionError(OptimizerError):
    """A selection scope matched no files."""


class ConversionError(OptimizerError):
    """A single file could not be converted."""

    def __init__(self, input_path: str, reason: str):
        super().__init__(f"Failed to optimize {input_path}: {reason}")
        self.input_path = input_path
        self.reason = reason


# --- Selection scopes ---

@dataclass(frozen=True)
class AllFiles:
    pass


@dataclass(frozen=True)
class ByFolder:
    dirs: FrozenSet[str]


@dataclass(frozen=True)
class ByFile:
    files: Tuple[str, ...]


SelectionScope = Union[AllFiles, ByFolder, ByFile]


# --- Output strategies ---

@dataclass(frozen=True)
class NewFolder:
    suffix: str = DEFAULT_SUFFIX


@dataclass(frozen=True)
class Overwrite:
    """Write the converted file next to its source. The source is kept."""


OutputStrategy = Union[NewFolder, Overwrite]


# --- Per-file results ---

@dataclass(frozen=True)
class Success:
    input_path: str
    output_path: str
    original_size: int = 0
    new_size: int = 0
    elapsed: float = 0.0


@dataclass(frozen=True)
class Failure:
    input_path: str
    reason: str


@dataclass(frozen=True)
class Skipped:
    input_path: str
    reason: str


ConversionResult = Union[Success, Failure, Skipped]


@dataclass
class RunSummary:
    """Aggregate outcome of one batch run."""

    strategy: OutputStrategy
    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    results: List[ConversionResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed + self.skipped

    def record(self, result: ConversionResult) -> None:
        if isinstance(result, Success):
            self.succeeded += 1
        elif isinstance(result, Failure):
            self.failed += 1
        elif isinstance(result, Skipped):
            self.skipped += 1
        else:
            raise TypeError(f"Unknown conversion result: {result!r}")
        self.results.append(result)


def is_vector(path: str) -> bool:
    return path.lower().endswith(VECTOR_EXTENSIONS)
