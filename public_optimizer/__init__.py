"""
Public Image Optimizer Package

Scans a public folder for images, lets the user pick a subset and converts
the raster ones to WebP, sequentially or with a pool of worker processes.
Includes colored console logging and optional file logging.
"""

from .async_compressor import run_batch_async
from .batch import run_batch
from .compression import convert_image
from .paths import resolve_output_path
from .scanner import scan_images
from .selection import select_files

__all__ = [
    "convert_image",
    "resolve_output_path",
    "run_batch",
    "run_batch_async",
    "scan_images",
    "select_files",
]
