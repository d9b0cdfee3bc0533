import os
import time
from typing import Tuple

import cv2
import numpy as np
from PIL import Image

from .models import DEFAULT_QUALITY, TARGET_EXTENSION, ConversionError


def _read_gif(image_path: str) -> np.ndarray:
    # OpenCV builds do not reliably ship a GIF decoder; take the first frame via Pillow.
    with Image.open(image_path) as gif:
        gif.seek(0)
        rgba = np.asarray(gif.convert("RGBA"))
    return cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)


def load_image(image_path: str) -> np.ndarray:
    """
    Decode a raster image into a BGR or BGRA array, keeping any alpha channel.

    Raises:
        ConversionError: If the file cannot be decoded.
    """
    name = os.path.basename(image_path)
    if image_path.lower().endswith(".gif"):
        try:
            return _read_gif(image_path)
        except (OSError, ValueError, Image.DecompressionBombError, cv2.error) as e:
            raise ConversionError(name, str(e)) from e

    # np.fromfile + imdecode copes with non-ASCII paths where cv2.imread does not.
    try:
        data = np.fromfile(image_path, dtype=np.uint8)
    except OSError as e:
        raise ConversionError(name, str(e)) from e
    try:
        img = cv2.imdecode(data, cv2.IMREAD_UNCHANGED) if data.size else None
    except cv2.error as e:
        raise ConversionError(name, str(e)) from e
    if img is None:
        raise ConversionError(name, "unreadable or unsupported image data")
    if img.dtype != np.uint8:
        # 16-bit PNGs; WebP is 8 bits per channel.
        img = (img / 257).astype(np.uint8)
    return img


def convert_image(
        image_path: str,
        output_path: str,
        quality: int = DEFAULT_QUALITY
) -> Tuple[int, int, float]:
    """
    Re-encode one raster image as WebP using OpenCV.

    The image is encoded in memory with cv2.imencode() and the bytes are then
    written to ``output_path``, whose directory must already exist.

    Returns:
        Tuple[int, int, float]: (original_size_bytes, new_size_bytes, elapsed_time_seconds)

    Raises:
        ConversionError: If the image cannot be read, encoded or written.
    """
    start_time = time.time()
    name = os.path.basename(image_path)

    img = load_image(image_path)
    orig_size = os.path.getsize(image_path)

    encode_params = [cv2.IMWRITE_WEBP_QUALITY, quality]
    try:
        success, encoded_img = cv2.imencode(TARGET_EXTENSION, img, encode_params)
    except cv2.error as e:
        raise ConversionError(name, str(e)) from e
    if not success:
        raise ConversionError(name, "WebP encoder rejected the image")

    try:
        with open(output_path, "wb") as f:
            encoded_img.tofile(f)
    except OSError as e:
        raise ConversionError(name, str(e)) from e

    new_size = os.path.getsize(output_path)
    elapsed = time.time() - start_time
    return orig_size, new_size, elapsed
