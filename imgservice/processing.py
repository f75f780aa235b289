"""Image operations: grayscale conversion, resizing and box blur."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from PIL import Image, ImageFilter, UnidentifiedImageError

log = logging.getLogger(__name__)

PathLike = str | os.PathLike


class ImageProcessingError(Exception):
    """Raised when an image cannot be read, transformed or written."""


def _load(input_path: PathLike) -> Image.Image:
    try:
        with Image.open(input_path) as img:
            img.load()
            return img.convert("RGB")
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        raise ImageProcessingError(f"could not read input image: {input_path}") from exc


def _save(img: Image.Image, output_path: PathLike) -> Path:
    try:
        img.save(output_path)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageProcessingError(f"could not write output image: {output_path}") from exc
    log.info("image processed and saved to %s", output_path)
    return Path(output_path)


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ImageProcessingError(f"invalid size {width}x{height}")


def process_gray(input_path: PathLike, output_path: PathLike) -> Path:
    """Write a grayscale copy of the input image; return the output path."""
    img = _load(input_path)
    return _save(img.convert("L"), output_path)


def process_resize(input_path: PathLike, output_path: PathLike, width: int, height: int) -> Path:
    """Write the input image resized to ``width`` x ``height``; return the output path."""
    _check_size(width, height)
    img = _load(input_path)
    return _save(img.resize((width, height), Image.BILINEAR), output_path)


def process_blur(input_path: PathLike, output_path: PathLike, width: int, height: int) -> Path:
    """Write the input image box-blurred with a ``width`` x ``height`` kernel."""
    _check_size(width, height)
    img = _load(input_path)
    radius = ((width - 1) / 2, (height - 1) / 2)
    return _save(img.filter(ImageFilter.BoxBlur(radius)), output_path)