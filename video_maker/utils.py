"""Utility helpers for video creation."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError


def format_seconds(value: float) -> str:
    """Render a duration the way the encoder expects it.

    Whole numbers lose their fractional part (``4.0`` -> ``"4"``); anything
    else keeps full precision. A ``.`` is always the decimal separator.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def fit_geometry(
    src_w: int, src_h: int, box_w: int, box_h: int
) -> Tuple[int, int, int, int]:
    """Fit ``src`` inside ``box`` keeping aspect ratio, then centre it.

    Mirrors ``scale=W:H:force_original_aspect_ratio=decrease`` followed by
    ``pad=W:H:(ow-iw)/2:(oh-ih)/2``. Returns ``(scaled_w, scaled_h, pad_x,
    pad_y)``.
    """
    if src_w <= 0 or src_h <= 0:
        raise ValueError("source size must be positive")
    src_ratio = src_w / src_h
    box_ratio = box_w / box_h
    if src_ratio > box_ratio:
        w = box_w
        h = min(box_h, max(1, int(round(box_w / src_ratio))))
    else:
        h = box_h
        w = min(box_w, max(1, int(round(box_h * src_ratio))))
    return w, h, (box_w - w) // 2, (box_h - h) // 2


def probe_image_size(path: str) -> Optional[Tuple[int, int]]:
    """Return ``(width, height)`` of the image at *path* or ``None``."""
    try:
        with Image.open(path) as img:
            return img.size
    except (OSError, UnidentifiedImageError) as e:
        logging.warning("cannot read %s: %s", path, e)
        return None
