"""Conversions between Pillow bitmaps and the engine's float arrays."""

from __future__ import annotations

import numpy as np
from PIL import Image


def image_to_array(image: Image.Image) -> np.ndarray:
    """Return *image* as a ``height x width x 4`` float32 RGBA array in ``[0, 1]``."""

    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return np.asarray(image, dtype=np.float32) / np.float32(255.0)


def array_to_image(pixels: np.ndarray) -> Image.Image:
    """Quantise a float RGBA array back into an 8-bit Pillow image."""

    clipped = np.clip(pixels, 0.0, 1.0)
    data = np.rint(clipped * np.float32(255.0)).astype(np.uint8)
    # A contiguous ``uint8`` array with four channels is read back as RGBA.
    return Image.fromarray(np.ascontiguousarray(data))


__all__ = ["array_to_image", "image_to_array"]
