"""Pillow backed filters and image decoding.

Gaussian blurs run through Pillow's C implementation, which approximates the
kernel with repeated box blurs and therefore costs the same for any radius.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, ImageFilter, UnidentifiedImageError

from ...errors import ImageDecodeError
from .utils import array_to_image, image_to_array


def load_image(path: Path | str) -> Image.Image:
    """Decode the image stored at *path* into an RGBA bitmap.

    Raises :class:`ImageDecodeError` when the file is missing, Pillow cannot
    identify its format, or the image exceeds Pillow's pixel limit.
    """

    try:
        with Image.open(path) as handle:
            handle.load()
            return handle.convert("RGBA")
    except FileNotFoundError as exc:
        raise ImageDecodeError(f"Image file not found: {path}") from exc
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageDecodeError(f"Could not decode image {path}: {exc}") from exc


def gaussian_blur(pixels: np.ndarray, radius: float) -> np.ndarray:
    """Blur *pixels* with a Gaussian whose standard deviation is *radius*."""

    sigma = max(0.0, float(radius))
    if sigma <= 0.0:
        return pixels.copy()
    blurred = array_to_image(pixels).filter(ImageFilter.GaussianBlur(sigma))
    return image_to_array(blurred)


def unsharp_mask(pixels: np.ndarray, intensity: float, radius: float) -> np.ndarray:
    """Sharpen by adding back the difference to a blurred copy."""

    blurred = gaussian_blur(pixels, radius)
    result = pixels.copy()
    detail = pixels[..., :3] - blurred[..., :3]
    result[..., :3] = pixels[..., :3] + detail * np.float32(intensity)
    return result


__all__ = ["gaussian_blur", "load_image", "unsharp_mask"]
