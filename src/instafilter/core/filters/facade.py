"""Entry points of the filter engine.

:func:`apply` is stateless: everything a pass needs travels in the
:class:`FilterConfig`, so two calls with equal arguments always produce the
same pixels.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np
from PIL import Image

from ..filter_catalog import ParameterKind
from . import algorithms
from .models import FilterConfig, RenderedImage
from .pillow_executor import gaussian_blur, unsharp_mask
from .utils import array_to_image, image_to_array

_LOGGER = logging.getLogger(__name__)

_INTENSITY = ParameterKind.INTENSITY
_RADIUS = ParameterKind.RADIUS
_SCALE = ParameterKind.SCALE

_Executor = Callable[[np.ndarray, FilterConfig], np.ndarray]

# Fallback values used when a config omits a parameter the filter reads.
_EXECUTORS: dict[str, _Executor] = {
    "Crystallize": lambda px, cfg: algorithms.crystallize(px, cfg.value(_RADIUS, 20.0)),
    "Edges": lambda px, cfg: algorithms.edges(px, cfg.value(_INTENSITY, 1.0)),
    "Gaussian Blur": lambda px, cfg: gaussian_blur(px, cfg.value(_RADIUS, 10.0)),
    "Pixellate": lambda px, cfg: algorithms.pixellate(px, cfg.value(_SCALE, 8.0)),
    "Sepia Tone": lambda px, cfg: algorithms.sepia_tone(px, cfg.value(_INTENSITY, 1.0)),
    "Unsharp Mask": lambda px, cfg: unsharp_mask(
        px, cfg.value(_INTENSITY, 0.5), cfg.value(_RADIUS, 2.5)
    ),
    "Vignette": lambda px, cfg: algorithms.vignette(
        px, cfg.value(_INTENSITY, 0.0), cfg.value(_RADIUS, 1.0)
    ),
}


def supported_filters() -> list[str]:
    return list(_EXECUTORS)


def apply(config: FilterConfig, image: Optional[Image.Image]) -> Optional[RenderedImage]:
    """Run the filter described by *config* over *image*.

    Returns ``None`` when no output can be produced: the image is missing,
    empty or undecodable, the filter is unknown, or the result contains
    non-finite samples.
    """

    if image is None or image.width <= 0 or image.height <= 0:
        return None
    executor = _EXECUTORS.get(config.name)
    if executor is None:
        _LOGGER.warning("No executor registered for filter %r", config.name)
        return None

    try:
        pixels = image_to_array(image)
    except (OSError, ValueError) as exc:
        _LOGGER.warning("Could not read input image for %s: %s", config.name, exc)
        return None

    try:
        output = executor(pixels, config)
    except (ValueError, MemoryError, FloatingPointError):
        _LOGGER.exception("Filter %s failed", config.name)
        return None

    if not np.isfinite(output).all():
        _LOGGER.warning("Filter %s produced non-finite samples", config.name)
        return None
    return RenderedImage.from_pixels(output)


def rasterize(rendered: RenderedImage) -> Image.Image:
    """Convert *rendered* into a concrete RGBA bitmap.

    The bitmap measures the rendered extent rounded to the nearest pixel.
    When that differs from the sample grid the samples are resampled to fit.
    """

    width, height = rendered.extent.pixel_size()
    bitmap = array_to_image(rendered.pixels)
    if bitmap.size != (width, height):
        bitmap = bitmap.resize((max(1, width), max(1, height)), Image.Resampling.BILINEAR)
    return bitmap


__all__ = ["apply", "rasterize", "supported_filters"]
