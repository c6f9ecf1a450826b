"""Filter engine used by the processing pipeline.

The package separates concerns the same way throughout:
- algorithms: vectorised NumPy filters
- pillow_executor: filters backed by Pillow's native blur, plus decoding
- facade: the stateless ``apply``/``rasterize`` entry points
"""

from __future__ import annotations

from .facade import apply, rasterize, supported_filters
from .models import Extent, FilterConfig, RenderedImage
from .pillow_executor import load_image

__all__ = [
    "Extent",
    "FilterConfig",
    "RenderedImage",
    "apply",
    "load_image",
    "rasterize",
    "supported_filters",
]
