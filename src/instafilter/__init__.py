"""Instafilter: pick a photo, apply a filter, save the result."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
