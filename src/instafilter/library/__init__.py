"""Photo library persistence."""

from __future__ import annotations

from .photo_library import MANIFEST_FILENAME, PhotoLibrary, SaveResult

__all__ = ["MANIFEST_FILENAME", "PhotoLibrary", "SaveResult"]
