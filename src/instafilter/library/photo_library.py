"""Write processed bitmaps into an album folder on disk.

Each album is a directory holding PNG files plus a manifest that lists the
saved assets in the order they were written.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from PIL import Image

from ..errors import InstafilterError, NoImageSelectedError, SaveError
from ..utils.jsonio import atomic_write_bytes, read_json, write_json

_LOGGER = logging.getLogger(__name__)

MANIFEST_FILENAME = ".instafilter.album.json"


@dataclass(frozen=True)
class SaveResult:
    """Outcome reported back to the UI after a save attempt."""

    ok: bool
    message: str
    path: Optional[Path] = None


class PhotoLibrary:
    """Album backed by a directory under *root*."""

    def __init__(self, root: Path, album: str = "Instafilter") -> None:
        self._root = Path(root)
        self._album = album

    @property
    def album_dir(self) -> Path:
        return self._root / self._album

    @property
    def manifest_path(self) -> Path:
        return self.album_dir / MANIFEST_FILENAME

    def save(self, bitmap: Optional[Image.Image]) -> SaveResult:
        """Store *bitmap* in the album.

        Raises :class:`NoImageSelectedError` when *bitmap* is ``None``.  Write
        failures do not raise; they come back as an unsuccessful
        :class:`SaveResult` whose message is meant to be shown verbatim.
        """

        if bitmap is None:
            raise NoImageSelectedError("No image selected")
        try:
            path = self._write(bitmap)
        except SaveError as exc:
            _LOGGER.error("Saving to album %s failed: %s", self._album, exc)
            return SaveResult(False, str(exc))
        _LOGGER.info("Saved %s", path)
        return SaveResult(True, f"Saved to {self._album}", path)

    def list_assets(self) -> list[dict[str, Any]]:
        """Return the manifest entries in the order they were saved."""

        if not self.manifest_path.exists():
            return []
        manifest = read_json(self.manifest_path, error=SaveError)
        assets = manifest.get("assets", [])
        return list(assets) if isinstance(assets, list) else []

    # ------------------------------------------------------------------
    def _write(self, bitmap: Image.Image) -> Path:
        buffer = io.BytesIO()
        try:
            bitmap.save(buffer, format="PNG")
        except (OSError, ValueError) as exc:
            raise SaveError(f"Could not encode image: {exc}") from exc

        now = datetime.now(timezone.utc)
        try:
            self.album_dir.mkdir(parents=True, exist_ok=True)
            path = self._unique_path(now)
            atomic_write_bytes(path, buffer.getvalue())
            try:
                self._record(path, bitmap, now)
            except OSError:
                # An asset missing from the manifest must not linger in the album.
                path.unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise SaveError(f"Could not write to album {self._album}: {exc.strerror or exc}") from exc
        return path

    def _unique_path(self, now: datetime) -> Path:
        stem = now.strftime("IMG_%Y%m%d_%H%M%S")
        candidate = self.album_dir / f"{stem}.png"
        counter = 1
        while candidate.exists():
            candidate = self.album_dir / f"{stem}_{counter}.png"
            counter += 1
        return candidate

    def _record(self, path: Path, bitmap: Image.Image, now: datetime) -> None:
        manifest: dict[str, Any] = {"album": self._album, "assets": []}
        if self.manifest_path.exists():
            try:
                manifest = read_json(self.manifest_path, error=SaveError)
            except InstafilterError:
                # A corrupt manifest must not block saving; start a fresh one.
                _LOGGER.warning("Rebuilding unreadable manifest %s", self.manifest_path)
                manifest = {"album": self._album, "assets": []}
        assets = manifest.get("assets")
        if not isinstance(assets, list):
            _LOGGER.warning("Rebuilding asset list of manifest %s", self.manifest_path)
            assets = []
            manifest["assets"] = assets
        assets.append(
            {
                "file": path.name,
                "width": bitmap.width,
                "height": bitmap.height,
                "saved_at": now.isoformat(),
            }
        )
        write_json(self.manifest_path, manifest)


__all__ = ["MANIFEST_FILENAME", "PhotoLibrary", "SaveResult"]
