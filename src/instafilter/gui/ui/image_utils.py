"""Bridge Pillow bitmaps into Qt images."""

from __future__ import annotations

from PIL import Image
from PIL.ImageQt import ImageQt
from PySide6.QtGui import QImage


def pil_to_qimage(image: Image.Image) -> QImage:
    """Return a detached ARGB32 :class:`QImage` holding *image*'s pixels."""

    if image.mode != "RGBA":
        image = image.convert("RGBA")
    # ``ImageQt`` wraps a buffer owned by the Pillow image; copying detaches the
    # QImage so it stays valid after the Pillow object is collected.
    qt_image = QImage(ImageQt(image)).copy()
    if qt_image.format() != QImage.Format.Format_ARGB32:
        qt_image = qt_image.convertToFormat(QImage.Format.Format_ARGB32)
    return qt_image


__all__ = ["pil_to_qimage"]
