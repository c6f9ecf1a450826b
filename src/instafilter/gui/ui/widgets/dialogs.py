"""Reusable dialog helpers for the desktop UI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tif *.tiff *.webp)"


def select_image_file(parent: QWidget, caption: str = "Select a picture", start: Optional[Path] = None) -> Optional[Path]:
    """Return an image file chosen by the user or ``None`` when cancelled."""

    directory = str(start) if start is not None else ""
    path, _ = QFileDialog.getOpenFileName(parent, caption, directory, IMAGE_FILE_FILTER)
    if not path:
        return None
    return Path(path)


def show_error(parent: QWidget, message: str, *, title: str = "Instafilter") -> None:
    """Display a blocking error message."""

    box = QMessageBox(QMessageBox.Icon.Critical, title, message, QMessageBox.StandardButton.Ok, parent)
    box.exec()


def show_information(parent: QWidget, message: str, *, title: str = "Instafilter") -> None:
    """Display an informational message box."""

    box = QMessageBox(QMessageBox.Icon.Information, title, message, QMessageBox.StandardButton.Ok, parent)
    box.exec()
