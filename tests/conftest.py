import os
import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the sources importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt widgets need a platform plugin even when nothing is shown.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def _gradient(width: int, height: int) -> Image.Image:
    xs = np.linspace(0, 255, width, dtype=np.float32)[None, :]
    ys = np.linspace(0, 255, height, dtype=np.float32)[:, None]
    red = np.broadcast_to(xs, (height, width))
    green = np.broadcast_to(ys, (height, width))
    blue = (red + green) / 2.0
    alpha = np.full((height, width), 255.0, dtype=np.float32)
    data = np.stack([red, green, blue, alpha], axis=-1).astype(np.uint8)
    return Image.fromarray(data)


@pytest.fixture
def gradient_image() -> Image.Image:
    """A 48x32 RGBA gradient with distinct values in every channel."""

    return _gradient(48, 32)


@pytest.fixture
def make_gradient():
    return _gradient


@pytest.fixture
def checkerboard_image() -> Image.Image:
    """A 40x40 black and white checkerboard with 8 pixel squares."""

    ys, xs = np.mgrid[0:40, 0:40]
    on = ((ys // 8 + xs // 8) % 2).astype(np.uint8) * 255
    data = np.stack([on, on, on, np.full_like(on, 255)], axis=-1)
    return Image.fromarray(data)


@pytest.fixture
def image_file(tmp_path, gradient_image) -> Path:
    path = tmp_path / "picked.png"
    gradient_image.save(path)
    return path


@pytest.fixture(scope="session")
def qt_app():
    """Shared ``QApplication``; Qt allows only one per process."""

    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
