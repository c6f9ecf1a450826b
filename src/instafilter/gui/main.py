"""Application entry point for the desktop UI."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication

from ..core.filter_catalog import DEFAULT_FILTER, get_filter
from ..core.pipeline import FilterPipeline, SliderState
from ..errors import SettingsInvalidError, UnknownFilterError
from ..library import PhotoLibrary
from ..settings import SettingsManager
from ..utils.logging import get_logger
from .ui.controllers import FilterController
from .ui.widgets import MainWindow


def build_pipeline(settings: SettingsManager) -> FilterPipeline:
    """Create the session pipeline seeded from the persisted defaults."""

    logger = get_logger()
    name = settings.get("ui.default_filter", DEFAULT_FILTER.name)
    try:
        spec = get_filter(str(name))
    except UnknownFilterError:
        logger.warning("Unknown default filter %r; using %s", name, DEFAULT_FILTER.name)
        spec = DEFAULT_FILTER
    sliders = SliderState(
        intensity=settings.slider_default("intensity"),
        radius=settings.slider_default("radius"),
        scale=settings.slider_default("scale"),
    )
    return FilterPipeline(spec, sliders)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Launch the Instafilter window."""

    args = list(sys.argv if argv is None else argv)
    settings = SettingsManager()
    logger = get_logger()
    try:
        settings.load()
    except SettingsInvalidError as exc:
        logger.error("%s; continuing with default settings", exc)
    logger = get_logger(settings.get("logging.level", "INFO"))

    app = QApplication.instance() or QApplication(args)
    library = PhotoLibrary(settings.library_root(), settings.get("library.album", "Instafilter"))
    controller = FilterController(build_pipeline(settings), library)
    window = MainWindow(controller)
    window.show()

    if len(args) > 1:
        controller.open_image(Path(args[1]))

    logger.info("Instafilter started; saving into %s", library.album_dir)
    return app.exec()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
