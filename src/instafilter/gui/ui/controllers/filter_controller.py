"""Controller that drives the filter pipeline from UI events."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ....core.filter_catalog import ParameterKind
from ....core.filters import load_image
from ....core.pipeline import FilterPipeline, PipelineStatus, ProcessingResult
from ....errors import ImageDecodeError
from ....library import PhotoLibrary

_LOGGER = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "No image selected"


class FilterController(QObject):
    """Translate user actions into pipeline transitions and report results.

    The controller holds no copy of the pipeline state.  It listens to every
    processing pass and re-broadcasts the outcome as Qt signals.
    """

    imageChanged = Signal(object)
    """Emitted with the Pillow bitmap to display after a successful pass."""

    filterChanged = Signal(str)
    """Emitted with the name of the newly active filter."""

    parametersChanged = Signal(object)
    """Emitted with the ``frozenset`` of slider kinds the active filter uses."""

    processingFailed = Signal(str)
    """Emitted when a pass produced no output; the preview keeps the last frame."""

    loadFailed = Signal(str)
    """Emitted when the picked file could not be decoded."""

    saveBlocked = Signal(str)
    """Emitted when Save is requested but there is nothing to save."""

    saveFinished = Signal(bool, str)
    """Emitted with the success flag and the library's message."""

    def __init__(
        self,
        pipeline: FilterPipeline,
        library: PhotoLibrary,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._pipeline = pipeline
        self._library = library
        self._unsubscribe = pipeline.subscribe(self._handle_processed)

    @property
    def pipeline(self) -> FilterPipeline:
        return self._pipeline

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def open_image(self, path: Path | str) -> bool:
        """Decode *path* and load it into the pipeline."""

        try:
            image = load_image(path)
        except ImageDecodeError as exc:
            _LOGGER.warning("%s", exc)
            self.loadFailed.emit(str(exc))
            return False
        self._pipeline.set_input_image(image)
        return True

    def select_filter(self, name: Optional[str]) -> None:
        """Switch to the filter called *name*; ``None`` means the menu was cancelled."""

        if name is None:
            return
        self._pipeline.select_filter(name)
        spec = self._pipeline.current_filter
        self.filterChanged.emit(spec.name)
        self.parametersChanged.emit(spec.parameters)

    def set_slider(self, kind: ParameterKind, value: float) -> None:
        self._pipeline.set_slider(kind, value)

    def save(self) -> None:
        """Forward the current output to the photo library."""

        if self._pipeline.status is PipelineStatus.EMPTY:
            self.saveBlocked.emit(NO_IMAGE_MESSAGE)
            return
        output = self._pipeline.output_image
        if output is None:
            self.saveBlocked.emit("The current filter could not process this image")
            return
        result = self._library.save(output)
        self.saveFinished.emit(result.ok, result.message)

    def shutdown(self) -> None:
        self._unsubscribe()

    # ------------------------------------------------------------------
    # Pipeline callbacks
    # ------------------------------------------------------------------
    def _handle_processed(self, result: ProcessingResult) -> None:
        if result.ok:
            self.imageChanged.emit(result.output)
        elif result.error is not None:
            self.processingFailed.emit(str(result.error))


__all__ = ["FilterController", "NO_IMAGE_MESSAGE"]
