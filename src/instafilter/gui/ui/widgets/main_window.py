"""Main application window."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, Optional

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMenu,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ....core.filter_catalog import PARAMETER_KINDS, ParameterKind, filter_names
from ....core.parameter_mapper import map_parameter
from ..controllers.filter_controller import FilterController
from ..image_utils import pil_to_qimage
from .dialogs import select_image_file, show_error, show_information
from .image_area import ImageArea
from .parameter_slider import ParameterSlider


def _native_formatter(kind: ParameterKind) -> Callable[[float], str]:
    if kind is ParameterKind.INTENSITY:
        return lambda value: f"{map_parameter(kind, value):.2f}"
    return lambda value: f"{map_parameter(kind, value):.1f}"


class MainWindow(QMainWindow):
    """Preview, parameter sliders and the filter/save buttons."""

    def __init__(self, controller: FilterController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._sliders: Dict[ParameterKind, ParameterSlider] = {}
        self.setWindowTitle("Instafilter")
        self.resize(720, 820)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.image_area = ImageArea(central)
        self.image_area.clicked.connect(self._handle_pick_image)
        layout.addWidget(self.image_area, 1)

        sliders = controller.pipeline.sliders
        for kind in PARAMETER_KINDS:
            slider = ParameterSlider(
                kind.label,
                central,
                initial=sliders.get(kind),
                formatter=_native_formatter(kind),
            )
            slider.valueChanged.connect(partial(self._controller.set_slider, kind))
            layout.addWidget(slider)
            self._sliders[kind] = slider

        buttons = QHBoxLayout()
        self.filter_button = QPushButton("Change Filter", central)
        self.filter_menu = self._build_filter_menu()
        self.filter_button.clicked.connect(self._show_filter_menu)
        self.filter_label = QLabel(controller.pipeline.current_filter.name, central)
        self.save_button = QPushButton("Save", central)
        self.save_button.clicked.connect(self._handle_save_clicked)
        buttons.addWidget(self.filter_button)
        buttons.addWidget(self.filter_label)
        buttons.addStretch(1)
        buttons.addWidget(self.save_button)
        layout.addLayout(buttons)

        self.setCentralWidget(central)

        controller.imageChanged.connect(self._handle_image_changed)
        controller.filterChanged.connect(self.filter_label.setText)
        controller.parametersChanged.connect(self._apply_enabled_parameters)
        controller.processingFailed.connect(self._handle_processing_failed)
        controller.loadFailed.connect(self._handle_load_failed)
        controller.saveBlocked.connect(self._handle_save_blocked)
        controller.saveFinished.connect(self._handle_save_finished)

        self._apply_enabled_parameters(controller.pipeline.enabled_parameters())

    @property
    def controller(self) -> FilterController:
        return self._controller

    def slider(self, kind: ParameterKind) -> ParameterSlider:
        return self._sliders[kind]

    # ------------------------------------------------------------------
    def _build_filter_menu(self) -> QMenu:
        menu = QMenu(self)
        for name in filter_names():
            action = menu.addAction(name)
            # ``triggered`` carries a ``checked`` flag the controller does not take.
            action.triggered.connect(lambda _checked=False, n=name: self._controller.select_filter(n))
        menu.addSeparator()
        cancel = menu.addAction("Cancel")
        cancel.triggered.connect(lambda _checked=False: self._controller.select_filter(None))
        return menu

    @Slot()
    def _handle_save_clicked(self) -> None:
        self._controller.save()

    @Slot()
    def _show_filter_menu(self) -> None:
        anchor = self.filter_button.mapToGlobal(self.filter_button.rect().bottomLeft())
        self.filter_menu.popup(anchor)

    @Slot()
    def _handle_pick_image(self) -> None:
        path = select_image_file(self)
        if path is not None:
            self._controller.open_image(path)

    def _apply_enabled_parameters(self, enabled) -> None:
        for kind, slider in self._sliders.items():
            slider.setEnabled(kind in enabled)

    def _handle_image_changed(self, image) -> None:
        self.image_area.set_image(pil_to_qimage(image))
        self.statusBar().clearMessage()

    def _handle_processing_failed(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def _handle_load_failed(self, message: str) -> None:
        show_error(self, message, title="Open Error")

    def _handle_save_blocked(self, message: str) -> None:
        show_error(self, message, title="Save Error")

    def _handle_save_finished(self, ok: bool, message: str) -> None:
        if ok:
            show_information(self, message, title="Saved")
        else:
            show_error(self, message, title="Save Error")


__all__ = ["MainWindow"]
