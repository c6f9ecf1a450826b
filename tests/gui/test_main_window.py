"""Offscreen checks of the main window's slider and filter wiring."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6.QtWidgets")

from instafilter.core.filter_catalog import ParameterKind  # noqa: E402
from instafilter.core.pipeline import FilterPipeline  # noqa: E402
from instafilter.gui.ui.controllers import FilterController  # noqa: E402
from instafilter.gui.ui.widgets import MainWindow  # noqa: E402
from instafilter.library import PhotoLibrary  # noqa: E402


@pytest.fixture
def window(qt_app, tmp_path):
    controller = FilterController(FilterPipeline(), PhotoLibrary(tmp_path))
    win = MainWindow(controller)
    yield win
    controller.shutdown()
    win.deleteLater()


def _enabled(win: MainWindow) -> dict[ParameterKind, bool]:
    return {kind: win.slider(kind).isEnabled() for kind in ParameterKind}


def test_initial_filter_enables_only_intensity(window) -> None:
    assert _enabled(window) == {
        ParameterKind.INTENSITY: True,
        ParameterKind.RADIUS: False,
        ParameterKind.SCALE: False,
    }
    assert window.filter_label.text() == "Sepia Tone"


def test_filter_menu_lists_filters_and_cancel(window) -> None:
    labels = [action.text() for action in window.filter_menu.actions() if not action.isSeparator()]

    assert labels == [
        "Crystallize",
        "Edges",
        "Gaussian Blur",
        "Pixellate",
        "Sepia Tone",
        "Unsharp Mask",
        "Vignette",
        "Cancel",
    ]


def test_choosing_a_filter_toggles_sliders(window) -> None:
    actions = {action.text(): action for action in window.filter_menu.actions()}

    actions["Unsharp Mask"].trigger()
    assert _enabled(window) == {
        ParameterKind.INTENSITY: True,
        ParameterKind.RADIUS: True,
        ParameterKind.SCALE: False,
    }
    assert window.filter_label.text() == "Unsharp Mask"

    actions["Cancel"].trigger()
    assert window.filter_label.text() == "Unsharp Mask"


def test_slider_moves_update_pipeline(window) -> None:
    window.slider(ParameterKind.SCALE).setValue(0.75)

    assert window.controller.pipeline.sliders.scale == 0.75


def test_loaded_image_is_shown(window, image_file) -> None:
    window.controller.open_image(image_file)

    assert window.image_area.has_image()
