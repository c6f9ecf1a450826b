"""Reusable Qt widgets for the Instafilter GUI."""

from .image_area import ImageArea
from .main_window import MainWindow
from .parameter_slider import ParameterSlider

__all__ = ["ImageArea", "MainWindow", "ParameterSlider"]
