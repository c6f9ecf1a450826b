"""Controllers connecting the processing pipeline to the widgets."""

from .filter_controller import FilterController

__all__ = ["FilterController"]
