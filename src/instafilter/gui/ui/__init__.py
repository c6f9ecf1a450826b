"""Widgets, controllers and helpers of the main window."""
