"""Utility helpers shared by the core, library and GUI layers."""
