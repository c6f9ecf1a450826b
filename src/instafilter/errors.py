"""Exception hierarchy shared across the Instafilter packages."""

from __future__ import annotations


class InstafilterError(Exception):
    """Base class for all errors raised by Instafilter."""


class NoImageSelectedError(InstafilterError):
    """Raised when an operation needs an image but none has been picked."""


class ProcessingFailedError(InstafilterError):
    """The filter engine produced no output for the current configuration."""


class UnknownFilterError(InstafilterError, KeyError):
    """Raised when a filter name is not part of the catalog."""

    def __str__(self) -> str:
        # ``KeyError`` quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class ImageDecodeError(InstafilterError):
    """An image file could not be opened or decoded."""


class SaveError(InstafilterError):
    """Writing a bitmap to the photo library failed."""


class SettingsInvalidError(InstafilterError):
    """The settings file exists but does not contain valid settings."""
