"""Static catalog of the filters offered in the filter menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import UnknownFilterError


class ParameterKind(str, Enum):
    """Adjustable inputs a filter may accept, one per UI slider."""

    INTENSITY = "intensity"
    RADIUS = "radius"
    SCALE = "scale"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Slider order in the UI and in persisted settings.
PARAMETER_KINDS = (ParameterKind.INTENSITY, ParameterKind.RADIUS, ParameterKind.SCALE)


@dataclass(frozen=True)
class FilterSpec:
    """A named filter and the parameters it understands."""

    name: str
    parameters: frozenset[ParameterKind]

    def accepts(self, kind: ParameterKind) -> bool:
        return kind in self.parameters


def _spec(name: str, *kinds: ParameterKind) -> FilterSpec:
    return FilterSpec(name, frozenset(kinds))


_CATALOG: tuple[FilterSpec, ...] = (
    _spec("Crystallize", ParameterKind.RADIUS),
    _spec("Edges", ParameterKind.INTENSITY),
    _spec("Gaussian Blur", ParameterKind.RADIUS),
    _spec("Pixellate", ParameterKind.SCALE),
    _spec("Sepia Tone", ParameterKind.INTENSITY),
    _spec("Unsharp Mask", ParameterKind.INTENSITY, ParameterKind.RADIUS),
    _spec("Vignette", ParameterKind.INTENSITY, ParameterKind.RADIUS),
)

_BY_NAME = {spec.name: spec for spec in _CATALOG}

DEFAULT_FILTER = _BY_NAME["Sepia Tone"]


def list_filters() -> tuple[FilterSpec, ...]:
    """Return every filter in menu order."""

    return _CATALOG


def filter_names() -> list[str]:
    return [spec.name for spec in _CATALOG]


def get_filter(name: str) -> FilterSpec:
    """Return the catalog entry called *name*.

    Raises :class:`UnknownFilterError` when the name is not in the catalog.
    """

    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownFilterError(f"Unknown filter: {name!r}") from None


__all__ = [
    "DEFAULT_FILTER",
    "FilterSpec",
    "PARAMETER_KINDS",
    "ParameterKind",
    "filter_names",
    "get_filter",
    "list_filters",
]
