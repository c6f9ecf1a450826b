"""Value types exchanged with the filter engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import numpy as np

from ..filter_catalog import FilterSpec, ParameterKind


@dataclass(frozen=True)
class FilterConfig:
    """Immutable description of one processing pass.

    ``parameters`` only contains the kinds the filter accepts, already mapped
    into their native ranges.
    """

    name: str
    parameters: Mapping[ParameterKind, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType({ParameterKind(k): float(v) for k, v in self.parameters.items()})
        object.__setattr__(self, "parameters", frozen)

    @classmethod
    def for_spec(cls, spec: FilterSpec, parameters: Mapping[ParameterKind, float]) -> "FilterConfig":
        return cls(spec.name, parameters)

    def value(self, kind: ParameterKind, default: float) -> float:
        return self.parameters.get(kind, default)


@dataclass(frozen=True)
class Extent:
    """Bounding rectangle of a rendered image in device independent units."""

    x: float
    y: float
    width: float
    height: float

    def pixel_size(self) -> tuple[int, int]:
        """Return ``(width, height)`` rounded to the nearest whole pixel."""

        return _round_half_up(self.width), _round_half_up(self.height)


def _round_half_up(value: float) -> int:
    return max(0, int(math.floor(value + 0.5)))


@dataclass(frozen=True)
class RenderedImage:
    """Engine output: float RGBA samples in ``[0, 1]`` plus their extent.

    Samples may stray outside the unit range; :func:`rasterize` clips them
    when producing the concrete bitmap.
    """

    pixels: np.ndarray
    extent: Extent

    @classmethod
    def from_pixels(cls, pixels: np.ndarray) -> "RenderedImage":
        height, width = pixels.shape[:2]
        return cls(pixels, Extent(0.0, 0.0, float(width), float(height)))


__all__ = ["Extent", "FilterConfig", "RenderedImage"]
