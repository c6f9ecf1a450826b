"""Translate normalised slider values into native filter parameters."""

from __future__ import annotations

from typing import Mapping

from .filter_catalog import PARAMETER_KINDS, FilterSpec, ParameterKind

# Native value reached when the slider sits at 1.0.  Each factor matches the
# useful dynamic range of the engine parameter it drives.
SCALE_FACTORS: Mapping[ParameterKind, float] = {
    ParameterKind.INTENSITY: 1.0,
    ParameterKind.RADIUS: 200.0,
    ParameterKind.SCALE: 10.0,
}


def map_parameter(kind: ParameterKind, normalised: float) -> float:
    """Return the native value of *kind* for a slider at *normalised*.

    Values outside ``[0, 1]`` are passed through unclamped.
    """

    value = float(normalised)
    if kind is ParameterKind.INTENSITY:
        return value
    return value * SCALE_FACTORS[kind]


def native_range(kind: ParameterKind) -> tuple[float, float]:
    """Return the ``(minimum, maximum)`` native range covered by the slider."""

    return 0.0, SCALE_FACTORS[kind]


def resolve_parameters(
    spec: FilterSpec,
    sliders: Mapping[ParameterKind, float],
) -> dict[ParameterKind, float]:
    """Map the slider values for exactly the parameters *spec* accepts."""

    # Iterate the canonical order so the resolved mapping is stable.
    return {
        kind: map_parameter(kind, sliders[kind])
        for kind in PARAMETER_KINDS
        if spec.accepts(kind)
    }


__all__ = ["SCALE_FACTORS", "map_parameter", "native_range", "resolve_parameters"]
