"""Processing pipeline binding the filter selection, sliders and images.

The pipeline is a two-state machine.  It starts *empty*; picking an image
moves it to *loaded*, where every filter or slider change re-runs a full
processing pass.  There is no way back to *empty* within a session.

All state lives in a single :class:`PipelineState` owned by the pipeline and
mutated exclusively by the transition methods.  Views observe it through
:meth:`FilterPipeline.subscribe` instead of keeping their own copies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional

from PIL import Image

from ..errors import NoImageSelectedError, ProcessingFailedError
from .filter_catalog import DEFAULT_FILTER, PARAMETER_KINDS, FilterSpec, ParameterKind, get_filter
from .filters import FilterConfig, RenderedImage, apply, rasterize
from .parameter_mapper import resolve_parameters

_LOGGER = logging.getLogger(__name__)

EngineApply = Callable[[FilterConfig, Image.Image], Optional[RenderedImage]]
EngineRasterize = Callable[[RenderedImage], Image.Image]
Listener = Callable[["ProcessingResult"], None]


class PipelineStatus(str, Enum):
    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(frozen=True)
class SliderState:
    """Normalised slider positions, one per :class:`ParameterKind`."""

    intensity: float = 0.5
    radius: float = 0.5
    scale: float = 0.5

    def get(self, kind: ParameterKind) -> float:
        return getattr(self, kind.value)

    def with_value(self, kind: ParameterKind, value: float) -> "SliderState":
        return replace(self, **{kind.value: float(value)})

    def as_mapping(self) -> dict[ParameterKind, float]:
        return {kind: self.get(kind) for kind in PARAMETER_KINDS}


@dataclass(frozen=True)
class ProcessingResult:
    """Outcome of one processing pass."""

    config: FilterConfig
    output: Optional[Image.Image] = None
    error: Optional[ProcessingFailedError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.output is not None


@dataclass
class PipelineState:
    """Everything the pipeline knows about the current session.

    ``output_image`` is present only while the last pass succeeded;
    ``display_image`` keeps the most recent successful output so a failed
    pass does not blank the preview.
    """

    filter: FilterSpec = DEFAULT_FILTER
    sliders: SliderState = field(default_factory=SliderState)
    input_image: Optional[Image.Image] = None
    output_image: Optional[Image.Image] = None
    display_image: Optional[Image.Image] = None
    last_result: Optional[ProcessingResult] = None

    @property
    def status(self) -> PipelineStatus:
        return PipelineStatus.EMPTY if self.input_image is None else PipelineStatus.LOADED


class FilterPipeline:
    """Owns the :class:`PipelineState` and runs processing passes."""

    def __init__(
        self,
        filter_spec: FilterSpec = DEFAULT_FILTER,
        sliders: Optional[SliderState] = None,
        *,
        engine: EngineApply = apply,
        rasterizer: EngineRasterize = rasterize,
    ) -> None:
        self._state = PipelineState(filter=filter_spec, sliders=sliders or SliderState())
        self._engine = engine
        self._rasterize = rasterizer
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def state(self) -> PipelineState:
        """Return the live state object; callers must treat it as read-only."""

        return self._state

    @property
    def status(self) -> PipelineStatus:
        return self._state.status

    @property
    def current_filter(self) -> FilterSpec:
        return self._state.filter

    @property
    def sliders(self) -> SliderState:
        return self._state.sliders

    @property
    def output_image(self) -> Optional[Image.Image]:
        return self._state.output_image

    @property
    def display_image(self) -> Optional[Image.Image]:
        return self._state.display_image

    def has_output(self) -> bool:
        return self._state.output_image is not None

    def enabled_parameters(self) -> frozenset[ParameterKind]:
        """Return the slider kinds the active filter reacts to."""

        return self._state.filter.parameters

    def require_output(self) -> Image.Image:
        """Return the current output bitmap or explain why there is none."""

        if self._state.status is PipelineStatus.EMPTY:
            raise NoImageSelectedError("No image selected")
        if self._state.output_image is None:
            result = self._state.last_result
            if result is not None and result.error is not None:
                raise result.error
            raise ProcessingFailedError("No processed image is available")
        return self._state.output_image

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def set_input_image(self, image: Image.Image) -> ProcessingResult:
        """Load *image* and immediately run a processing pass."""

        if image is None:
            raise NoImageSelectedError("No image selected")
        self._state.input_image = image
        _LOGGER.debug("Loaded input image %sx%s", image.width, image.height)
        return self.process()

    def select_filter(self, selection: FilterSpec | str) -> Optional[ProcessingResult]:
        """Activate *selection*; slider values carry over unchanged.

        Returns the pass result, or ``None`` while no image is loaded.
        """

        spec = get_filter(selection) if isinstance(selection, str) else selection
        self._state.filter = spec
        return self._process_if_loaded()

    def set_slider(self, kind: ParameterKind, value: float) -> Optional[ProcessingResult]:
        """Move one slider to *value* (normalised) and re-run the filter."""

        self._state.sliders = self._state.sliders.with_value(kind, value)
        return self._process_if_loaded()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every pass; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Processing
    # ------------------------------------------------------------------
    def build_config(self) -> FilterConfig:
        """Resolve the native parameters for the active filter."""

        spec = self._state.filter
        return FilterConfig.for_spec(spec, resolve_parameters(spec, self._state.sliders.as_mapping()))

    def process(self) -> ProcessingResult:
        """Run one processing pass over the loaded image.

        Engine failures never raise: they clear the output, keep the previous
        display image and are reported through the returned result.
        """

        image = self._state.input_image
        if image is None:
            raise NoImageSelectedError("No image selected")

        config = self.build_config()
        rendered = self._engine(config, image)
        if rendered is None:
            _LOGGER.warning("Filter %s produced no output; keeping previous preview", config.name)
            error = ProcessingFailedError(f"{config.name} could not process the image")
            result = ProcessingResult(config, None, error)
            self._state.output_image = None
        else:
            bitmap = self._rasterize(rendered)
            result = ProcessingResult(config, bitmap)
            self._state.output_image = bitmap
            self._state.display_image = bitmap

        self._state.last_result = result
        self._notify(result)
        return result

    def _process_if_loaded(self) -> Optional[ProcessingResult]:
        if self._state.status is PipelineStatus.EMPTY:
            return None
        return self.process()

    def _notify(self, result: ProcessingResult) -> None:
        for listener in list(self._listeners):
            listener(result)


__all__ = [
    "FilterPipeline",
    "PipelineState",
    "PipelineStatus",
    "ProcessingResult",
    "SliderState",
]
