"""Tests for the filter pipeline state machine."""

from __future__ import annotations

import pytest

from instafilter.core import parameter_mapper
from instafilter.core.filter_catalog import ParameterKind, get_filter
from instafilter.core.filters import apply
from instafilter.core.pipeline import FilterPipeline, PipelineStatus, SliderState
from instafilter.errors import NoImageSelectedError, ProcessingFailedError


class _RecordingEngine:
    """Wrap the real engine and remember every config it receives."""

    def __init__(self, fail: bool = False) -> None:
        self.configs = []
        self.fail = fail

    def __call__(self, config, image):
        self.configs.append(config)
        if self.fail:
            return None
        return apply(config, image)


def test_pipeline_starts_empty() -> None:
    pipeline = FilterPipeline()

    assert pipeline.status is PipelineStatus.EMPTY
    assert pipeline.current_filter.name == "Sepia Tone"
    assert pipeline.output_image is None
    assert pipeline.has_output() is False


def test_changes_before_an_image_do_not_process() -> None:
    engine = _RecordingEngine()
    pipeline = FilterPipeline(engine=engine)

    assert pipeline.select_filter("Pixellate") is None
    assert pipeline.set_slider(ParameterKind.SCALE, 0.3) is None
    assert engine.configs == []
    assert pipeline.current_filter.name == "Pixellate"
    assert pipeline.sliders.scale == 0.3


def test_loading_an_image_runs_a_pass(gradient_image) -> None:
    pipeline = FilterPipeline()

    result = pipeline.set_input_image(gradient_image)

    assert result.ok
    assert pipeline.status is PipelineStatus.LOADED
    assert pipeline.output_image is result.output
    assert pipeline.display_image is result.output
    assert pipeline.output_image.size == gradient_image.size


def test_gaussian_blur_half_slider_passes_radius_100(gradient_image) -> None:
    engine = _RecordingEngine()
    pipeline = FilterPipeline(engine=engine)
    pipeline.set_input_image(gradient_image)
    pipeline.select_filter("Gaussian Blur")

    result = pipeline.set_slider(ParameterKind.RADIUS, 0.5)

    assert dict(engine.configs[-1].parameters) == {ParameterKind.RADIUS: 100.0}
    assert result.output.size == (48, 32)


def test_sepia_after_pixellate_ignores_scale(gradient_image) -> None:
    engine = _RecordingEngine()
    pipeline = FilterPipeline(get_filter("Pixellate"), engine=engine)
    pipeline.set_input_image(gradient_image)
    pipeline.set_slider(ParameterKind.SCALE, 0.8)
    assert dict(engine.configs[-1].parameters) == {ParameterKind.SCALE: 8.0}

    pipeline.select_filter("Sepia Tone")

    assert engine.configs[-1].name == "Sepia Tone"
    assert dict(engine.configs[-1].parameters) == {ParameterKind.INTENSITY: 0.5}
    # Slider values carry over across filter changes.
    assert pipeline.sliders.scale == 0.8


def test_scale_is_never_mapped_for_filters_without_it(gradient_image, monkeypatch) -> None:
    mapped = []
    original = parameter_mapper.map_parameter

    def _spy(kind, value):
        mapped.append(kind)
        return original(kind, value)

    monkeypatch.setattr(parameter_mapper, "map_parameter", _spy)
    pipeline = FilterPipeline(get_filter("Vignette"))
    pipeline.set_input_image(gradient_image)
    pipeline.set_slider(ParameterKind.SCALE, 0.9)

    assert ParameterKind.SCALE not in pipeline.enabled_parameters()
    assert ParameterKind.SCALE not in mapped
    assert set(mapped) == {ParameterKind.INTENSITY, ParameterKind.RADIUS}


def test_identical_passes_are_bit_identical(gradient_image) -> None:
    pipeline = FilterPipeline(get_filter("Crystallize"), SliderState(radius=0.05))
    first = pipeline.set_input_image(gradient_image).output
    second = pipeline.process().output

    assert first is not second
    assert first.tobytes() == second.tobytes()


def test_failed_pass_clears_output_but_keeps_preview(gradient_image) -> None:
    engine = _RecordingEngine()
    pipeline = FilterPipeline(engine=engine)
    good = pipeline.set_input_image(gradient_image).output

    engine.fail = True
    result = pipeline.set_slider(ParameterKind.INTENSITY, 0.9)

    assert not result.ok
    assert isinstance(result.error, ProcessingFailedError)
    assert pipeline.output_image is None
    assert pipeline.display_image is good
    assert pipeline.status is PipelineStatus.LOADED
    with pytest.raises(ProcessingFailedError):
        pipeline.require_output()

    engine.fail = False
    recovered = pipeline.set_slider(ParameterKind.INTENSITY, 0.2)
    assert recovered.ok
    assert pipeline.output_image is recovered.output


def test_require_output_without_image_raises_no_image() -> None:
    pipeline = FilterPipeline()

    with pytest.raises(NoImageSelectedError):
        pipeline.require_output()
    with pytest.raises(NoImageSelectedError):
        pipeline.process()
    assert pipeline.status is PipelineStatus.EMPTY


def test_set_input_image_rejects_none() -> None:
    with pytest.raises(NoImageSelectedError):
        FilterPipeline().set_input_image(None)


def test_unknown_filter_name_leaves_selection_unchanged() -> None:
    pipeline = FilterPipeline()

    with pytest.raises(KeyError):
        pipeline.select_filter("Posterize")
    assert pipeline.current_filter.name == "Sepia Tone"


def test_listeners_receive_every_pass(gradient_image) -> None:
    pipeline = FilterPipeline()
    seen = []
    unsubscribe = pipeline.subscribe(seen.append)

    pipeline.set_input_image(gradient_image)
    pipeline.select_filter("Edges")
    unsubscribe()
    pipeline.set_slider(ParameterKind.INTENSITY, 0.1)

    assert [result.config.name for result in seen] == ["Sepia Tone", "Edges"]


def test_slider_state_helpers() -> None:
    sliders = SliderState().with_value(ParameterKind.RADIUS, 0.25)

    assert sliders.get(ParameterKind.RADIUS) == 0.25
    assert sliders.as_mapping() == {
        ParameterKind.INTENSITY: 0.5,
        ParameterKind.RADIUS: 0.25,
        ParameterKind.SCALE: 0.5,
    }
