from __future__ import annotations

import pytest

from instafilter.core.filter_catalog import (
    DEFAULT_FILTER,
    ParameterKind,
    filter_names,
    get_filter,
    list_filters,
)
from instafilter.core.filters import supported_filters
from instafilter.errors import UnknownFilterError


def test_catalog_lists_seven_filters_in_menu_order() -> None:
    assert filter_names() == [
        "Crystallize",
        "Edges",
        "Gaussian Blur",
        "Pixellate",
        "Sepia Tone",
        "Unsharp Mask",
        "Vignette",
    ]
    assert len(list_filters()) == 7


@pytest.mark.parametrize(
    ("name", "kinds"),
    [
        ("Crystallize", {ParameterKind.RADIUS}),
        ("Edges", {ParameterKind.INTENSITY}),
        ("Gaussian Blur", {ParameterKind.RADIUS}),
        ("Pixellate", {ParameterKind.SCALE}),
        ("Sepia Tone", {ParameterKind.INTENSITY}),
        ("Unsharp Mask", {ParameterKind.INTENSITY, ParameterKind.RADIUS}),
        ("Vignette", {ParameterKind.INTENSITY, ParameterKind.RADIUS}),
    ],
)
def test_accepted_parameters(name: str, kinds: set[ParameterKind]) -> None:
    assert get_filter(name).parameters == frozenset(kinds)


def test_every_catalog_entry_has_an_executor() -> None:
    assert set(filter_names()) <= set(supported_filters())


def test_default_filter_is_sepia() -> None:
    assert DEFAULT_FILTER.name == "Sepia Tone"


def test_unknown_filter_raises() -> None:
    with pytest.raises(UnknownFilterError, match="Posterize"):
        get_filter("Posterize")
