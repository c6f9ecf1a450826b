from __future__ import annotations

import json

import pytest

from instafilter.errors import SettingsInvalidError
from instafilter.settings import SettingsManager, default_home


def test_defaults_without_file(tmp_path) -> None:
    settings = SettingsManager(tmp_path)
    settings.load()

    assert settings.get("library.album") == "Instafilter"
    assert settings.get("ui.default_filter") == "Sepia Tone"
    assert settings.slider_default("radius") == 0.5
    assert settings.library_root() == tmp_path / "Library"
    assert settings.get("missing.key", "fallback") == "fallback"
    assert not settings.path.exists()


def test_set_persists_and_reloads(tmp_path) -> None:
    settings = SettingsManager(tmp_path)
    settings.set("ui.sliders.scale", 0.8)
    settings.set("library.root", str(tmp_path / "Photos"))

    reloaded = SettingsManager(tmp_path)
    reloaded.load()

    assert reloaded.slider_default("scale") == 0.8
    assert reloaded.library_root() == tmp_path / "Photos"
    # Untouched defaults survive the merge.
    assert reloaded.get("ui.sliders.intensity") == 0.5
    assert json.loads(settings.path.read_text())["ui"]["sliders"]["scale"] == 0.8


def test_invalid_json_raises(tmp_path) -> None:
    (tmp_path / "settings.json").write_text("[1, 2")

    with pytest.raises(SettingsInvalidError):
        SettingsManager(tmp_path).load()


def test_invalid_slider_default_falls_back(tmp_path) -> None:
    settings = SettingsManager(tmp_path)
    settings.set("ui.sliders.intensity", "loud")

    assert settings.slider_default("intensity") == 0.5


def test_home_env_override(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("INSTAFILTER_HOME", str(tmp_path / "custom"))

    assert default_home() == tmp_path / "custom"
    assert SettingsManager().path == tmp_path / "custom" / "settings.json"
