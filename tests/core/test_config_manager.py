"""
test_config_manager.py
----------------------
Config loading from JSON/YAML, default merging and failure handling.
"""

import json

import pytest

from pcstone.core.services import config_manager
from pcstone.core.services.config_manager import load_config


DEFAULTS = {
    "window": {"scale": 4, "title": "PCStone"},
    "joystick": {"a": 0, "b": 1},
}


def test_yaml_overrides_are_merged_over_defaults(tmp_path):
    path = tmp_path / "override.yaml"
    path.write_text("_notes: ignored\nwindow:\n  scale: 2\n", encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config["window"] == {"scale": 2, "title": "PCStone"}
    assert config["joystick"] == {"a": 0, "b": 1}
    assert "_notes" not in config


def test_json_config(tmp_path):
    path = tmp_path / "override.json"
    path.write_text(json.dumps({"joystick": {"b": 3}}), encoding="utf-8")

    config = load_config(str(path), DEFAULTS)

    assert config["joystick"] == {"a": 0, "b": 3}


def test_defaults_are_not_mutated(tmp_path):
    path = tmp_path / "override.json"
    path.write_text(json.dumps({"window": {"scale": 9}}), encoding="utf-8")

    load_config(str(path), DEFAULTS)

    assert DEFAULTS["window"]["scale"] == 4


def test_missing_file_falls_back_to_defaults():
    assert load_config("does_not_exist.yaml", DEFAULTS) == DEFAULTS


def test_strict_missing_file_raises():
    with pytest.raises(FileNotFoundError):
        load_config("does_not_exist.yaml", DEFAULTS, strict=True)


def test_broken_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("window: [unclosed\n", encoding="utf-8")

    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_packaged_controls_are_indexed():
    config_manager.rebuild_file_index()

    controls = load_config("controls", strict=True)

    assert set(controls["keyboard"]) == {"0", "1"}
    assert controls["keyboard"]["0"]["a"] == "space"
    assert "_notes" not in controls


def test_bare_name_and_filename_resolve_to_the_same_file():
    config_manager.rebuild_file_index()

    assert load_config("controls", strict=True) == load_config("controls.yaml", strict=True)


def test_python_files_are_not_loaded(tmp_path):
    path = tmp_path / "settings.py"
    path.write_text("DEFAULT_CONFIG = {'window': {'scale': 1}}\n", encoding="utf-8")

    assert load_config(str(path), DEFAULTS) == DEFAULTS


def test_strict_rejects_unsupported_format(tmp_path):
    path = tmp_path / "settings.py"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path), DEFAULTS, strict=True)


def test_working_directory_is_not_searched(tmp_path, monkeypatch):
    (tmp_path / "controls.json").write_text(json.dumps({"window": {"scale": 9}}), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    config_manager.rebuild_file_index()

    assert load_config("controls", strict=True)["window"]["scale"] == 4
