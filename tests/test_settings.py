# tests/test_settings.py
from __future__ import annotations

import json

import pytest

from colorcore.io.json_store import JsonReadError, atomic_write_json, read_json
from colorcore.models.settings import DEFAULT_PRESET_COLORS, AppSettings, ColorPickerWidgetConfig
from colorcore.repos.settings_repo import SettingsRepo


def test_widget_config_defaults():
    cfg = ColorPickerWidgetConfig.from_dict({})
    assert cfg.picker_type == "circular"
    assert cfg.picker_size == "md"
    assert cfg.default_color == "#3b82f6"
    assert cfg.preset_colors == DEFAULT_PRESET_COLORS
    assert cfg.validate_hex is True


def test_widget_config_coerces_and_clamps():
    cfg = ColorPickerWidgetConfig.from_dict(
        {
            "picker_type": "SPIRAL",
            "picker_size": "LG",
            "default_color": "F00",
            "disabled": "yes",
            "preset_colors": ["#fff", "nope", 5, "#123456"],
            "preset_grid_columns": 99,
            "preset_color_size": "abc",
        }
    )
    assert cfg.picker_type == "circular"
    assert cfg.picker_size == "lg"
    assert cfg.default_color == "#ff0000"
    assert cfg.disabled is True
    assert cfg.preset_colors == ["#ffffff", "#123456"]
    assert cfg.preset_grid_columns == 12
    assert cfg.preset_color_size == 32


def test_invalid_default_color_falls_back():
    assert ColorPickerWidgetConfig.from_dict({"default_color": "blue"}).default_color == "#3b82f6"


def test_app_settings_round_trip():
    s = AppSettings.from_dict({"ui": {"theme": "flatly"}, "logging": {"level": "debug"}})
    assert s.ui.theme == "flatly"
    assert s.logging.level == "DEBUG"
    assert AppSettings.from_dict(s.to_dict()) == s


def test_unknown_log_level_is_info():
    assert AppSettings.from_dict({"logging": {"level": "chatty"}}).logging.level == "INFO"


# ---------- storage ----------

def test_read_json_missing_and_blank(tmp_path):
    p = tmp_path / "x.json"
    assert read_json(p, default={"a": 1}) == {"a": 1}
    p.write_text("   ", encoding="utf-8")
    assert read_json(p) == {}


def test_read_json_errors(tmp_path):
    p = tmp_path / "x.json"
    p.write_text("{broken", encoding="utf-8")
    with pytest.raises(JsonReadError) as ei:
        read_json(p)
    assert ei.value.path == p
    assert ei.value.cause is not None

    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(JsonReadError):
        read_json(p)


def test_atomic_write_leaves_no_temp_files(tmp_path):
    p = tmp_path / "sub" / "x.json"
    atomic_write_json(p, {"b": 2, "a": 1})
    assert json.loads(p.read_text(encoding="utf-8")) == {"a": 1, "b": 2}
    assert [f.name for f in p.parent.iterdir()] == ["x.json"]


def test_repo_creates_file_on_first_load(tmp_path):
    repo = SettingsRepo(tmp_path)
    s = repo.load()
    assert repo.path.exists()
    assert s == AppSettings()


def test_repo_save_and_reload(tmp_path):
    repo = SettingsRepo(tmp_path)
    s = AppSettings()
    s.picker.picker_size = "xl"
    repo.save(s)
    assert repo.load().picker.picker_size == "xl"


def test_repo_broken_file(tmp_path):
    repo = SettingsRepo(tmp_path)
    repo.path.write_text("not json", encoding="utf-8")
    with pytest.raises(JsonReadError):
        repo.load()
    assert repo.load_or_default() == AppSettings()
    # broken file is kept for the user to inspect
    assert repo.path.read_text(encoding="utf-8") == "not json"
