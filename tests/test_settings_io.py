"""Tests for settings loading and saving."""

import json
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from geneforge import CONFIG_DIR, USER_DIR
from geneforge.config.settings_io import (
    DEFAULT_SETTINGS_PATH,
    USER_SETTINGS_PATH,
    load_active_settings,
    load_settings,
    save_settings,
)
from geneforge.schemas.config import AppSettings, AssistantSettings, EditorSettings


def test_default_settings_file_matches_model_defaults() -> None:
    assert DEFAULT_SETTINGS_PATH.exists()
    assert load_settings(DEFAULT_SETTINGS_PATH) == AppSettings()


def test_settings_paths() -> None:
    assert DEFAULT_SETTINGS_PATH == CONFIG_DIR / "defaults" / "settings.json"
    assert USER_SETTINGS_PATH.parent == USER_DIR


def test_missing_file_returns_none() -> None:
    with tempfile.TemporaryDirectory() as td:
        assert load_settings(Path(td) / "nope.json") is None


def test_invalid_files_return_none() -> None:
    with tempfile.TemporaryDirectory() as td:
        bad_json = Path(td) / "bad.json"
        bad_json.write_text("{not json")
        assert load_settings(bad_json) is None

        unknown_key = Path(td) / "extra.json"
        unknown_key.write_text(json.dumps({"editor": {"font": "mono"}}))
        assert load_settings(unknown_key) is None


def test_save_and_reload() -> None:
    with tempfile.TemporaryDirectory() as td:
        path = Path(td) / "nested" / "settings.json"
        settings = AppSettings(
            assistant=AssistantSettings(endpoint="http://localhost:9000/generate", max_tokens=64),
            editor=EditorSettings(display_mode="triplet", line_width=30),
        )
        save_settings(settings, path)
        assert load_settings(path) == settings


def test_active_settings_prefer_user_file() -> None:
    with tempfile.TemporaryDirectory() as td:
        user = Path(td) / "user.json"
        default = Path(td) / "default.json"
        save_settings(AppSettings(editor=EditorSettings(line_width=10)), default)

        assert load_active_settings(user, default).editor.line_width == 10

        save_settings(AppSettings(editor=EditorSettings(line_width=20)), user)
        assert load_active_settings(user, default).editor.line_width == 20


def test_active_settings_fall_back_to_model_defaults() -> None:
    with tempfile.TemporaryDirectory() as td:
        settings = load_active_settings(Path(td) / "a.json", Path(td) / "b.json")
        assert settings == AppSettings()
        assert settings.assistant.endpoint is None


def test_settings_validation() -> None:
    with pytest.raises(ValidationError):
        EditorSettings(line_width=2)
    with pytest.raises(ValidationError):
        EditorSettings(display_mode="columns")
