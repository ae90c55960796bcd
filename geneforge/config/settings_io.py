"""
Settings I/O helpers.
Single source of truth: JSON on disk (package defaults or user custom).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from geneforge import CONFIG_DIR, USER_DIR
from geneforge.schemas.config import AppSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = CONFIG_DIR / "defaults" / "settings.json"
USER_SETTINGS_PATH = USER_DIR / "settings.json"


def load_settings(path: Path) -> Optional[AppSettings]:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text())
        return AppSettings(**data)
    except (OSError, json.JSONDecodeError, ValidationError, TypeError) as exc:
        logger.warning("Ignoring invalid settings file %s: %s", path, exc)
        return None


def load_active_settings(
    user_path: Path = USER_SETTINGS_PATH,
    default_path: Path = DEFAULT_SETTINGS_PATH,
) -> AppSettings:
    user_settings = load_settings(user_path)
    if user_settings is not None:
        return user_settings
    default_settings = load_settings(default_path)
    return default_settings or AppSettings()


def save_settings(settings: AppSettings, path: Path = USER_SETTINGS_PATH) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(settings.model_dump_json(indent=2))
