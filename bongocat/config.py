"""Application constants and on-disk locations."""

from __future__ import annotations

import os
import sys
from pathlib import Path

ANIM_DURATION_MS = 150
APP_ID = "com.example.BongoCat"
DB_FILENAME = "sqlite.db"

IDLE_ASSET = "idle.png"
HIT_LEFT_ASSET = "hit_left.png"
HIT_RIGHT_ASSET = "hit_right.png"

WINDOW_MARGIN_BOTTOM = 93
WINDOW_MARGIN_RIGHT = 7

ASSETS_ENV_VAR = "BONGO_ASSETS"
APP_DIR_NAME = "bongo-cat"


def _config_dir() -> Path:
    """Return the per-user configuration directory for this platform."""
    try:
        if sys.platform.startswith("win"):
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata)
            return Path.home() / "AppData" / "Roaming"
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support"
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg and Path(xdg).is_absolute():
            return Path(xdg)
        return Path.home() / ".config"
    except RuntimeError as exc:
        raise RuntimeError("could not find a config directory") from exc


def asset_dir() -> Path:
    """Directory holding the images and the counter database."""
    override = os.environ.get(ASSETS_ENV_VAR)
    if override:
        return Path(override)
    return _config_dir() / APP_DIR_NAME


def db_path() -> Path:
    """Location of the counter database."""
    return asset_dir() / DB_FILENAME