# File: colorcore/repos/settings_repo.py
from __future__ import annotations

import logging
from pathlib import Path

from colorcore.io.json_store import JsonReadError, atomic_write_json, ensure_dir, read_json
from colorcore.models.settings import AppSettings

log = logging.getLogger(__name__)


class SettingsRepo:
    """
    Manages app_data/settings.json.

    - load(): strict, raises JsonReadError on a broken file
    - load_or_default(): logs the error and returns defaults (file untouched)
    - a missing file is created with defaults on first load
    """

    def __init__(self, app_data_dir: Path) -> None:
        self._app_data_dir = app_data_dir
        ensure_dir(self._app_data_dir)

    @property
    def path(self) -> Path:
        return self._app_data_dir / "settings.json"

    def load(self) -> AppSettings:
        existed = self.path.exists()
        data = read_json(self.path, default={})
        settings = AppSettings.from_dict(data)

        if not existed:
            self.save(settings)

        log.info("settings loaded", extra={"action": "settings_load"})
        return settings

    def load_or_default(self) -> AppSettings:
        try:
            return self.load()
        except JsonReadError as e:
            log.error("settings unreadable, using defaults: %s", e, extra={"action": "settings_load"})
            return AppSettings()

    def save(self, settings: AppSettings) -> None:
        atomic_write_json(self.path, settings.to_dict())
