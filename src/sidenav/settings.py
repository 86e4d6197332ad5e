from __future__ import annotations

import copy
import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from PySide6.QtCore import QStandardPaths


APP_NAME = "sidenav"
SETTINGS_FILE_NAME = "navigation.json"

ZIP_ARCHIVER_PROVIDER_ID = "dmboannefpncccogfdikhmhpmdnddgoe"


@dataclass
class NavigationSettings:
    unified_my_files: bool = False
    my_files_label: str = "My files"
    downloads_label: str = "Downloads"
    drive_label: str = "My Drive"
    linux_files_label: str = "Linux files"
    play_files_label: str = "Play files"
    recent_label: str = "Recent"
    archive_provider_ids: list[str] = field(default_factory=lambda: [ZIP_ARCHIVER_PROVIDER_ID])
    read_batch_size: int = 100
    strict_partition_order: bool = False

    def is_archive_provider(self, provider_id) -> bool:
        return bool(provider_id) and provider_id in self.archive_provider_ids

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data) -> NavigationSettings:
        settings = cls()
        if not isinstance(data, dict):
            return settings

        for settings_field in fields(cls):
            if settings_field.name not in data:
                continue
            value = data[settings_field.name]
            default_value = getattr(settings, settings_field.name)
            coerced = _coerce_value(value, default_value)
            if coerced is not None:
                setattr(settings, settings_field.name, coerced)

        if settings.read_batch_size <= 0:
            settings.read_batch_size = cls().read_batch_size
        return settings


def _coerce_value(value, default_value):
    if isinstance(default_value, bool):
        return value if isinstance(value, bool) else None
    if isinstance(default_value, int):
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value
    if isinstance(default_value, str):
        return value if isinstance(value, str) else None
    if isinstance(default_value, list):
        if not isinstance(value, list):
            return None
        return [str(item) for item in value if isinstance(item, str) and item.strip()]
    return None


def default_config_dir() -> Path:
    config_root = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    if not config_root:
        config_root = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_root) / APP_NAME if config_root else (Path.home() / '.config' / APP_NAME)


def default_settings_path() -> Path:
    return default_config_dir() / SETTINGS_FILE_NAME


def default_debug_log_path() -> Path:
    state_root = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.StateLocation)
    if not state_root:
        state_root = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    state_dir = Path(state_root) / APP_NAME if state_root else (default_config_dir() / 'state')
    return state_dir / 'debug.log'


def load_settings(path: Path | None = None) -> NavigationSettings:
    settings_path = Path(path) if path is not None else default_settings_path()
    if not settings_path.exists():
        default_settings = NavigationSettings()
        save_settings(default_settings, settings_path)
        return default_settings

    try:
        with settings_path.open('r', encoding='utf-8') as file:
            data = json.load(file)
    except (json.JSONDecodeError, OSError):
        return NavigationSettings()

    return NavigationSettings.from_dict(copy.deepcopy(data))


def save_settings(settings: NavigationSettings, path: Path | None = None) -> Path:
    settings_path = Path(path) if path is not None else default_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    with settings_path.open('w', encoding='utf-8') as file:
        json.dump(settings.to_dict(), file, ensure_ascii=False, indent=2)
    return settings_path
