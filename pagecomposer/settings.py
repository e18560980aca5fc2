# pagecomposer/settings.py

from dataclasses import dataclass

from PyQt5.QtCore import QSettings

ORGANIZATION = "pagecomposer"
APPLICATION = "pagecomposer"


@dataclass(frozen=True)
class BuilderSettings:
    storage_key: str = "elements"
    json_indent: int = 0
    log_level: str = "INFO"


def open_settings() -> QSettings:
    return QSettings(ORGANIZATION, APPLICATION)


def load_settings(settings: QSettings = None) -> BuilderSettings:
    """Read builder options, falling back to defaults for missing keys."""
    settings = settings or open_settings()
    defaults = BuilderSettings()
    storage_key = settings.value("storage_key", defaults.storage_key, type=str)
    json_indent = settings.value("json_indent", defaults.json_indent, type=int)
    log_level = settings.value("log_level", defaults.log_level, type=str)
    return BuilderSettings(
        storage_key=storage_key or defaults.storage_key,
        json_indent=max(0, json_indent),
        log_level=(log_level or defaults.log_level).upper(),
    )


def save_settings(options: BuilderSettings, settings: QSettings = None):
    settings = settings or open_settings()
    settings.setValue("storage_key", options.storage_key)
    settings.setValue("json_indent", options.json_indent)
    settings.setValue("log_level", options.log_level)
    settings.sync()
