# pagecomposer/storage.py
"""Where the serialized document lives between sessions."""

import logging
import os

from PyQt5.QtCore import QSettings

from .settings import open_settings

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Keeps the last written document in memory (tests, previews)."""

    def __init__(self, raw=None):
        self.raw = raw

    def read(self):
        return self.raw

    def write(self, raw: str):
        self.raw = raw


class FileStorage:
    """One UTF-8 JSON file per document; read back as raw bytes."""

    def __init__(self, path: str):
        self.path = path

    def read(self):
        if not os.path.exists(self.path):
            return None
        with open(self.path, "rb") as f:
            return f.read()

    def write(self, raw: str):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(raw)
        logger.debug(f"Document written to {self.path}")


class SettingsStorage:
    """A single key of the application ``QSettings``."""

    def __init__(self, settings: QSettings = None, key: str = "elements"):
        self.settings = settings or open_settings()
        self.key = key

    def read(self):
        if not self.settings.contains(self.key):
            return None
        return self.settings.value(self.key, "", type=str)

    def write(self, raw: str):
        self.settings.setValue(self.key, raw)
        self.settings.sync()
        logger.debug(f"Document written to settings key {self.key}")
