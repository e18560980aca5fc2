"""Expose the page builder core for convenient imports."""

from .elements import Element, ElementType
from .core import ElementStore
from .drag import DragSessionController
from .editor import ContentEditor
from .persistence import (
    PersistenceAdapter,
    PersistenceError,
    SerializationError,
    DeserializationError,
)
from .storage import MemoryStorage, FileStorage, SettingsStorage
from .builder import Builder

__all__ = [
    "Element",
    "ElementType",
    "ElementStore",
    "DragSessionController",
    "ContentEditor",
    "PersistenceAdapter",
    "PersistenceError",
    "SerializationError",
    "DeserializationError",
    "MemoryStorage",
    "FileStorage",
    "SettingsStorage",
    "Builder",
]
