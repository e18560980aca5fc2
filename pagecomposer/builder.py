# pagecomposer/builder.py

import logging

from PyQt5.QtCore import QObject, Qt, pyqtSignal

from .core import ElementStore
from .drag import DragSessionController
from .editor import ContentEditor
from .persistence import DeserializationError, PersistenceAdapter, SerializationError
from .logger import setup_logging
from .settings import BuilderSettings, load_settings, open_settings
from .storage import MemoryStorage, SettingsStorage

logger = logging.getLogger(__name__)


class Builder(QObject):
    """Entry point for the UI: turns palette/canvas events into store calls.

    The render layer connects to ``store.collectionChanged`` and to
    ``editModeChanged``; the drag-capture layer calls the event methods below.
    """

    editModeChanged = pyqtSignal(int, bool, str)

    def __init__(self, storage=None, adapter=None, options=None, parent=None):
        super().__init__(parent)
        self.options = options or BuilderSettings()
        self.store = ElementStore(self)
        self.drag = DragSessionController(self.store, self)
        self.storage = storage if storage is not None else MemoryStorage()
        self.adapter = adapter or PersistenceAdapter(indent=self.options.json_indent)
        self.editor = None
        logger.debug("Builder initialized")

    @classmethod
    def from_settings(cls, settings=None, parent=None):
        """Builder saving to the application ``QSettings``, logging configured."""
        settings = settings or open_settings()
        options = load_settings(settings)
        setup_logging(options.log_level)
        storage = SettingsStorage(settings, options.storage_key)
        return cls(storage=storage, options=options, parent=parent)

    # --- Drag and drop ------------------------------------------------
    def drag_start_from_palette(self, element_type):
        self.drag.drag_start_from_palette(element_type)

    def drag_start_from_element(self, element_id: int):
        self.drag.drag_start_from_element(element_id)

    def drop_on_canvas(self):
        return self.drag.drop_on_canvas()

    def drop_on_element(self, target_id: int):
        return self.drag.drop_on_element(target_id)

    # --- Edition ------------------------------------------------------
    def delete_requested(self, element_id: int):
        if self._editing(element_id):
            self._close_editor(discard=True)
        self.store.delete(element_id)

    def edit_requested(self, element_id: int):
        element = self.store.get(element_id)
        if element is None:
            logger.debug(f"Edit request ignored: {element_id} not found")
            return
        self._close_editor(discard=True)
        self.editor = ContentEditor(self.store, element_id, self)
        self.editor.editModeChanged.connect(self.editModeChanged)
        self.editor.begin_edit(element)

    def content_changed(self, element_id: int, text: str):
        if self._editing(element_id):
            self.editor.update_working_text(text)

    def edit_commit_requested(self, element_id: int):
        if self._editing(element_id):
            self.editor.commit()
            self._close_editor()

    def key_pressed(self, element_id: int, key, modifiers=Qt.NoModifier):
        if not self._editing(element_id):
            return False
        consumed = self.editor.handle_key(key, modifiers)
        if not self.editor.is_editing:
            self._close_editor()
        return consumed

    @property
    def editing_id(self):
        if self.editor is not None and self.editor.is_editing:
            return self.editor.element_id
        return None

    def _editing(self, element_id) -> bool:
        return self.editing_id is not None and self.editing_id == element_id

    def _close_editor(self, discard=False):
        editor = self.editor
        if editor is None:
            return
        if discard:
            editor.discard()
        editor.editModeChanged.disconnect(self.editModeChanged)
        editor.setParent(None)
        self.editor = None

    # --- Persistence --------------------------------------------------
    def save_requested(self) -> str:
        try:
            raw = self.adapter.save(self.store.snapshot())
        except SerializationError as e:
            logger.warning(f"Save failed: {e}")
            raise
        self.storage.write(raw)
        logger.info(f"Saved {len(self.store)} elements")
        return raw

    def load_requested(self):
        try:
            elements = self.adapter.load(self.storage.read())
        except DeserializationError as e:
            logger.warning(f"Load failed, document unchanged: {e}")
            raise
        self._close_editor(discard=True)
        self.store.replace_all(elements)
        logger.info(f"Loaded {len(elements)} elements")
        return self.store.snapshot()
