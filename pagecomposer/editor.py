# pagecomposer/editor.py

import logging
from dataclasses import dataclass
from typing import Union

from PyQt5.QtCore import QObject, Qt, pyqtSignal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewing:
    pass


@dataclass(frozen=True)
class Editing:
    working_text: str


EditState = Union[Viewing, Editing]
VIEWING = Viewing()

_ENTER_KEYS = (Qt.Key_Return, Qt.Key_Enter)


class ContentEditor(QObject):
    """In-place text editing for a single element.

    The working copy only reaches the store on :meth:`commit`, which the UI
    triggers on focus loss or on Enter without Shift. There is no cancel.
    """

    # element id, is editing, working text
    editModeChanged = pyqtSignal(int, bool, str)

    def __init__(self, store, element_id: int, parent=None):
        super().__init__(parent)
        self.store = store
        self.element_id = element_id
        self._state: EditState = VIEWING

    @property
    def state(self) -> EditState:
        return self._state

    @property
    def is_editing(self) -> bool:
        return isinstance(self._state, Editing)

    @property
    def working_text(self):
        if isinstance(self._state, Editing):
            return self._state.working_text
        return None

    def begin_edit(self, element):
        self.element_id = element.id
        self._state = Editing(element.content)
        logger.debug(f"Begin edit of element {element.id}")
        self.editModeChanged.emit(self.element_id, True, element.content)

    def update_working_text(self, text: str):
        if not self.is_editing:
            return False
        self._state = Editing(text)
        return True

    def insert_text(self, text: str, position=None):
        """Insert ``text`` into the working copy (at the end by default)."""
        if not self.is_editing:
            return False
        current = self._state.working_text
        if position is None:
            position = len(current)
        position = max(0, min(len(current), position))
        return self.update_working_text(current[:position] + text + current[position:])

    def commit(self):
        if not self.is_editing:
            return False
        text = self._state.working_text
        self.store.edit(self.element_id, text)
        self._state = VIEWING
        logger.debug(f"Commit edit of element {self.element_id}")
        self.editModeChanged.emit(self.element_id, False, text)
        return True

    def focus_lost(self):
        return self.commit()

    def handle_key(self, key, modifiers=Qt.NoModifier, position=None):
        """Return True when the key was consumed by the editor."""
        if not self.is_editing or key not in _ENTER_KEYS:
            return False
        if int(modifiers) & int(Qt.ShiftModifier):
            return self.insert_text("\n", position)
        return self.commit()

    def discard(self):
        """Leave edit mode without writing the working copy."""
        if not self.is_editing:
            return
        self._state = VIEWING
        element = self.store.get(self.element_id)
        content = element.content if element is not None else ""
        logger.debug(f"Discard edit of element {self.element_id}")
        self.editModeChanged.emit(self.element_id, False, content)
