# pagecomposer/drag.py
"""
Drag-and-drop session handling.

The capture layer reports four kinds of events; :func:`transition` resolves
each one against the current state and returns the store command to run, if
any. :class:`DragSessionController` keeps the state and applies the commands.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from PyQt5.QtCore import QObject, pyqtSignal

from .elements import type_name

logger = logging.getLogger(__name__)


# --- Sessions ----------------------------------------------------------
@dataclass(frozen=True)
class NewFromPalette:
    type: str


@dataclass(frozen=True)
class ExistingElement:
    id: int


Session = Union[NewFromPalette, ExistingElement]


# --- States ------------------------------------------------------------
@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Dragging:
    session: Session


DragState = Union[Idle, Dragging]
IDLE = Idle()


# --- Events ------------------------------------------------------------
@dataclass(frozen=True)
class DragStartFromPalette:
    type: str


@dataclass(frozen=True)
class DragStartFromElement:
    id: int


@dataclass(frozen=True)
class DropOnCanvas:
    pass


@dataclass(frozen=True)
class DropOnElement:
    target_id: int


# --- Commands ----------------------------------------------------------
@dataclass(frozen=True)
class InsertNew:
    type: str


@dataclass(frozen=True)
class Reorder:
    source_id: int
    target_id: int


Command = Union[InsertNew, Reorder]


def transition(state: DragState, event) -> Tuple[DragState, Optional[Command]]:
    """Return the next state and the store command triggered by ``event``."""
    if isinstance(event, DragStartFromPalette):
        return Dragging(NewFromPalette(type_name(event.type))), None
    if isinstance(event, DragStartFromElement):
        return Dragging(ExistingElement(event.id)), None
    if not isinstance(event, (DropOnCanvas, DropOnElement)):
        raise TypeError(f"Unknown drag event: {event!r}")

    if not isinstance(state, Dragging):
        # drop without a drag in flight
        return IDLE, None

    session = state.session
    if isinstance(event, DropOnCanvas):
        if isinstance(session, NewFromPalette):
            return IDLE, InsertNew(session.type)
        return IDLE, None
    if isinstance(session, ExistingElement):
        return IDLE, Reorder(session.id, event.target_id)
    return IDLE, None


class DragSessionController(QObject):
    """Holds the (single) drag session and forwards drops to the store."""

    sessionChanged = pyqtSignal(object)

    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store
        self._state: DragState = IDLE

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def session(self) -> Optional[Session]:
        if isinstance(self._state, Dragging):
            return self._state.session
        return None

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    def drag_start_from_palette(self, element_type):
        self.dispatch(DragStartFromPalette(type_name(element_type)))

    def drag_start_from_element(self, element_id: int):
        self.dispatch(DragStartFromElement(element_id))

    def drop_on_canvas(self):
        return self.dispatch(DropOnCanvas())

    def drop_on_element(self, target_id: int):
        return self.dispatch(DropOnElement(target_id))

    def dispatch(self, event):
        """Apply ``event``; return the created element for palette drops."""
        previous = self._state
        self._state, command = transition(previous, event)
        if isinstance(previous, Dragging) and isinstance(
            event, (DragStartFromPalette, DragStartFromElement)
        ):
            logger.debug(f"Drag session {previous.session} replaced")
        if self._state != previous:
            logger.debug(f"Drag state -> {self._state}")
            self.sessionChanged.emit(self._state)
        return self._run(command)

    def _run(self, command):
        if isinstance(command, InsertNew):
            return self.store.insert_new(command.type)
        if isinstance(command, Reorder):
            self.store.reorder(command.source_id, command.target_id)
        return None
