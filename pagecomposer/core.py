# pagecomposer/core.py

import logging

from PyQt5.QtCore import QObject, pyqtSignal

from .elements import Element

logger = logging.getLogger(__name__)


class ElementStore(QObject):
    """
    Logique métier de la page :
    - conserve la liste ordonnée des éléments placés
    - attribue les identifiants (jamais réutilisés)
    - seul point de mutation de la collection
    """

    collectionChanged = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._elements: list = []
        self._next_id = 1

    # ------------------------------------------------------------------
    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self):
        return len(self._elements)

    def __iter__(self):
        return iter(tuple(self._elements))

    def __contains__(self, element_id):
        return self.index_of(element_id) >= 0

    def snapshot(self) -> tuple:
        """Ordered, read-only view of the collection."""
        return tuple(self._elements)

    def index_of(self, element_id: int) -> int:
        for idx, el in enumerate(self._elements):
            if el.id == element_id:
                return idx
        return -1

    def get(self, element_id: int):
        idx = self.index_of(element_id)
        if idx < 0:
            return None
        return self._elements[idx]

    # ------------------------------------------------------------------
    def insert_new(self, element_type) -> Element:
        element = Element.create(self._next_id, element_type)
        self._next_id += 1
        self._elements.append(element)
        logger.debug(f"Insert element {element.id} type={element.type}")
        self._emit_changed()
        return element

    def reorder(self, source_id: int, target_id: int):
        if source_id == target_id:
            return
        src_idx = self.index_of(source_id)
        if src_idx < 0:
            logger.debug(f"Reorder ignored: source {source_id} not found")
            return
        if self.index_of(target_id) < 0:
            logger.debug(f"Reorder ignored: target {target_id} not found")
            return
        moved = self._elements.pop(src_idx)
        # target index is taken after removal of the source
        dst_idx = self.index_of(target_id)
        self._elements.insert(dst_idx, moved)
        logger.debug(f"Reorder {source_id} from {src_idx} to {dst_idx}")
        self._emit_changed()

    def delete(self, element_id: int):
        idx = self.index_of(element_id)
        if idx < 0:
            logger.debug(f"Delete ignored: {element_id} not found")
            return
        del self._elements[idx]
        logger.debug(f"Delete element {element_id}")
        self._emit_changed()

    def edit(self, element_id: int, new_content: str):
        idx = self.index_of(element_id)
        if idx < 0:
            logger.debug(f"Edit ignored: {element_id} not found")
            return
        self._elements[idx] = self._elements[idx].with_content(new_content)
        logger.debug(f"Edit element {element_id}")
        self._emit_changed()

    def replace_all(self, elements):
        """Remplace toute la collection (chargement d'un document)."""
        new_elements = list(elements)
        self._elements = new_elements
        self._next_id = max((el.id for el in new_elements), default=0) + 1
        logger.debug(
            f"Replaced collection with {len(new_elements)} elements, "
            f"next id {self._next_id}"
        )
        self._emit_changed()

    def _emit_changed(self):
        self.collectionChanged.emit(self.snapshot())
