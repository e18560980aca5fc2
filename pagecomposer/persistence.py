# pagecomposer/persistence.py
"""
Conversion between the element collection and its JSON text form.

The document is a bare array of ``{"id", "type", "content"}`` records, in
display order. The id counter is not stored; the store rebuilds it on load.
"""

import json
import logging

from .elements import Element

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Base class for save/load failures."""


class SerializationError(PersistenceError):
    """The collection holds content that cannot be written as JSON."""


class DeserializationError(PersistenceError):
    """The stored text is missing, malformed or not an array of records."""


class PersistenceAdapter:
    def __init__(self, indent=None):
        self.indent = indent or None

    def save(self, collection) -> str:
        records = []
        for el in collection:
            records.append({"id": el.id, "type": el.type, "content": el.content})
        try:
            raw = json.dumps(
                records, indent=self.indent, ensure_ascii=False, allow_nan=False
            )
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot serialize elements: {exc}") from exc
        logger.debug(f"Serialized {len(records)} elements")
        return raw

    def load(self, raw) -> list:
        if raw is None:
            raise DeserializationError("No saved document")
        if not isinstance(raw, (str, bytes, bytearray)):
            raise DeserializationError(
                f"Expected text, got {type(raw).__name__}"
            )
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            raise DeserializationError(f"Invalid JSON: {exc}") from exc
        if not isinstance(data, list):
            raise DeserializationError(
                f"Expected an array of elements, got {type(data).__name__}"
            )
        elements = [_parse_record(i, rec) for i, rec in enumerate(data)]
        logger.debug(f"Deserialized {len(elements)} elements")
        return elements


def _parse_record(position, record) -> Element:
    if not isinstance(record, dict):
        raise DeserializationError(f"Element {position} is not an object")
    element_id = record.get("id")
    # bool is an int subclass but never a valid id
    if not isinstance(element_id, int) or isinstance(element_id, bool):
        raise DeserializationError(f"Element {position} has no integer id")
    element_type = record.get("type")
    if not isinstance(element_type, str):
        raise DeserializationError(f"Element {position} has no type")
    content = record.get("content")
    if not isinstance(content, str):
        raise DeserializationError(f"Element {position} has no text content")
    return Element(element_id, element_type, content)
