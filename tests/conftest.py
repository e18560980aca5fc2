import logging

import pytest
from PyQt5.QtCore import QSettings

from pagecomposer.core import ElementStore
from pagecomposer.elements import ElementType


@pytest.fixture
def store():
    return ElementStore()


@pytest.fixture
def abc_store(store):
    """Store holding Heading(1), Paragraph(2), List(3)."""
    store.insert_new(ElementType.HEADING)
    store.insert_new(ElementType.PARAGRAPH)
    store.insert_new(ElementType.LIST)
    return store


@pytest.fixture
def qsettings(tmp_path):
    return QSettings(str(tmp_path / "pagecomposer.ini"), QSettings.IniFormat)


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)


