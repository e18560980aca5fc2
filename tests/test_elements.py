"""Tests for the Element data model."""

from pagecomposer.elements import Element, ElementType, default_content, type_name


def test_create_uses_default_content():
    el = Element.create(1, ElementType.HEADING)
    assert el == Element(1, "Heading", "New Heading")


def test_type_is_stored_as_plain_string():
    el = Element(4, ElementType.LIST, "a")
    assert type(el.type) is str
    assert el.type == "List"
    assert el.to_dict() == {"id": 4, "type": "List", "content": "a"}


def test_type_name_accepts_enum_and_string():
    assert type_name(ElementType.IMAGE) == "Image"
    assert type_name("Paragraph") == "Paragraph"
    assert default_content("Paragraph") == "New Paragraph"


def test_list_items_split_on_line_breaks():
    el = Element(1, "List", "one\ntwo\nthree")
    assert el.items == ["one", "two", "three"]


def test_unknown_type_is_kept_but_flagged():
    el = Element(9, "Video", "clip")
    assert el.type == "Video"
    assert not el.is_known_type
    assert Element(1, "Image", "").is_known_type


def test_with_content_keeps_identity():
    el = Element(2, "Paragraph", "old")
    new = el.with_content("new")
    assert new == Element(2, "Paragraph", "new")
    assert el.content == "old"
