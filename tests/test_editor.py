"""Tests for in-place content editing."""

from PyQt5.QtCore import Qt

from pagecomposer.editor import VIEWING, ContentEditor, Editing


def _editor(store, element_id):
    editor = ContentEditor(store, element_id)
    editor.begin_edit(store.get(element_id))
    return editor


def test_edit_and_commit(abc_store):
    editor = _editor(abc_store, 2)
    assert editor.state == Editing("New Paragraph")
    editor.update_working_text("hello")
    assert abc_store.get(2).content == "New Paragraph"
    assert editor.commit()
    assert abc_store.get(2).content == "hello"
    assert editor.state == VIEWING


def test_operations_outside_edit_mode_are_ignored(abc_store):
    editor = ContentEditor(abc_store, 1)
    assert not editor.update_working_text("x")
    assert not editor.commit()
    assert editor.working_text is None
    assert abc_store.get(1).content == "New Heading"


def test_enter_commits(abc_store):
    editor = _editor(abc_store, 1)
    editor.update_working_text("Title")
    assert editor.handle_key(Qt.Key_Return, Qt.NoModifier)
    assert abc_store.get(1).content == "Title"
    assert not editor.is_editing


def test_keypad_enter_commits(abc_store):
    editor = _editor(abc_store, 1)
    assert editor.handle_key(Qt.Key_Enter)
    assert not editor.is_editing


def test_shift_enter_inserts_newline(abc_store):
    editor = _editor(abc_store, 3)
    editor.update_working_text("one")
    assert editor.handle_key(Qt.Key_Return, Qt.ShiftModifier)
    editor.insert_text("two")
    assert editor.working_text == "one\ntwo"
    assert abc_store.get(3).content == "New List"
    editor.focus_lost()
    assert abc_store.get(3).items == ["one", "two"]


def test_shift_enter_at_position(abc_store):
    editor = _editor(abc_store, 3)
    editor.update_working_text("onetwo")
    editor.handle_key(Qt.Key_Return, Qt.ShiftModifier, position=3)
    assert editor.working_text == "one\ntwo"


def test_other_keys_not_consumed(abc_store):
    editor = _editor(abc_store, 1)
    assert not editor.handle_key(Qt.Key_Escape)
    assert editor.is_editing


def test_commit_after_delete_is_noop(abc_store):
    editor = _editor(abc_store, 2)
    abc_store.delete(2)
    editor.update_working_text("lost")
    assert editor.commit()
    assert abc_store.get(2) is None
    assert len(abc_store) == 2


def test_edit_mode_signal(abc_store):
    events = []
    editor = ContentEditor(abc_store, 1)
    editor.editModeChanged.connect(lambda *args: events.append(args))
    editor.begin_edit(abc_store.get(1))
    editor.update_working_text("T")
    editor.commit()
    assert events == [(1, True, "New Heading"), (1, False, "T")]


def test_discard_keeps_store_content(abc_store):
    events = []
    editor = _editor(abc_store, 1)
    editor.editModeChanged.connect(lambda *args: events.append(args))
    editor.update_working_text("draft")
    editor.discard()
    assert abc_store.get(1).content == "New Heading"
    assert events == [(1, False, "New Heading")]
