import logging

import pytest
from behavioral.command.text_editor_command import TextBuffer, InsertCommand, DeleteCommand, ReplaceCommand,\
    CommandHistory, BufferRangeError, CommandNotExecutedError, CommandAlreadyLoggedError, main


@pytest.mark.unit
def test_insert_and_revert():
    buf = TextBuffer("Hello")
    cmd = InsertCommand(buf, "!!", 2)
    cmd.apply()
    assert buf.get_text() == "He!!llo"
    cmd.revert()
    assert buf.get_text() == "Hello"


@pytest.mark.unit
def test_insert_defaults_to_length_at_construction():
    buf = TextBuffer("abc")
    cmd = InsertCommand(buf, "X")
    buf.insert("def")
    cmd.apply()
    assert cmd.position == 3
    assert buf.get_text() == "abcXdef"


@pytest.mark.unit
def test_delete_records_text_and_reverts():
    buf = TextBuffer("Hello World")
    cmd = DeleteCommand(buf, 5, 6)
    assert cmd.deleted_text is None
    cmd.apply()
    assert buf.get_text() == "Hello"
    assert cmd.deleted_text == " World"
    cmd.revert()
    assert buf.get_text() == "Hello World"


@pytest.mark.unit
def test_delete_past_end_is_clamped_and_reverts_exactly():
    buf = TextBuffer("abcdef")
    cmd = DeleteCommand(buf, 4, 10)
    cmd.apply()
    assert buf.get_text() == "abcd"
    assert cmd.deleted_text == "ef"
    cmd.revert()
    assert buf.get_text() == "abcdef"


@pytest.mark.unit
def test_revert_before_apply_is_rejected():
    buf = TextBuffer("abc")
    with pytest.raises(CommandNotExecutedError):
        DeleteCommand(buf, 0, 1).revert()
    with pytest.raises(CommandNotExecutedError):
        InsertCommand(buf, "x", 0).revert()
    with pytest.raises(CommandNotExecutedError):
        ReplaceCommand(buf, 0, 1, "z").revert()
    assert buf.get_text() == "abc"

    once = InsertCommand(buf, "!")
    once.apply()
    once.revert()
    with pytest.raises(CommandNotExecutedError):
        once.revert()
    assert buf.get_text() == "abc"


@pytest.mark.unit
def test_out_of_range_positions_raise():
    buf = TextBuffer("abc")
    with pytest.raises(BufferRangeError):
        buf.insert("x", 4)
    with pytest.raises(BufferRangeError):
        buf.insert("x", -1)
    with pytest.raises(BufferRangeError):
        buf.delete(5, 1)
    with pytest.raises(BufferRangeError):
        buf.delete(0, -1)
    assert buf.get_text() == "abc"


@pytest.mark.unit
def test_replace_matches_delete_then_insert():
    a = TextBuffer("Hello World!")
    b = TextBuffer("Hello World!")
    ReplaceCommand(a, 6, 5, "There").apply()
    DeleteCommand(b, 6, 5).apply()
    InsertCommand(b, "There", 6).apply()
    assert a.get_text() == b.get_text() == "Hello There!"


@pytest.mark.unit
def test_replace_scenario_undo_restores_exactly():
    buf = TextBuffer("Hello World!")
    history = CommandHistory()
    history.execute_command(ReplaceCommand(buf, 0, 5, "Greetings"))
    assert buf.get_text() == "Greetings World!"
    assert history.undo() is True
    assert buf.get_text() == "Hello World!"


@pytest.mark.unit
def test_insert_then_undo_scenario(caplog):
    buf = TextBuffer()
    history = CommandHistory()
    history.execute_command(InsertCommand(buf, "Hello", 0))
    assert buf.get_text() == "Hello"
    history.execute_command(InsertCommand(buf, " World"))
    assert buf.get_text() == "Hello World"
    assert history.undo() is True
    assert buf.get_text() == "Hello"
    assert history.undo() is True
    assert buf.get_text() == ""
    with caplog.at_level(logging.INFO):
        assert history.undo() is False
    assert "Nothing to undo" in caplog.text
    assert buf.get_text() == ""


@pytest.mark.unit
def test_empty_undo_never_mutates():
    buf = TextBuffer("keep")
    history = CommandHistory()
    for _ in range(5):
        assert history.undo() is False
    assert buf.get_text() == "keep"
    assert not history.can_undo


@pytest.mark.unit
def test_log_is_permanent_and_undo_stack_shrinks():
    buf = TextBuffer()
    history = CommandHistory()
    for ch in "wxyz":
        history.execute_command(InsertCommand(buf, ch))
    for _ in range(6):
        history.undo()
    assert len(history.log) == 4
    assert len(history.undo_stack) == 0
    assert buf.get_text() == ""


@pytest.mark.unit
def test_batch_executes_in_order():
    buf = TextBuffer()
    history = CommandHistory()
    before = len(history.log)
    history.execute_batch([InsertCommand(buf, "a"), InsertCommand(buf, "b", 1), InsertCommand(buf, "c", 2)])
    assert buf.get_text() == "abc"
    assert len(history.log) == before + 3


@pytest.mark.unit
def test_batch_is_not_atomic():
    buf = TextBuffer("ab")
    history = CommandHistory()
    with pytest.raises(BufferRangeError):
        history.execute_batch([InsertCommand(buf, "c"), InsertCommand(buf, "!", 99)])
    assert buf.get_text() == "abc"
    assert len(history.log) == 1


@pytest.mark.unit
def test_show_history_lists_variant_names(caplog):
    buf = TextBuffer("Hello")
    history = CommandHistory()
    history.execute_command(InsertCommand(buf, "!"))
    history.execute_command(DeleteCommand(buf, 0, 1))
    history.execute_command(ReplaceCommand(buf, 0, 4, "Jello"))
    history.undo()
    with caplog.at_level(logging.INFO):
        lines = history.show_history()
    assert lines == ["1. Insert", "2. Delete", "3. Replace"]
    assert "Command History" in caplog.text


@pytest.mark.unit
def test_demo_final_state():
    buf = main()
    assert buf.get_text() == "Greetings to"


@pytest.mark.unit
def test_failed_undo_keeps_command_on_stack():
    buf = TextBuffer("Hello World")
    history = CommandHistory()
    history.execute_command(DeleteCommand(buf, 6, 5))
    buf.delete(0, 6)
    with pytest.raises(BufferRangeError):
        history.undo()
    assert len(history.undo_stack) == 1
    assert buf.get_text() == ""
    buf.insert("Hello ")
    assert history.undo() is True
    assert buf.get_text() == "Hello World"
    assert len(history.undo_stack) == 0


@pytest.mark.unit
def test_replace_revert_restores_insert_when_delete_part_fails(monkeypatch):
    buf = TextBuffer("Hello World!")
    cmd = ReplaceCommand(buf, 0, 5, "Greetings")
    cmd.apply()
    delete_part, insert_part = cmd.parts

    def broken_revert():
        raise BufferRangeError("boom")

    monkeypatch.setattr(delete_part, "revert", broken_revert)
    with pytest.raises(BufferRangeError):
        cmd.revert()
    assert buf.get_text() == "Greetings World!"
    assert cmd.executed and insert_part.executed

    monkeypatch.undo()
    cmd.revert()
    assert buf.get_text() == "Hello World!"


@pytest.mark.unit
def test_same_command_cannot_be_logged_twice():
    buf = TextBuffer()
    history = CommandHistory()
    cmd = InsertCommand(buf, "Hi")
    history.execute_command(cmd)
    history.undo()
    with pytest.raises(CommandAlreadyLoggedError):
        history.execute_command(cmd)
    assert buf.get_text() == ""
    assert history.show_history() == ["1. Insert"]
