import pytest

from bojkit.editor import Editor, run_editor


def test_initial_text_and_cursor_at_end():
    editor = Editor("abc")
    assert editor.text == "abc"
    assert editor.cursor == len("abc")


def test_insert_at_end_appends():
    editor = Editor("abc")
    editor.insert("x")
    assert editor.text == "abc" + "x"


def test_insert_after_moving_left():
    editor = Editor("abc")
    editor.left()
    editor.insert("x")
    assert editor.text == "ab" + "x" + "c"
    assert editor.cursor == 3


def test_left_at_start_is_noop():
    editor = Editor("ab")
    for _ in range(5):
        editor.left()
    assert editor.cursor == 0
    assert editor.text == "ab"


def test_right_at_end_is_noop():
    editor = Editor("ab")
    editor.right()
    assert editor.cursor == 2
    assert editor.text == "ab"


def test_backspace_at_start_is_noop():
    editor = Editor("ab")
    editor.left()
    editor.left()
    editor.backspace()
    assert editor.text == "ab"


def test_backspace_removes_left_character():
    editor = Editor("abc")
    editor.left()
    editor.backspace()
    assert editor.text == "ac"
    assert editor.cursor == 1


def test_left_then_right_round_trip():
    editor = Editor("hello")
    for _ in range(3):
        editor.left()
    for _ in range(3):
        editor.right()
    editor.insert("!")
    assert editor.text == "hello!"


def test_str_matches_text():
    editor = Editor("xyz")
    editor.left()
    editor.insert("q")
    assert str(editor) == editor.text


def test_execute_commands():
    editor = Editor("ab")
    editor.execute("L")
    editor.execute("P z")
    editor.execute("D")
    editor.execute("B")
    assert editor.text == "az"


def test_run_editor_first_example():
    assert run_editor("abcd", ["P x", "L", "P y"]) == "abcdyx"


def test_run_editor_second_example():
    commands = ["L", "L", "L", "L", "L", "P x", "L", "B", "P y"]
    assert run_editor("abc", commands) == "yxabc"


def test_run_editor_third_example():
    commands = ["B", "B", "P x", "L", "B", "B", "B", "P y", "D", "D", "P z"]
    assert run_editor("dmih", commands) == "yxz"


@pytest.mark.parametrize("command", ["", "X", "P", "P xy", "L L"])
def test_unknown_command_rejected(command):
    with pytest.raises(ValueError):
        Editor("abc").execute(command)


def test_insert_requires_single_character():
    with pytest.raises(ValueError):
        Editor("abc").insert("")