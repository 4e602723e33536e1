from unixshell.vi_editor import UNSAVED_CHANGES_MESSAGE, EditorMode, KeyEvent, ViEditor


def _recording_editor(content: str = "", result: bool = True):
    saved = []
    exited = []

    def save(filename: str, text: str) -> bool:
        saved.append((filename, text))
        return result

    editor = ViEditor("a.txt", content, save, lambda: exited.append(True))
    return editor, saved, exited


def test_mode_transitions() -> None:
    editor = ViEditor("a.txt", "abc")
    assert editor.mode is EditorMode.NORMAL

    editor.press("i")
    assert editor.mode is EditorMode.INSERT
    editor.press("Escape")
    assert editor.mode is EditorMode.NORMAL

    editor.press(":")
    assert editor.mode is EditorMode.COMMAND
    editor.press("w", "q", "Backspace")
    assert editor.command_buffer == "w"
    editor.press("Backspace")
    assert editor.mode is EditorMode.NORMAL

    editor.press(":", "x", "Escape")
    assert editor.mode is EditorMode.NORMAL
    assert editor.command_buffer == ""


def test_cursor_motions_are_clamped() -> None:
    editor = ViEditor("a.txt", "long line\nab\nlast")
    editor.press("$")
    assert editor.cursor == (0, 9)
    editor.press("j")
    assert editor.cursor == (1, 2)
    editor.press("G", "0")
    assert editor.cursor == (2, 0)
    editor.press("k", "k", "k", "h")
    assert editor.cursor == (0, 0)


def test_dd_removes_line_and_fills_yank_buffer() -> None:
    editor = ViEditor("a.txt", "one\ntwo")
    editor.press("d", "d")

    assert editor.lines == ["two"]
    assert editor.yank_buffer == "one"
    assert editor.modified
    assert editor.message == "1 line deleted"

    editor.press("d", "d")
    assert editor.lines == [""]
    assert editor.cursor == (0, 0)


def test_line_delete_motions() -> None:
    editor = ViEditor("a.txt", "1\n2\n3")
    editor.press("d", "j")
    assert editor.lines == ["3"]
    assert editor.message == "2 lines deleted"

    editor.press("p")
    assert editor.lines == ["3", "1", "2"]
    assert editor.cursor_row == 1

    editor.press("d", "k")
    assert editor.lines == ["2"]
    assert editor.cursor_row == 0


def test_character_delete_motions() -> None:
    editor = ViEditor("a.txt", "hello world")
    editor.press("d", "w")
    assert editor.lines == ["world"]
    assert editor.yank_buffer == "hello "

    editor.press("l", "l", "d", "$")
    assert editor.lines == ["wo"]
    assert editor.message == "deleted"

    editor.press("h", "d", "0")
    assert editor.lines == ["o"]
    assert editor.cursor == (0, 0)

    other = ViEditor("b.txt", "abc")
    other.press("l", "d", "h")
    assert other.lines == ["bc"]
    assert other.cursor == (0, 0)
    other.press("d", "l")
    assert other.lines == ["c"]


def test_unknown_delete_motion_is_ignored() -> None:
    editor = ViEditor("a.txt", "abc")
    editor.press("d", "z", "x")

    assert editor.pending_motion is None
    assert editor.lines == ["bc"]


def test_x_and_shift_d_only_mark_real_changes() -> None:
    empty = ViEditor("a.txt", "")
    empty.press("x")
    empty.handle_key(KeyEvent("d", shift=True))
    assert not empty.modified

    editor = ViEditor("a.txt", "abc")
    editor.press("x")
    assert editor.lines == ["bc"]
    editor.press("l", "D")
    assert editor.lines == ["b"]
    assert editor.modified


def test_insert_enter_and_backspace_join_lines() -> None:
    editor = ViEditor("a.txt", "abcd")
    editor.press("l", "l", "i", "Enter")
    assert editor.lines == ["ab", "cd"]
    assert editor.cursor == (1, 0)

    editor.press("Backspace")
    assert editor.lines == ["abcd"]
    assert editor.cursor == (0, 2)

    editor.press("Z", "Escape")
    assert editor.lines == ["abZcd"]
    assert editor.cursor == (0, 2)


def test_append_and_open_lines() -> None:
    editor = ViEditor("a.txt", "a")
    editor.press("o", "b", "Escape")
    assert editor.lines == ["a", "b"]

    editor.press("O", "c", "Escape")
    assert editor.lines == ["a", "c", "b"]

    editor.press("G", "a", "!")
    assert editor.lines == ["a", "c", "b!"]


def test_yank_and_paste() -> None:
    editor = ViEditor("a.txt", "a\nb")
    editor.press("Y")
    assert editor.message == "yanked line"
    assert not editor.modified

    editor.press("p")
    assert editor.lines == ["a", "a", "b"]
    assert editor.cursor_row == 1
    assert editor.message is None


def test_quit_refuses_unsaved_changes() -> None:
    editor, saved, exited = _recording_editor("x")
    editor.press("i", "y", "Escape", ":", "q", "Enter")

    assert editor.message == UNSAVED_CHANGES_MESSAGE
    assert not editor.closed

    editor.press(":", "w", "Enter")
    assert saved == [("a.txt", "yx")]
    assert editor.message == '"a.txt" 1L written'

    editor.press(":", "q", "Enter")
    assert editor.closed
    assert exited == [True]


def test_write_quit_variants() -> None:
    for command in ("wq", "x"):
        editor, saved, exited = _recording_editor("x")
        editor.press("x", ":", *command, "Enter")
        assert saved == [("a.txt", "")]
        assert exited == [True]


def test_force_quit_discards_changes() -> None:
    editor, saved, exited = _recording_editor("x")
    editor.press("x", ":", "q", "!", "Enter")

    assert saved == []
    assert exited == [True]


def test_failed_save_keeps_editor_open() -> None:
    editor, saved, exited = _recording_editor("x", result=False)
    editor.press("x", ":", "w", "q", "Enter")

    assert saved == [("a.txt", "")]
    assert not editor.closed
    assert editor.modified
    assert "E212" in editor.message


def test_unknown_command_reports_message() -> None:
    editor = ViEditor("a.txt", "")
    editor.press(":", "s", "e", "t", "Enter")
    assert editor.message == "Not an editor command: set"
    assert editor.mode is EditorMode.NORMAL


def test_render_text_marks_cursor_and_status() -> None:
    editor = ViEditor("f", "ab\n")
    assert editor.render_text() == '[a]b\n\n-- NORMAL --  "f" 2L  1,1'

    editor.press("j")
    assert editor.render_text().split("\n")[1] == "[█]"

    editor.press("i", "z")
    assert editor.render_text() == 'ab\nz|\n-- INSERT -- [+] "f" 2L  2,2'

    editor.press("Escape", ":", "w")
    assert editor.render_text().endswith("\n:w")
