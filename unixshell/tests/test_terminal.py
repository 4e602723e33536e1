from unixshell.terminal import BufferedSurface, translate_curses_key
from unixshell.vi_editor import KeyEvent, ViEditor


def test_buffered_surface_dispatches_until_unsubscribed() -> None:
    surface = BufferedSurface()
    seen = []
    unsubscribe = surface.subscribe_key_events(seen.append)

    surface.type("a", "Escape")
    unsubscribe()
    surface.type("b")

    assert seen == [KeyEvent("a"), KeyEvent("Escape")]
    assert not surface.active
    assert surface.screen == ""


def test_surface_receives_frames_and_keys() -> None:
    surface = BufferedSurface()
    editor = ViEditor("f", "x", surface=surface)

    assert surface.active
    assert surface.screen.startswith("[x]")

    surface.type("i", "y")
    assert editor.lines == ["yx"]
    assert surface.screen.startswith("y|x")

    surface.type("Escape", ":", "q", "!", "Enter")
    assert editor.closed
    assert not surface.active

    frames = len(surface.frames)
    editor.handle_key(KeyEvent("i"))
    assert len(surface.frames) == frames


def test_curses_key_translation() -> None:
    assert translate_curses_key(27) == KeyEvent("Escape")
    assert translate_curses_key(10) == KeyEvent("Enter")
    assert translate_curses_key(127) == KeyEvent("Backspace")
    assert translate_curses_key(ord("G")) == KeyEvent("G", shift=True)
    assert translate_curses_key(ord("g")) == KeyEvent("g")
    assert translate_curses_key(0) is None
