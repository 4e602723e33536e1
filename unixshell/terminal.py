"""Terminal surfaces the editor can draw on."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from unixshell.vi_editor import KeyEvent, KeyHandler

try:
    import curses  # full-screen editor in the interactive shell
except ImportError:  # pragma: no cover - platform dependent
    curses = None


class BufferedSurface:
    """Keeps the last rendered frame in memory and dispatches keys on request."""

    def __init__(self) -> None:
        self.frames: List[str] = []
        self._handlers: Dict[int, KeyHandler] = {}
        self._next_token = 0

    @property
    def screen(self) -> str:
        return self.frames[-1] if self.frames else ""

    @property
    def active(self) -> bool:
        return bool(self._handlers)

    def render(self, text: str) -> None:
        self.frames.append(text)

    def subscribe_key_events(self, handler: KeyHandler) -> Callable[[], None]:
        token = self._next_token
        self._next_token += 1
        self._handlers[token] = handler

        def unsubscribe() -> None:
            self._handlers.pop(token, None)

        return unsubscribe

    def send(self, event: KeyEvent) -> None:
        for handler in list(self._handlers.values()):
            handler(event)

    def type(self, *keys: str) -> None:
        for key in keys:
            self.send(KeyEvent(key))


_CURSES_KEYS = {
    27: "Escape",
    10: "Enter",
    13: "Enter",
    127: "Backspace",
    8: "Backspace",
    9: "Tab",
}


def translate_curses_key(code: int) -> Optional[KeyEvent]:
    """Map a ``getch`` code to a :class:`KeyEvent`; ``None`` for keys we ignore."""

    if code in _CURSES_KEYS:
        return KeyEvent(_CURSES_KEYS[code])
    if curses is not None:
        named = {
            curses.KEY_BACKSPACE: "Backspace",
            curses.KEY_LEFT: "ArrowLeft",
            curses.KEY_RIGHT: "ArrowRight",
            curses.KEY_UP: "ArrowUp",
            curses.KEY_DOWN: "ArrowDown",
            curses.KEY_ENTER: "Enter",
        }
        if code in named:
            return KeyEvent(named[code])
    if 32 <= code <= 126:
        char = chr(code)
        return KeyEvent(char, shift=char.isupper())
    return None


class CursesSurface(BufferedSurface):
    """Full-screen surface; :meth:`run` pumps keys until every subscriber has left."""

    def run(self) -> None:
        if curses is None:
            raise RuntimeError("curses not available")
        curses.wrapper(self._main)

    def _draw(self, stdscr) -> None:
        stdscr.erase()
        height, width = stdscr.getmaxyx()
        lines = self.screen.split("\n")
        body, status = lines[:-1], lines[-1] if lines else ""
        for row, text in enumerate(body[: max(1, height - 1)]):
            try:
                stdscr.addstr(row, 0, text[: width - 1])
            except curses.error:
                pass
        try:
            stdscr.addstr(height - 1, 0, status[: width - 1], curses.A_REVERSE)
        except curses.error:
            pass
        stdscr.refresh()

    def _main(self, stdscr) -> None:
        curses.set_escdelay(25)
        while self.active:
            self._draw(stdscr)
            event = translate_curses_key(stdscr.getch())
            if event is not None:
                self.send(event)


__all__ = ["BufferedSurface", "CursesSurface", "translate_curses_key"]
