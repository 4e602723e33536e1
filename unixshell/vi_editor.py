"""Keystroke-driven vi-style editor over an in-memory line buffer.

The editor never touches a real display. It draws through a
:class:`TerminalSurface` and receives :class:`KeyEvent` objects either from the
surface subscription or from direct :meth:`ViEditor.handle_key` calls.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Tuple

SaveCallback = Callable[[str, str], bool]
ExitCallback = Callable[[], None]

UNSAVED_CHANGES_MESSAGE = "No write since last change (add ! to override)"

_WORD_RE = re.compile(r"\S+\s*")

logger = logging.getLogger("unixshell.editor")


class EditorMode(str, enum.Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press using browser-style key names (``"Escape"``, ``"ArrowUp"``...)."""

    key: str
    shift: bool = False
    ctrl: bool = False
    meta: bool = False

    @property
    def printable(self) -> bool:
        return len(self.key) == 1 and not self.ctrl and not self.meta

    def is_plain(self, letter: str) -> bool:
        return self.key == letter and not self.shift

    def is_shifted(self, letter: str) -> bool:
        return self.key == letter.upper() or (self.key == letter and self.shift)


KeyHandler = Callable[[KeyEvent], None]


class TerminalSurface(Protocol):
    def render(self, text: str) -> None:
        ...

    def subscribe_key_events(self, handler: KeyHandler) -> Callable[[], None]:
        ...


class ViEditor:
    def __init__(
        self,
        filename: str,
        content: str = "",
        save_callback: Optional[SaveCallback] = None,
        exit_callback: Optional[ExitCallback] = None,
        surface: Optional[TerminalSurface] = None,
    ) -> None:
        self.filename = filename
        self.lines: List[str] = content.split("\n") if content else [""]
        self.cursor_row = 0
        self.cursor_col = 0
        self.mode = EditorMode.NORMAL
        self.pending_motion: Optional[str] = None
        self.yank_buffer = ""
        self.command_buffer = ""
        self.modified = False
        self.message: Optional[str] = None
        self.closed = False
        self._save_callback = save_callback
        self._exit_callback = exit_callback
        self._surface = surface
        self._unsubscribe: Optional[Callable[[], None]] = None
        if surface is not None:
            self._unsubscribe = surface.subscribe_key_events(self.handle_key)
        self.render()

    # -------------------- public helpers ----------------------
    @property
    def content(self) -> str:
        return "\n".join(self.lines)

    @property
    def cursor(self) -> Tuple[int, int]:
        return self.cursor_row, self.cursor_col

    def press(self, *keys: str) -> None:
        """Feed plain keys; handy for scripted hosts."""

        for key in keys:
            self.handle_key(KeyEvent(key))

    def handle_key(self, event: KeyEvent) -> None:
        if self.closed:
            return
        self.message = None
        if self.mode is EditorMode.NORMAL:
            self._handle_normal(event)
        elif self.mode is EditorMode.INSERT:
            self._handle_insert(event)
        else:
            self._handle_command(event)
        if not self.closed:
            self.render()

    # -------------------- rendering ---------------------------
    def render_text(self) -> str:
        output: List[str] = []
        for index, line in enumerate(self.lines):
            if index != self.cursor_row:
                output.append(line)
                continue
            head, tail = line[: self.cursor_col], line[self.cursor_col :]
            if self.mode is EditorMode.INSERT:
                output.append(f"{head}|{tail}")
            elif tail:
                output.append(f"{head}[{tail[0]}]{tail[1:]}")
            else:
                output.append(f"{head}[█]")

        if self.mode is EditorMode.COMMAND:
            status = f":{self.command_buffer}"
        elif self.message:
            status = self.message
        else:
            modified = "[+]" if self.modified else ""
            position = f"{self.cursor_row + 1},{self.cursor_col + 1}"
            status = (
                f"-- {self.mode.value.upper()} -- {modified} "
                f'"{self.filename}" {len(self.lines)}L  {position}'
            )
        return "\n".join(output) + "\n" + status

    def render(self) -> None:
        if self._surface is not None:
            self._surface.render(self.render_text())

    # -------------------- normal mode -------------------------
    def _current_line(self) -> str:
        return self.lines[self.cursor_row]

    def _handle_normal(self, event: KeyEvent) -> None:
        if self.pending_motion == "d":
            self._handle_delete_motion(event)
            return
        self.pending_motion = None

        key = event.key
        line = self._current_line()
        if key in ("h", "ArrowLeft"):
            self.cursor_col = max(0, self.cursor_col - 1)
        elif key in ("j", "ArrowDown"):
            self.cursor_row = min(len(self.lines) - 1, self.cursor_row + 1)
            self.cursor_col = min(self.cursor_col, len(self._current_line()))
        elif key in ("k", "ArrowUp"):
            self.cursor_row = max(0, self.cursor_row - 1)
            self.cursor_col = min(self.cursor_col, len(self._current_line()))
        elif key in ("l", "ArrowRight"):
            self.cursor_col = min(len(line), self.cursor_col + 1)
        elif key == "0":
            self.cursor_col = 0
        elif key == "$":
            self.cursor_col = len(line)
        elif event.is_shifted("g"):
            self.cursor_row = len(self.lines) - 1
            self.cursor_col = min(self.cursor_col, len(self._current_line()))
        elif event.is_plain("i"):
            self.mode = EditorMode.INSERT
        elif event.is_plain("a"):
            self.cursor_col = min(len(line), self.cursor_col + 1)
            self.mode = EditorMode.INSERT
        elif event.is_plain("o"):
            self.lines.insert(self.cursor_row + 1, "")
            self.cursor_row += 1
            self.cursor_col = 0
            self.mode = EditorMode.INSERT
            self.modified = True
        elif event.is_shifted("o"):
            self.lines.insert(self.cursor_row, "")
            self.cursor_col = 0
            self.mode = EditorMode.INSERT
            self.modified = True
        elif event.is_plain("x"):
            if self.cursor_col < len(line):
                self.lines[self.cursor_row] = line[: self.cursor_col] + line[self.cursor_col + 1 :]
                self.modified = True
        elif event.is_shifted("d"):
            if self.cursor_col < len(line):
                self.lines[self.cursor_row] = line[: self.cursor_col]
                self.modified = True
        elif event.is_plain("d"):
            self.pending_motion = "d"
        elif event.is_shifted("y"):
            self.yank_buffer = line
            self.message = "yanked line"
        elif event.is_plain("p"):
            self._paste()
        elif key == ":":
            self.mode = EditorMode.COMMAND
            self.command_buffer = ""

    def _paste(self) -> None:
        if not self.yank_buffer:
            return
        pasted = self.yank_buffer.split("\n")
        self.lines[self.cursor_row + 1 : self.cursor_row + 1] = pasted
        self.cursor_row += 1
        self.cursor_col = min(self.cursor_col, len(self._current_line()))
        self.modified = True

    def _delete_lines(self, start: int, count: int) -> str:
        removed = self.lines[start : start + count]
        del self.lines[start : start + count]
        if not self.lines:
            self.lines = [""]
        self.cursor_row = min(start, len(self.lines) - 1)
        self.cursor_col = 0
        return "\n".join(removed)

    def _handle_delete_motion(self, event: KeyEvent) -> None:
        self.pending_motion = None
        key = event.key
        row, col = self.cursor_row, self.cursor_col
        line = self.lines[row]
        last_row = len(self.lines) - 1
        deleted = ""
        line_count = 0

        if key == "d":
            line_count = 1
            deleted = self._delete_lines(row, 1)
        elif key in ("j", "ArrowDown"):
            line_count = 2 if row < last_row else 1
            deleted = self._delete_lines(row, line_count)
        elif key in ("k", "ArrowUp"):
            if row > 0:
                line_count = 2
                deleted = self._delete_lines(row - 1, 2)
            else:
                line_count = 1
                deleted = self._delete_lines(row, 1)
        elif key == "$":
            deleted = line[col:]
            self.lines[row] = line[:col]
        elif key == "0":
            deleted = line[:col]
            self.lines[row] = line[col:]
            self.cursor_col = 0
        elif key == "w":
            match = _WORD_RE.match(line, col)
            if match:
                deleted = match.group(0)
                self.lines[row] = line[:col] + line[match.end() :]
        elif key in ("l", "ArrowRight"):
            if col < len(line):
                deleted = line[col]
                self.lines[row] = line[:col] + line[col + 1 :]
        elif key in ("h", "ArrowLeft"):
            if col > 0:
                deleted = line[col - 1]
                self.lines[row] = line[: col - 1] + line[col:]
                self.cursor_col = col - 1
        else:
            return

        if line_count:
            self.yank_buffer = deleted
            self.modified = True
            self.message = f"{line_count} line{'s' if line_count > 1 else ''} deleted"
        elif deleted:
            self.yank_buffer = deleted
            self.modified = True
            self.message = "deleted"

    # -------------------- insert mode -------------------------
    def _handle_insert(self, event: KeyEvent) -> None:
        key = event.key
        line = self._current_line()
        if key == "Escape":
            self.mode = EditorMode.NORMAL
            self.cursor_col = max(0, self.cursor_col - 1)
        elif key == "Enter":
            self.lines[self.cursor_row] = line[: self.cursor_col]
            self.lines.insert(self.cursor_row + 1, line[self.cursor_col :])
            self.cursor_row += 1
            self.cursor_col = 0
            self.modified = True
        elif key == "Backspace":
            if self.cursor_col > 0:
                self.lines[self.cursor_row] = line[: self.cursor_col - 1] + line[self.cursor_col :]
                self.cursor_col -= 1
                self.modified = True
            elif self.cursor_row > 0:
                previous = self.lines[self.cursor_row - 1]
                self.lines[self.cursor_row - 1] = previous + line
                del self.lines[self.cursor_row]
                self.cursor_row -= 1
                self.cursor_col = len(previous)
                self.modified = True
        elif event.printable:
            self.lines[self.cursor_row] = line[: self.cursor_col] + key + line[self.cursor_col :]
            self.cursor_col += 1
            self.modified = True

    # -------------------- command mode ------------------------
    def _handle_command(self, event: KeyEvent) -> None:
        key = event.key
        if key == "Escape":
            self.mode = EditorMode.NORMAL
            self.command_buffer = ""
        elif key == "Enter":
            command = self.command_buffer
            self.command_buffer = ""
            self.execute_command(command)
        elif key == "Backspace":
            self.command_buffer = self.command_buffer[:-1]
            if not self.command_buffer:
                self.mode = EditorMode.NORMAL
        elif event.printable:
            self.command_buffer += key

    def execute_command(self, command: str) -> None:
        self.mode = EditorMode.NORMAL
        if command == "w":
            if self.save():
                self.message = f'"{self.filename}" {len(self.lines)}L written'
        elif command == "q":
            if self.modified:
                self.message = UNSAVED_CHANGES_MESSAGE
            else:
                self.close()
        elif command == "q!":
            self.close()
        elif command in ("wq", "x"):
            if self.save():
                self.close()
        else:
            self.message = f"Not an editor command: {command}"

    # -------------------- session lifecycle -------------------
    def save(self) -> bool:
        written = True
        if self._save_callback is not None:
            written = bool(self._save_callback(self.filename, self.content))
        if not written:
            logger.warning("Could not write %s", self.filename)
            self.message = f"\"{self.filename}\" E212: Can't open file for writing"
            return False
        self.modified = False
        return True

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.pending_motion = None
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._exit_callback is not None:
            self._exit_callback()


__all__ = [
    "EditorMode",
    "KeyEvent",
    "SaveCallback",
    "ExitCallback",
    "TerminalSurface",
    "UNSAVED_CHANGES_MESSAGE",
    "ViEditor",
]
