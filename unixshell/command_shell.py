#!/usr/bin/env python3
"""In-memory Unix-style shell: command registry, pipeline execution and REPL host."""

from __future__ import annotations

import argparse
import datetime as _dt
import logging
import os
import readline
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from unixshell.example_files import create_example_files
from unixshell.filesystem import (
    DirectoryNode,
    FileNode,
    FileSystemNode,
    default_file_system,
    tree_from_json,
    walk,
)
from unixshell.paths import join_path, parent_and_name, resolve_path
from unixshell.permissions import (
    DIRECTORY_MODE,
    FILE_MODE,
    FileOwner,
    ROOT_USER,
    can_write,
    get_owner,
    home_for,
)
from unixshell.persistence import (
    DEFAULT_PREFIX,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    PersistenceOptions,
    ShellPersistence,
)
from unixshell.pipeline import expand_wildcards, parse_redirect, split_grep_pipe, strip_quotes
from unixshell.terminal import CursesSurface
from unixshell.vi_editor import TerminalSurface, ViEditor

OS_NAME = "UnixShell"
OS_RELEASE = "1.0.0"

CLEAR_SENTINEL = "__CLEAR__"
VI_OPENED_SENTINEL = "__VI_OPENED__"
USER_SWITCHED_PREFIX = "__USER_SWITCHED__:"

DEFAULT_PATH = "/usr/local/bin:/usr/bin:/bin"
DEFAULT_SHELL = "/bin/bash"

logger = logging.getLogger("unixshell.shell")


# ---------------------------------------------------------------------------
# Command invocation and registry types
# ---------------------------------------------------------------------------


@dataclass
class CommandInvocation:
    name: str
    args: List[str]
    piped: bool = False


Handler = Callable[["ShellSession", CommandInvocation], str]


@dataclass
class Command:
    name: str
    handler: Handler
    summary: str = ""
    usage: str = ""


class CommandRegistry:
    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}

    def register(self, command: Command) -> None:
        self._commands[command.name] = command

    def get(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def names(self) -> List[str]:
        return list(self._commands.keys())

    def values(self) -> Iterable[Command]:
        return self._commands.values()

    def __contains__(self, name: object) -> bool:
        return name in self._commands


@dataclass
class UserState:
    user: str
    home: str
    path: str


@dataclass
class CompletionResult:
    type: str
    matches: List[str]
    prefix: str
    file_prefix: Optional[str] = None


# ---------------------------------------------------------------------------
# Shell session
# ---------------------------------------------------------------------------


class ShellSession:
    def __init__(
        self,
        file_system: Union[DirectoryNode, Mapping[str, Any], None] = None,
        username: str = "user",
        custom_commands: Optional[Mapping[str, Handler]] = None,
        persistence: Optional[PersistenceOptions] = None,
        store: Optional[KeyValueStore] = None,
        surface: Optional[TerminalSurface] = None,
        on_editor_exit: Optional[Callable[[], None]] = None,
    ) -> None:
        if file_system is not None and not isinstance(file_system, DirectoryNode):
            file_system = tree_from_json(file_system)

        self._persistence: Optional[ShellPersistence] = None
        if persistence is not None and persistence.enabled:
            self._persistence = ShellPersistence(store if store is not None else MemoryStore(), persistence.prefix)

        loaded = self._persistence.load() if self._persistence else None
        if loaded is not None:
            self.root = loaded.root
            self.current_user = loaded.current_user
            self.current_path = loaded.current_path
        else:
            self.root = file_system if file_system is not None else default_file_system(username)
            self.current_user = username
            self.current_path = f"/home/{username}"

        self.environment: Dict[str, str] = {
            "USER": self.current_user,
            "HOME": home_for(self.current_user),
            "PWD": self.current_path,
            "PATH": DEFAULT_PATH,
            "SHELL": DEFAULT_SHELL,
        }
        self.command_history: List[str] = []
        self.user_stack: List[UserState] = []
        self.registry = CommandRegistry()
        self.surface = surface
        self.editor: Optional[ViEditor] = None
        self._on_editor_exit = on_editor_exit

        for definition in builtin_commands():
            self.register(definition)
        for name, handler in (custom_commands or {}).items():
            self.register(Command(name=name, handler=handler))

    # -------------------- registry helpers --------------------
    def register(self, command: Command) -> None:
        self.registry.register(command)

    @property
    def persistence_enabled(self) -> bool:
        return self._persistence is not None

    # -------------------- path and node helpers ---------------
    def resolve_path(self, path: str) -> str:
        return resolve_path(path, self.current_path, self.environment["HOME"])

    def get_node(self, path: str) -> Optional[FileSystemNode]:
        return walk(self.root, self.resolve_path(path))

    def get_owner(self, path: str) -> FileOwner:
        return get_owner(self.resolve_path(path), self.current_user)

    def can_write(self, path: str) -> bool:
        return can_write(self.resolve_path(path), self.current_user)

    def write_to_file(self, file_path: str, content: str, mode: str = "overwrite") -> Optional[str]:
        """Write *content* to *file_path*; returns an error line or ``None`` on success."""

        parent_path, name = parent_and_name(self.resolve_path(file_path))
        if not name:
            return f"bash: {file_path}: Is a directory"
        parent = walk(self.root, parent_path)
        if parent is None:
            return f"bash: {file_path}: No such file or directory"
        if not parent.is_dir:
            return f"bash: {file_path}: Not a directory"
        existing = parent.entries.get(name)
        if existing is not None and existing.is_dir:
            return f"bash: {file_path}: Is a directory"

        if mode == "append" and existing is not None:
            existing.content += content
        else:
            parent.entries[name] = FileNode(content)
        return None

    # -------------------- execution ---------------------------
    def execute(self, command_line: str) -> str:
        if not command_line.strip():
            return ""
        self.command_history.append(command_line)

        command_text, grep, redirect = split_grep_pipe(command_line)
        if redirect is None:
            command_text, redirect = parse_redirect(command_text)

        parts = command_text.split()
        name = parts[0] if parts else ""
        command = self.registry.get(name)
        if command is None:
            return f"{name}: command not found"

        args = self.expand_wildcards(parts[1:])
        invocation = CommandInvocation(name=name, args=args, piped=grep is not None)
        try:
            output = command.handler(self, invocation)
        except Exception as exc:
            logger.error("Command %s failed: %s", name, exc)
            return f"Error executing {name}: {exc}"

        if grep is not None and output:
            output = grep.apply(output)

        if redirect is not None:
            error = self.write_to_file(redirect.target, output, redirect.mode)
            if error:
                return error
            self.save_to_storage()
            return ""

        self.save_to_storage()
        return output

    def expand_wildcards(self, args: Sequence[str]) -> List[str]:
        directory = walk(self.root, self.current_path)
        if directory is None or not directory.is_dir:
            return list(args)
        return expand_wildcards(args, directory.entries.keys())

    # -------------------- persistence -------------------------
    def save_to_storage(self) -> None:
        if self._persistence is not None:
            self._persistence.save(self.root, self.current_user, self.current_path)

    def clear_storage(self) -> None:
        if self._persistence is not None:
            self._persistence.clear()

    # -------------------- user switching ----------------------
    def switch_user(self, user: str) -> str:
        self.user_stack.append(
            UserState(user=self.current_user, home=self.environment["HOME"], path=self.current_path)
        )
        self.current_user = user
        self.environment["USER"] = user
        self.environment["HOME"] = home_for(user)
        self.environment["PWD"] = self.current_path
        return USER_SWITCHED_PREFIX + user

    def restore_user(self) -> Optional[str]:
        if not self.user_stack:
            return None
        previous = self.user_stack.pop()
        self.current_user = previous.user
        self.environment["USER"] = previous.user
        self.environment["HOME"] = previous.home
        self.current_path = previous.path
        self.environment["PWD"] = previous.path
        return USER_SWITCHED_PREFIX + previous.user

    # -------------------- editor bootstrap --------------------
    def open_editor(self, filename: str) -> str:
        node = self.get_node(filename)
        content = node.content if node is not None and not node.is_dir else ""

        def save(target: str, text: str) -> bool:
            written = self.write_to_file(target, text, "overwrite") is None
            if written:
                self.save_to_storage()
            return written

        def exit_editor() -> None:
            self.editor = None
            if self._on_editor_exit is not None:
                self._on_editor_exit()

        self.editor = ViEditor(filename, content, save, exit_editor, surface=self.surface)
        return VI_OPENED_SENTINEL

    # -------------------- completion --------------------------
    def get_completions(self, partial: str) -> CompletionResult:
        text = partial.lstrip()
        if not any(char.isspace() for char in text):
            matches = [name for name in self.registry.names() if name.startswith(text)]
            return CompletionResult(type="command", matches=matches, prefix=text)

        path_prefix = "" if text[-1].isspace() else text.split()[-1]
        search_dir = self.current_path
        file_prefix = path_prefix
        if "/" in path_prefix:
            directory_part, _, file_prefix = path_prefix.rpartition("/")
            search_dir = self.resolve_path(directory_part + "/")

        node = walk(self.root, search_dir)
        if node is None or not node.is_dir:
            return CompletionResult(type="path", matches=[], prefix=path_prefix)
        matches = [
            name + "/" if child.is_dir else name
            for name, child in node.entries.items()
            if name.startswith(file_prefix)
        ]
        return CompletionResult(type="path", matches=matches, prefix=path_prefix, file_prefix=file_prefix)


# ---------------------------------------------------------------------------
# Built-in command implementations
# ---------------------------------------------------------------------------


def command(name: str, summary: str, usage: str) -> Callable[[Handler], Handler]:
    def decorator(func: Handler) -> Handler:
        func.__command_definition__ = Command(name=name, handler=func, summary=summary, usage=usage)
        return func

    return decorator


def builtin_commands() -> List[Command]:
    return [
        obj.__command_definition__
        for obj in list(globals().values())
        if callable(obj) and hasattr(obj, "__command_definition__")
    ]


def _split_flags(args: Sequence[str]) -> Tuple[str, List[str]]:
    flags = "".join(arg[1:] for arg in args if arg.startswith("-"))
    operands = [arg for arg in args if not arg.startswith("-")]
    return flags, operands


# -------------------- system commands -----------------------


@command(name="help", summary="List available commands", usage="help [command]")
def help_command(shell: ShellSession, invocation: CommandInvocation) -> str:
    if invocation.args:
        name = invocation.args[0]
        definition = shell.registry.get(name)
        if definition is None:
            return f"help: no help topics match '{name}'"
        lines = [name, "-" * len(name)]
        if definition.summary:
            lines.append(definition.summary)
        if definition.usage:
            lines.append(f"Usage: {definition.usage}")
        return "\n".join(lines)

    entries = []
    for name in sorted(shell.registry.names()):
        summary = shell.registry.get(name).summary
        entries.append(f"  {name:10s} {summary}".rstrip())
    return "Available commands:\n" + "\n".join(entries) + "\n\nType any command to try it out!"


@command(name="clear", summary="Clear the terminal screen", usage="clear")
def clear(shell: ShellSession, _: CommandInvocation) -> str:
    return CLEAR_SENTINEL


@command(name="echo", summary="Print arguments", usage="echo [text...]")
def echo(shell: ShellSession, invocation: CommandInvocation) -> str:
    return strip_quotes(" ".join(invocation.args))


@command(name="whoami", summary="Show current user", usage="whoami")
def whoami(shell: ShellSession, _: CommandInvocation) -> str:
    return shell.environment["USER"]


@command(name="date", summary="Show current time", usage="date")
def date(shell: ShellSession, _: CommandInvocation) -> str:
    return _dt.datetime.now().strftime("%a %b %d %Y %H:%M:%S")


@command(name="uname", summary="Display system information", usage="uname [-a]")
def uname(shell: ShellSession, invocation: CommandInvocation) -> str:
    if "-a" in invocation.args:
        return f"{OS_NAME} {OS_RELEASE} {OS_NAME} Terminal x86_64 GNU/Python"
    return OS_NAME


@command(name="env", summary="List environment variables", usage="env")
def env(shell: ShellSession, _: CommandInvocation) -> str:
    return "\n".join(f"{key}={value}" for key, value in shell.environment.items())


@command(name="history", summary="Show command history", usage="history")
def history(shell: ShellSession, _: CommandInvocation) -> str:
    return "\n".join(f"{index}  {line}" for index, line in enumerate(shell.command_history, start=1))


@command(name="ps", summary="List running processes", usage="ps")
def ps(shell: ShellSession, _: CommandInvocation) -> str:
    processes = (
        (1, "?", "0:01", "init"),
        (100, "pts/0", "0:00", "bash"),
        (101, "pts/0", "0:00", "ps"),
    )
    lines = ["  PID TTY          TIME CMD"]
    for pid, tty, time, cmd in processes:
        lines.append(f"{pid:5d} {tty:12s} {time:>8s} {cmd}")
    return "\n".join(lines) + "\n"


# -------------------- filesystem commands -------------------


def _human_size(size: int) -> str:
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{int(size / 1024 + 0.5)}K"
    return f"{int(size / (1024 * 1024) + 0.5)}M"


def _format_long_entry(shell: ShellSession, directory: str, name: str, node: FileSystemNode, human: bool) -> str:
    owner = get_owner(join_path(directory, name), shell.current_user)
    if node.is_dir:
        mode, links, size = DIRECTORY_MODE, "2", "4096"
    else:
        mode, links = FILE_MODE, "1"
        size = _human_size(len(node.content)) if human else str(len(node.content))
    now = _dt.datetime.now()
    stamp = f"{now:%b} {now.day}, {now:%I:%M %p}"
    width = 5 if human else 8
    return f"{mode} {links} {owner.user:8s} {owner.group:8s} {size:>{width}s} {stamp} {name}"


def _format_listing(shell: ShellSession, path: str, node: DirectoryNode, flags: str, piped: bool) -> Optional[str]:
    names = [name for name in node.entries if "a" in flags or not name.startswith(".")]
    if not names:
        return None
    names.sort(key=lambda name: (not node.entries[name].is_dir, name))
    if "l" in flags:
        human = "h" in flags
        return "\n".join(_format_long_entry(shell, path, name, node.entries[name], human) for name in names)
    formatted = [name + "/" if node.entries[name].is_dir else name for name in names]
    return "\n".join(formatted) if piped else "    ".join(formatted)


@command(name="ls", summary="List directory contents", usage="ls [-alh] [path...]")
def ls(shell: ShellSession, invocation: CommandInvocation) -> str:
    flags, targets = _split_flags(invocation.args)
    if not targets:
        targets = [shell.current_path]

    results: List[str] = []
    for target in targets:
        path = shell.current_path if target == "." else shell.resolve_path(target)
        node = walk(shell.root, path)
        if node is None:
            results.append(f"ls: cannot access '{target}': No such file or directory")
            continue
        if not node.is_dir:
            results.append(target)
            continue
        listing = _format_listing(shell, path, node, flags, invocation.piped)
        if listing is not None:
            results.append(listing)
    return "\n".join(results)


@command(name="cd", summary="Change directory", usage="cd [path]")
def cd(shell: ShellSession, invocation: CommandInvocation) -> str:
    if not invocation.args:
        shell.current_path = shell.environment["HOME"]
        shell.environment["PWD"] = shell.current_path
        return ""

    target = invocation.args[0]
    path = shell.resolve_path(target)
    node = walk(shell.root, path)
    if node is None:
        return f"cd: {target}: No such file or directory"
    if not node.is_dir:
        return f"cd: {target}: Not a directory"
    shell.current_path = path
    shell.environment["PWD"] = path
    return ""


@command(name="pwd", summary="Print working directory", usage="pwd")
def pwd(shell: ShellSession, _: CommandInvocation) -> str:
    return shell.current_path


@command(name="cat", summary="Print file contents", usage="cat <path>")
def cat(shell: ShellSession, invocation: CommandInvocation) -> str:
    if not invocation.args:
        return "cat: missing file operand"
    target = invocation.args[0]
    node = shell.get_node(target)
    if node is None:
        return f"cat: {target}: No such file or directory"
    if node.is_dir:
        return f"cat: {target}: Is a directory"
    return node.content


def _writable_parent(shell: ShellSession, target: str, tool: str, action: str) -> Union[DirectoryNode, str]:
    """Return the parent directory of *target* or the error line explaining why not."""

    path = shell.resolve_path(target)
    if not can_write(path, shell.current_user):
        return f"{tool}: {action} '{target}': Permission denied"
    parent_path, _ = parent_and_name(path)
    parent = walk(shell.root, parent_path)
    if parent is None:
        return f"{tool}: {action} '{target}': No such file or directory"
    if not parent.is_dir:
        return f"{tool}: {action} '{target}': Not a directory"
    return parent


@command(name="mkdir", summary="Create directory", usage="mkdir <path>")
def mkdir(shell: ShellSession, invocation: CommandInvocation) -> str:
    if not invocation.args:
        return "mkdir: missing operand"
    target = invocation.args[0]
    parent = _writable_parent(shell, target, "mkdir", "cannot create directory")
    if isinstance(parent, str):
        return parent
    _, name = parent_and_name(shell.resolve_path(target))
    if not name or name in parent.entries:
        return f"mkdir: cannot create directory '{target}': File exists"
    parent.entries[name] = DirectoryNode()
    return ""


@command(name="touch", summary="Create empty file", usage="touch <path>")
def touch(shell: ShellSession, invocation: CommandInvocation) -> str:
    if not invocation.args:
        return "touch: missing file operand"
    target = invocation.args[0]
    parent = _writable_parent(shell, target, "touch", "cannot touch")
    if isinstance(parent, str):
        return parent
    _, name = parent_and_name(shell.resolve_path(target))
    if name and name not in parent.entries:
        parent.entries[name] = FileNode()
    return ""


@command(name="rm", summary="Remove files or directories", usage="rm [-rfv] <path...>")
def rm(shell: ShellSession, invocation: CommandInvocation) -> str:
    flags, targets = _split_flags(invocation.args)
    if not targets:
        return "rm: missing operand"
    recursive = "r" in flags or "R" in flags
    force = "f" in flags
    verbose = "v" in flags

    removed: List[str] = []
    errors: List[str] = []
    for target in targets:
        parent_path, name = parent_and_name(shell.resolve_path(target))
        if not can_write(parent_path, shell.current_user):
            errors.append(f"rm: cannot remove '{target}': Permission denied")
            continue
        parent = walk(shell.root, parent_path)
        if parent is None or not parent.is_dir or name not in parent.entries:
            if not force:
                errors.append(f"rm: cannot remove '{target}': No such file or directory")
            continue
        if parent.entries[name].is_dir and not recursive:
            if not force:
                errors.append(f"rm: cannot remove '{target}': Is a directory")
            continue
        del parent.entries[name]
        if verbose:
            removed.append(f"removed '{target}'")
    return "\n".join(removed + errors)


def _render_tree(node: DirectoryNode, prefix: str = "") -> List[str]:
    lines: List[str] = []
    entries = list(node.entries.items())
    for index, (name, child) in enumerate(entries):
        last = index == len(entries) - 1
        lines.append(prefix + ("└── " if last else "├── ") + name + ("/" if child.is_dir else ""))
        if child.is_dir:
            lines.extend(_render_tree(child, prefix + ("    " if last else "│   ")))
    return lines


@command(name="tree", summary="Display the current directory as a tree", usage="tree")
def tree(shell: ShellSession, _: CommandInvocation) -> str:
    node = walk(shell.root, shell.current_path)
    if node is None or not node.is_dir:
        return f"tree: {shell.current_path}: No such file or directory"
    header = "/" if shell.current_path == "/" else shell.current_path + "/"
    return "".join(line + "\n" for line in [header] + _render_tree(node))


@command(name="vi", summary="Edit a file with the vi editor", usage="vi [path]")
def vi(shell: ShellSession, invocation: CommandInvocation) -> str:
    return shell.open_editor(invocation.args[0] if invocation.args else "untitled")


@command(name="vim", summary="Edit a file with the vi editor", usage="vim [path]")
def vim(shell: ShellSession, invocation: CommandInvocation) -> str:
    return shell.open_editor(invocation.args[0] if invocation.args else "untitled")


# -------------------- user sessions -------------------------


@command(name="su", summary="Switch user", usage="su [user]")
def su(shell: ShellSession, invocation: CommandInvocation) -> str:
    return shell.switch_user(invocation.args[0] if invocation.args else ROOT_USER)


@command(name="sudo", summary="Run a command as another user", usage="sudo <command> [args...]")
def sudo(shell: ShellSession, invocation: CommandInvocation) -> str:
    if not invocation.args:
        return "usage: sudo command"
    name, args = invocation.args[0], invocation.args[1:]
    if name == "su":
        return su(shell, CommandInvocation(name="su", args=args, piped=invocation.piped))
    definition = shell.registry.get(name)
    if definition is None:
        return f"sudo: {name}: command not found"
    return definition.handler(shell, CommandInvocation(name=name, args=args, piped=invocation.piped))


@command(name="exit", summary="Return to the previous user session", usage="exit")
def exit_command(shell: ShellSession, _: CommandInvocation) -> str:
    switched = shell.restore_user()
    if switched is None:
        return "exit: no other user session to return to"
    return switched


# -------------------- REPL loop ------------------------------


class Completer:
    def __init__(self, shell: ShellSession) -> None:
        self.shell = shell

    def options(self, buffer: str) -> List[str]:
        result = self.shell.get_completions(buffer)
        if result.type == "command":
            return list(result.matches)
        directory_part = result.prefix[: len(result.prefix) - len(result.file_prefix or "")]
        return [directory_part + match for match in result.matches]

    def complete(self, text: str, state: int) -> Optional[str]:
        options = self.options(readline.get_line_buffer())
        if state < len(options):
            return options[state]
        return None


class Shell:
    def __init__(
        self,
        username: str,
        state_path: Optional[Path] = None,
        prefix: str = DEFAULT_PREFIX,
        examples: bool = False,
    ) -> None:
        self.surface = CursesSurface()
        persistence = PersistenceOptions(enabled=True, prefix=prefix) if state_path else None
        store = JsonFileStore(state_path) if state_path else None
        self.session = ShellSession(
            file_system=create_example_files(username) if examples else None,
            username=username,
            persistence=persistence,
            store=store,
            surface=self.surface,
        )
        self.completer = Completer(self.session)
        readline.set_completer(self.completer.complete)
        readline.set_completer_delims(" \t\n")
        readline.parse_and_bind("tab: complete")

    def prompt(self) -> str:
        home = self.session.environment["HOME"]
        path = self.session.current_path
        if path == home or path.startswith(home + "/"):
            path = "~" + path[len(home):]
        marker = "#" if self.session.current_user == ROOT_USER else "$"
        return f"{self.session.current_user}@{OS_NAME.lower()}:{path}{marker} "

    def handle_output(self, output: str) -> None:
        if output == CLEAR_SENTINEL:
            print("\033[2J\033[H", end="")
        elif output == VI_OPENED_SENTINEL:
            self.surface.run()
        elif output.startswith(USER_SWITCHED_PREFIX):
            return
        elif output:
            print(output.rstrip("\n"))

    def run(self) -> None:
        while True:
            try:
                line = input(self.prompt())
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue
            self.handle_output(self.session.execute(line))


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> int:
    args_list = list(sys.argv[1:] if argv is None else argv)
    parser = argparse.ArgumentParser(prog="unixshell", add_help=True)
    parser.add_argument("--user", default=os.environ.get("UNIXSHELL_USER", "user"), help="Initial user name")
    parser.add_argument(
        "--state",
        metavar="PATH",
        default=os.environ.get("UNIXSHELL_STATE"),
        help="JSON file used to persist the filesystem between runs",
    )
    parser.add_argument("--prefix", default=os.environ.get("UNIXSHELL_PREFIX", DEFAULT_PREFIX), help="Key prefix for saved state")
    parser.add_argument("--examples", action="store_true", help="Start from the example home directory")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Command to execute non-interactively")
    parsed = parser.parse_args(args_list)

    logging.basicConfig(level=parsed.log_level.upper(), format="[%(asctime)s] %(levelname)s: %(message)s")
    shell = Shell(
        parsed.user,
        state_path=Path(parsed.state) if parsed.state else None,
        prefix=parsed.prefix,
        examples=parsed.examples,
    )

    if parsed.command:
        shell.handle_output(shell.session.execute(" ".join(parsed.command)))
        return 0

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
