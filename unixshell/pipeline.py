"""Parsing helpers for the single-stage pipeline understood by the shell.

A command line may end in ``| grep [-i] [-v] pattern`` and/or ``> file`` /
``>> file``. Each helper here takes text and returns the residual text plus
what it extracted, so the session can apply the stages in order.
"""

from __future__ import annotations

import re
import shlex
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

QUOTES = ("'", '"')

_APPEND_RE = re.compile(r"^(.+?)\s*>>\s*(.+)$", re.DOTALL)
_OVERWRITE_RE = re.compile(r"^(.+?)\s*>\s*(.+)$", re.DOTALL)


@dataclass(frozen=True)
class Redirect:
    target: str
    append: bool = False

    @property
    def mode(self) -> str:
        return "append" if self.append else "overwrite"


@dataclass(frozen=True)
class GrepFilter:
    pattern: str
    ignore_case: bool = False
    invert: bool = False

    def matches(self, line: str) -> bool:
        if self.ignore_case:
            found = self.pattern.lower() in line.lower()
        else:
            found = self.pattern in line
        return not found if self.invert else found

    def apply(self, output: str) -> str:
        filtered = "\n".join(line for line in output.split("\n") if self.matches(line))
        if filtered.endswith("\n\n"):
            filtered = filtered[:-1]
        return filtered


def split_quoted(text: str) -> List[str]:
    """Split on whitespace, keeping quoted runs (quotes included) inside one token.

    An unbalanced quote falls back to a plain whitespace split.
    """

    lexer = shlex.shlex(text, posix=False)
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        return list(lexer)
    except ValueError:
        return text.split()


def strip_quotes(text: str) -> str:
    """Remove one layer of matching surrounding quotes."""

    if len(text) >= 2 and text[0] in QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return text


def parse_redirect(text: str) -> Tuple[str, Optional[Redirect]]:
    match = _APPEND_RE.match(text)
    if match:
        return match.group(1).strip(), Redirect(target=match.group(2).strip(), append=True)
    match = _OVERWRITE_RE.match(text)
    if match:
        return match.group(1).strip(), Redirect(target=match.group(2).strip())
    return text, None


def parse_grep_filter(arguments: str) -> Optional[GrepFilter]:
    """Read ``[-i] [-v] pattern`` from the text following ``grep``."""

    ignore_case = False
    invert = False
    pattern: Optional[str] = None
    for token in split_quoted(arguments):
        if token == "-i":
            ignore_case = True
        elif token == "-v":
            invert = True
        elif pattern is None:
            pattern = strip_quotes(token)
    if pattern is None:
        return None
    return GrepFilter(pattern=pattern, ignore_case=ignore_case, invert=invert)


def split_grep_pipe(line: str) -> Tuple[str, Optional[GrepFilter], Optional[Redirect]]:
    """Separate ``cmd | grep ... [> file]`` into the command text, filter and redirect.

    Lines without a pipe into ``grep`` come back untouched.
    """

    head, sep, tail = line.partition("|")
    if not sep:
        return line, None, None
    tail = tail.strip()
    if tail != "grep" and not tail.startswith("grep "):
        return line, None, None
    grep_arguments, redirect = parse_redirect(tail[len("grep"):].strip())
    return head.strip(), parse_grep_filter(grep_arguments), redirect


def _wildcard_regex(pattern: str) -> "re.Pattern[str]":
    translated = "".join(
        ".*" if char == "*" else "." if char == "?" else re.escape(char) for char in pattern
    )
    return re.compile(f"^{translated}$", re.DOTALL)


def expand_wildcards(args: Iterable[str], names: Iterable[str]) -> List[str]:
    """Replace ``*``/``?`` arguments with the matching *names*, in enumeration order.

    An argument with no matches is passed through literally.
    """

    candidates = list(names)
    expanded: List[str] = []
    for arg in args:
        if "*" not in arg and "?" not in arg:
            expanded.append(arg)
            continue
        regex = _wildcard_regex(arg)
        matches = [name for name in candidates if regex.match(name)]
        expanded.extend(matches or [arg])
    return expanded


__all__ = [
    "GrepFilter",
    "Redirect",
    "expand_wildcards",
    "parse_grep_filter",
    "parse_redirect",
    "split_grep_pipe",
    "split_quoted",
    "strip_quotes",
]
