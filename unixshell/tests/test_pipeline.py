from __future__ import annotations

from unixshell.pipeline import (
    GrepFilter,
    Redirect,
    expand_wildcards,
    parse_grep_filter,
    parse_redirect,
    split_grep_pipe,
    split_quoted,
    strip_quotes,
)


def test_split_quoted_keeps_quoted_whitespace() -> None:
    assert split_quoted('-i "hello world" x') == ["-i", '"hello world"', "x"]
    assert split_quoted("a  'b c'   e") == ["a", "'b c'", "e"]
    assert split_quoted("it's #1") == ["it's", "#1"]
    assert split_quoted("   ") == []


def test_split_quoted_tolerates_unbalanced_quote() -> None:
    assert split_quoted('"open quote') == ['"open', "quote"]
    assert parse_grep_filter('"open') == GrepFilter(pattern='"open')


def test_strip_quotes_removes_one_matching_layer() -> None:
    assert strip_quotes('"abc"') == "abc"
    assert strip_quotes("'a'") == "a"
    assert strip_quotes("\"'a'\"") == "'a'"
    assert strip_quotes('"abc') == '"abc'


def test_parse_redirect_prefers_append() -> None:
    assert parse_redirect("echo hi >> out.txt") == ("echo hi", Redirect("out.txt", append=True))
    assert parse_redirect("echo hi>out.txt") == ("echo hi", Redirect("out.txt"))
    assert parse_redirect("ls -l") == ("ls -l", None)


def test_parse_grep_filter_flags_and_pattern() -> None:
    grep = parse_grep_filter('-v -i "Read Me" extra')
    assert grep == GrepFilter(pattern="Read Me", ignore_case=True, invert=True)
    assert parse_grep_filter("-i") is None


def test_split_grep_pipe_carries_redirect_forward() -> None:
    command, grep, redirect = split_grep_pipe("ls -a | grep txt > found.txt")
    assert command == "ls -a"
    assert grep == GrepFilter(pattern="txt")
    assert redirect == Redirect("found.txt")

    line = "ls | sort"
    assert split_grep_pipe(line) == (line, None, None)


def test_grep_filter_apply() -> None:
    output = "README.md\nnotes.txt\nreadme.old"
    assert GrepFilter("README").apply(output) == "README.md"
    assert GrepFilter("readme", ignore_case=True).apply(output) == "README.md\nreadme.old"
    assert GrepFilter("README", invert=True).apply(output) == "notes.txt\nreadme.old"
    assert GrepFilter("", invert=False).apply("a\n\n\n") == "a\n\n"


def test_expand_wildcards_uses_enumeration_order() -> None:
    names = ["b.txt", "a.txt", "c.log", "file10.txt", "file1.txt"]
    assert expand_wildcards(["*.txt"], names) == ["b.txt", "a.txt", "file10.txt", "file1.txt"]
    assert expand_wildcards(["file?.txt"], names) == ["file1.txt"]
    assert expand_wildcards(["-v", "*.xyz", "plain"], names) == ["-v", "*.xyz", "plain"]
    assert expand_wildcards(["?.log"], ["c.log", "cxlog"]) == ["c.log"]
