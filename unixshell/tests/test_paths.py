from __future__ import annotations

from unixshell.paths import join_path, parent_and_name, resolve_path


def test_resolve_relative_and_home_paths() -> None:
    assert resolve_path("docs", "/home/alice", "/home/alice") == "/home/alice/docs"
    assert resolve_path("..", "/home/alice", "/home/alice") == "/home"
    assert resolve_path("./a/./b", "/tmp", "/home/alice") == "/tmp/a/b"
    assert resolve_path("~", "/etc", "/home/alice") == "/home/alice"
    assert resolve_path("~/notes.txt", "/etc", "/home/alice") == "/home/alice/notes.txt"


def test_resolve_is_idempotent() -> None:
    for path in ("/", "/home/alice", "a/../b", "~/x/../y", "../../.."):
        once = resolve_path(path, "/home/alice", "/home/alice")
        assert once.startswith("/")
        assert resolve_path(once, "/tmp", "/root") == once


def test_parent_directory_underflow_stops_at_root() -> None:
    assert resolve_path("/../..", "/home/alice", "/home/alice") == "/"
    assert resolve_path("../../../..", "/home/alice", "/home/alice") == "/"
    assert resolve_path("//tmp//x", "/", "/") == "/tmp/x"


def test_parent_and_name() -> None:
    assert parent_and_name("/home/alice/a.txt") == ("/home/alice", "a.txt")
    assert parent_and_name("/tmp") == ("/", "tmp")
    assert parent_and_name("/") == ("/", "")
    assert join_path("/", "etc") == "/etc"
    assert join_path("/etc", "hostname") == "/etc/hostname"
