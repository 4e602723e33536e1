from unixshell.command_shell import Completer, ShellSession


def test_command_names_complete_in_registration_order() -> None:
    shell = ShellSession()

    result = shell.get_completions("c")
    assert result.type == "command"
    assert result.matches == ["clear", "cd", "cat"]
    assert shell.get_completions("  mkd").matches == ["mkdir"]
    assert shell.get_completions("zzz").matches == []


def test_path_completion_in_current_directory() -> None:
    shell = ShellSession()
    shell.execute("mkdir Reports")

    result = shell.get_completions("cat RE")
    assert result.type == "path"
    assert result.matches == ["README.md"]
    assert result.prefix == "RE"

    assert shell.get_completions("cat R").matches == ["README.md", "Reports/"]
    assert shell.get_completions("ls ").matches == ["README.md", "example.txt", "Reports/"]


def test_path_completion_with_directory_part() -> None:
    shell = ShellSession()

    result = shell.get_completions("cd /e")
    assert result.matches == ["etc/"]
    assert result.prefix == "/e"
    assert result.file_prefix == "e"

    assert shell.get_completions("cat ~/ex").matches == ["example.txt"]
    assert shell.get_completions("cat /missing/x").matches == []


def test_completer_rebuilds_full_token() -> None:
    completer = Completer(ShellSession())

    assert completer.options("cd /e") == ["/etc/"]
    assert completer.options("cat ~/ex") == ["~/example.txt"]
    assert completer.options("wh") == ["whoami"]
