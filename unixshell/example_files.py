"""Sample home directory used by the REPL and the tests."""

from __future__ import annotations

import datetime as _dt

from unixshell.filesystem import ROOT_KEY, DirectoryNode, tree_from_json

_README = """# Welcome to Unix Shell

This is an in-memory Unix shell emulator.

## Available Commands

Type `help` to see all available commands.

## Examples

- `ls -la` - List all files including hidden ones
- `cat example.txt` - Display file contents
- `mkdir mydir` - Create a new directory
- `cd mydir` - Change to that directory
- `vim file.txt` - Edit a file with the vi editor

Have fun!
"""

_EXAMPLE = """This is an example text file.

You can view this with: cat example.txt
You can edit it with: vim example.txt

Try creating your own files with touch or vim!
"""


def create_example_files(username: str = "user") -> DirectoryNode:
    notes = (
        "Development Notes\n"
        "==================\n"
        "\n"
        f"- Project started on {_dt.date.today().isoformat()}\n"
        "- This is a minimal Unix shell emulator\n"
        "- Add your own notes here!\n"
    )
    return tree_from_json(
        {
            ROOT_KEY: {
                "home": {
                    username: {
                        "README.md": _README,
                        "example.txt": _EXAMPLE,
                        "notes.txt": notes,
                    },
                },
                "etc": {
                    "hostname": "localhost\n",
                    "motd": 'Welcome to Unix Shell!\n\nType "help" for available commands.\n',
                },
                "tmp": {},
            }
        }
    )


__all__ = ["create_example_files"]
