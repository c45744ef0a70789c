"""Data models, constants and errors for todo-notes."""

import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_LIST = "DEFAULT"
NOTES_DIRNAME = ".todo_notes"
CONFIG_FILENAME = "config.toml"
LIST_ENV_VAR = "TODO_NOTES_LIST"

LINE_RE = re.compile(r"^(\d+)\. ([^\r\n]*)\Z")


@dataclass(frozen=True)
class ListEntry:
    """One numbered line of a list file."""

    index: int
    text: str


@dataclass(frozen=True)
class ListIdentity:
    """A registered list: its config name and the file holding it."""

    name: str
    path: Path


class TodoError(Exception):
    """Base class for errors reported to the user."""

    exit_code = 1


class InvalidArgument(TodoError):
    """Malformed user input, e.g. a non-numeric delete index."""

    exit_code = 2


class IndexOutOfRange(TodoError):
    """A requested item number is outside 1..count."""

    exit_code = 3

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        if count == 0:
            msg = f"item {index} does not exist: the list is empty"
        else:
            msg = f"item {index} is out of range: the list has {count} item(s)"
        super().__init__(msg)


class ParseError(TodoError):
    """A line is not in the `NN. text` format."""

    exit_code = 4

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"not a numbered list line: {line!r}")


class CorruptListError(ParseError):
    """A list file contains a line that cannot be decoded."""

    def __init__(self, path, lineno: int, line: str):
        self.path = path
        self.lineno = lineno
        self.line = line
        TodoError.__init__(
            self, f"list file {path} is corrupt at line {lineno}: {line!r}"
        )


class ConfigError(TodoError):
    """The config file or directory cannot be used."""

    exit_code = 5
