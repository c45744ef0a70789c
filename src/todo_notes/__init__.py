"""todo-notes - numbered todo lists, one per git repository."""

__version__ = "0.3.0"

from .models import (
    ListEntry,
    ListIdentity,
    TodoError,
    InvalidArgument,
    IndexOutOfRange,
    ParseError,
    CorruptListError,
    ConfigError,
)
from .codec import decode_line, encode_line, parse_text, format_entries
from .storage import ListStore
from .config import resolve_active_list

__all__ = [
    "ListEntry",
    "ListIdentity",
    "TodoError",
    "InvalidArgument",
    "IndexOutOfRange",
    "ParseError",
    "CorruptListError",
    "ConfigError",
    "decode_line",
    "encode_line",
    "parse_text",
    "format_entries",
    "ListStore",
    "resolve_active_list",
]
