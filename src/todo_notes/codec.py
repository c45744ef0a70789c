"""Encoding and decoding of numbered list lines (pure functions, no I/O)."""

from typing import Iterable, List, Optional

from .models import LINE_RE, CorruptListError, InvalidArgument, ListEntry, ParseError


def decode_line(line: str) -> ListEntry:
    """Split `NN. text` into its index and body.

    The body is everything after the first `NN. ` prefix; any later `". "`
    belongs to the body.
    """
    m = LINE_RE.match(line)
    if not m:
        raise ParseError(line)
    return ListEntry(index=int(m.group(1)), text=m.group(2))


def encode_line(index: int, text: str) -> str:
    """Render an entry as `NN. text`, padding the index to two digits."""
    if index < 1:
        raise InvalidArgument(f"item numbers start at 1, got {index}")
    if "\n" in text or "\r" in text:
        raise InvalidArgument("an item cannot span multiple lines")
    return f"{index:02d}. {text}"


def parse_text(text: str, path: Optional[str] = None) -> List[ListEntry]:
    """Decode a whole list file. Empty text is an empty list."""
    entries: List[ListEntry] = []
    if not text.strip("\r\n"):
        return entries
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r")
        try:
            entries.append(decode_line(line))
        except ParseError:
            raise CorruptListError(path or "<list>", lineno, line) from None
    return entries


def format_entries(entries: Iterable[ListEntry]) -> str:
    """Join encoded entries with newlines; no trailing newline."""
    return "\n".join(encode_line(e.index, e.text) for e in entries)
