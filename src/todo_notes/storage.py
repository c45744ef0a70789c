"""File I/O for todo-notes lists."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

from .codec import format_entries, parse_text
from .core import remove_positions, renumber
from .models import ListEntry

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_text(path: PathLike) -> str:
    """Return the whole file as text."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _default_mode() -> int:
    """Mode a newly created file would get under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_text_atomic(path: PathLike, text: str) -> None:
    """Replace the file contents via a temp file in the same directory.

    Either the old or the new contents are on disk afterwards, never a
    partially written file. Symlinks are followed so the link target is
    what gets replaced.
    """
    path = Path(os.path.realpath(path))
    mode = path.stat().st_mode & 0o777 if path.exists() else _default_mode()
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise


def ensure_file_exists(path: PathLike) -> None:
    """Ensure the directory and an (empty) list file exist."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        logger.info("Creating task file: %s", path)
        path.touch()


class ListStore:
    """Load, mutate and save one numbered list file.

    Every operation reads the file afresh and, when it changes anything,
    rewrites it in full. Item numbers are always 1..n after a write.
    """

    def __init__(self, path: PathLike):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"ListStore({str(self.path)!r})"

    def load(self) -> List[ListEntry]:
        return parse_text(read_text(self.path), path=str(self.path))

    def entries(self) -> List[ListEntry]:
        return self.load()

    def save(self, entries: Iterable[ListEntry]) -> None:
        # encode before touching the file so a bad entry aborts the write
        text = format_entries(entries)
        write_text_atomic(self.path, text)

    def add(self, text: str) -> ListEntry:
        """Append an item and return it with its new number."""
        entries = self.load()
        entry = ListEntry(index=len(entries) + 1, text=text)
        self.save(renumber(entries + [entry]))
        logger.debug("added item %d to %s", entry.index, self.path)
        return entry

    def delete(self, indices: Iterable[int]) -> List[ListEntry]:
        """Remove items by their current numbers.

        Returns the removed items in ascending order. Nothing is written
        when any number is out of range.
        """
        remaining, removed = remove_positions(self.load(), indices)
        self.save(remaining)
        logger.debug(
            "deleted items %s from %s", [e.index for e in removed], self.path
        )
        return removed

    def reset(self) -> None:
        """Empty the list."""
        write_text_atomic(self.path, "")
        logger.debug("reset %s", self.path)
