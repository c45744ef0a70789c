"""List mutation helpers (pure functions, no I/O)."""

from typing import Iterable, List, Set, Tuple

from .models import IndexOutOfRange, InvalidArgument, ListEntry


def renumber(entries: Iterable[ListEntry]) -> List[ListEntry]:
    """Give entries the indices 1..n by position, keeping their order."""
    return [ListEntry(index=i, text=e.text) for i, e in enumerate(entries, start=1)]


def parse_indices(args: Iterable[str]) -> Set[int]:
    """Turn CLI arguments like ["1 3", "4"] into a set of item numbers."""
    indices: Set[int] = set()
    for arg in args:
        for token in arg.replace(",", " ").split():
            if not (token.isascii() and token.isdigit()):
                raise InvalidArgument(f"not an item number: {token!r}")
            indices.add(int(token))
    if not indices:
        raise InvalidArgument("no item numbers given")
    return indices


def check_indices(indices: Set[int], count: int) -> None:
    """Raise IndexOutOfRange unless every index is within 1..count."""
    if not indices:
        raise InvalidArgument("no item numbers given")
    low, high = min(indices), max(indices)
    if low < 1:
        raise IndexOutOfRange(low, count)
    if high > count:
        raise IndexOutOfRange(high, count)


def remove_positions(
    entries: List[ListEntry], indices: Iterable[int]
) -> Tuple[List[ListEntry], List[ListEntry]]:
    """Remove the entries at the given 1-based positions.

    Returns (remaining, removed). Remaining entries are renumbered 1..m by
    position; removed entries keep their old position as index and come back
    in ascending order.
    """
    wanted = set(indices)
    check_indices(wanted, len(entries))

    remaining = list(entries)
    removed: List[ListEntry] = []
    # highest first so earlier pops never shift a pending position
    for pos in sorted(wanted, reverse=True):
        old = remaining.pop(pos - 1)
        removed.append(ListEntry(index=pos, text=old.text))

    removed.reverse()
    return renumber(remaining), removed
