"""todo-notes command-line interface."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .codec import encode_line
from .config import resolve_active_list
from .core import parse_indices
from .models import ListEntry, ListIdentity, TodoError
from .storage import ListStore, ensure_file_exists

logger = logging.getLogger(__name__)

IO_ERROR_EXIT = 74


def print_list(entries: List[ListEntry]) -> None:
    """Print the list the way it is stored on disk."""
    if not entries:
        print("(no items yet)")
        return
    for e in entries:
        print(encode_line(e.index, e.text))


def cmd_list(store: ListStore, args: argparse.Namespace) -> None:
    print_list(store.entries())


def cmd_add(store: ListStore, args: argparse.Namespace) -> None:
    entry = store.add(args.text)
    print(f"Added new item: {encode_line(entry.index, entry.text)}")
    print_list(store.entries())


def cmd_delete(store: ListStore, args: argparse.Namespace) -> None:
    removed = store.delete(parse_indices(args.indices))
    numbers = ", ".join(str(e.index) for e in removed)
    noun = "item" if len(removed) == 1 else "items"
    print(f"Deleted list {noun}: {numbers}")
    print_list(store.entries())


def cmd_reset(store: ListStore, args: argparse.Namespace) -> None:
    store.reset()
    print(f"Cleared list {args.list_name}.")


def cmd_path(store: ListStore, args: argparse.Namespace) -> None:
    print(store.path.resolve())


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    p = argparse.ArgumentParser(
        prog="todo",
        description="Numbered todo lists, one per git repository.",
    )
    p.add_argument(
        "-t",
        "--target",
        metavar="NAME",
        help="Use the named list instead of the one picked for this directory",
    )
    p.add_argument(
        "-f",
        "--file",
        metavar="PATH",
        help="Use this list file directly, bypassing the config",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Explain which list is used"
    )
    sub = p.add_subparsers(dest="cmd")

    s_add = sub.add_parser("add", help="Append a new item")
    s_add.add_argument("text", help="Item text, quoted if it has spaces")
    s_add.set_defaults(func=cmd_add)

    s_list = sub.add_parser("list", help="Show all items")
    s_list.set_defaults(func=cmd_list)

    s_delete = sub.add_parser("delete", help="Delete items by number")
    s_delete.add_argument(
        "indices", nargs="+", metavar="N", help='Item numbers, e.g. 2 or "1 3 4"'
    )
    s_delete.set_defaults(func=cmd_delete)

    s_reset = sub.add_parser("reset", help="Remove every item from the list")
    s_reset.set_defaults(func=cmd_reset)

    s_path = sub.add_parser("path", help="Show the absolute path to the list file")
    s_path.set_defaults(func=cmd_path)

    return p


def resolve_list(args: argparse.Namespace) -> ListIdentity:
    if args.file:
        path = Path(args.file).expanduser()
        ensure_file_exists(path)
        return ListIdentity(name=path.stem.upper(), path=path)
    return resolve_active_list(Path.cwd(), os.environ, override=args.target)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point. Lists the items if no subcommand is given."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(message)s",
        level=logging.INFO if args.verbose else logging.WARNING,
        stream=sys.stderr,
    )

    func = getattr(args, "func", cmd_list)
    try:
        identity = resolve_list(args)
        args.list_name = identity.name
        logger.debug("using list %s at %s", identity.name, identity.path)
        func(ListStore(identity.path), args)
    except TodoError as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return IO_ERROR_EXIT
    return 0


if __name__ == "__main__":
    sys.exit(main())
