"""Entry point for ``python -m quotebook``.

Provides a CLI over the quote collection.  Uses stdlib :mod:`argparse` for
argument parsing.

Subcommands:
    show     -- Default. Show one quote by id, or a random one.
    list     -- Show every quote (optionally favourites only).
    add      -- Append a quote.
    edit     -- Change a quote's text or favourite flag.
    delete   -- Remove a quote.
    people   -- Show the names available as {A}..{F}.

Exit codes:
    0 -- Command completed successfully.
    1 -- An error occurred (bad quote id, unreadable database, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from quotebook.config import ConfigError, load_settings
from quotebook.display import print_quote
from quotebook.exceptions import QuoteNotFoundError, StorageError
from quotebook.log import get_logger, setup_logging
from quotebook.markup import parse_quote
from quotebook.picker import random_index
from quotebook.storage import (
    add_quote,
    delete_quote,
    edit_quote,
    get_quote,
    load_database,
    save_database,
)

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser with subcommands.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="quotebook",
        description="Store quotes with inline markup and show them in the terminal.",
    )
    parser.add_argument(
        "--database",
        type=str,
        default=None,
        help="Path to the JSON quote database (defaults to QUOTEBOOK_DATABASE from config).",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=False,
        help="Disable terminal styling.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- "show" subcommand (default) ----------------------------------
    show_parser = subparsers.add_parser(
        "show",
        help="Show a quote by id, or a random quote.",
    )
    show_parser.add_argument(
        "quote_id",
        nargs="?",
        type=int,
        default=None,
        help="1-based quote id (random when omitted).",
    )

    # --- "list" subcommand --------------------------------------------
    list_parser = subparsers.add_parser("list", help="Show every quote.")
    list_parser.add_argument(
        "--favourites",
        action="store_true",
        default=False,
        help="Only show quotes marked as favourites.",
    )

    # --- "add" subcommand ---------------------------------------------
    add_parser = subparsers.add_parser("add", help="Add a quote.")
    add_parser.add_argument("text", type=str, help="Raw quote text, markup included.")
    add_parser.add_argument(
        "--favourite",
        action="store_true",
        default=False,
        help="Mark the new quote as a favourite.",
    )

    # --- "edit" subcommand --------------------------------------------
    edit_parser = subparsers.add_parser("edit", help="Edit a quote.")
    edit_parser.add_argument("quote_id", type=int, help="1-based quote id.")
    edit_parser.add_argument("--text", type=str, default=None, help="Replacement quote text.")
    edit_parser.add_argument(
        "--favourite",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Mark or unmark the quote as a favourite.",
    )

    # --- "delete" subcommand ------------------------------------------
    delete_parser = subparsers.add_parser("delete", help="Delete a quote.")
    delete_parser.add_argument("quote_id", type=int, help="1-based quote id.")

    # --- "people" subcommand ------------------------------------------
    subparsers.add_parser("people", help="List the names available as {A}..{F}.")

    return parser


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _handle_show(args: argparse.Namespace, database_path: Path, styled: bool) -> int:
    """Execute the ``show`` subcommand (also used when no command is given)."""
    database = load_database(database_path)
    if not database.quotes:
        return _error(f"No quotes stored in {database_path}")

    quote_id = getattr(args, "quote_id", None)
    if quote_id is None:
        quote_id = random_index(len(database.quotes)) + 1
        logger.debug("Picked random quote %d of %d", quote_id, len(database.quotes))

    variables = database.variables()
    record = get_quote(database, quote_id)
    print_quote(parse_quote(record, variables), quote_id, variables, styled=styled)
    return 0


def _handle_list(args: argparse.Namespace, database_path: Path, styled: bool) -> int:
    """Execute the ``list`` subcommand."""
    database = load_database(database_path)
    variables = database.variables()

    shown = 0
    for quote_id, record in enumerate(database.quotes, start=1):
        if args.favourites and not record.favourite:
            continue
        if shown:
            print()
        print_quote(parse_quote(record, variables), quote_id, variables, styled=styled)
        shown += 1

    if not shown:
        print("No favourite quotes." if args.favourites else "No quotes.")
    return 0


def _handle_add(args: argparse.Namespace, database_path: Path, styled: bool) -> int:  # noqa: ARG001
    """Execute the ``add`` subcommand."""
    if not args.text.strip():
        return _error("Quote text must not be empty")

    database = load_database(database_path)
    quote_id = add_quote(database, args.text, favourite=args.favourite)
    save_database(database, database_path)
    print(f"Added quote {quote_id}")
    return 0


def _handle_edit(args: argparse.Namespace, database_path: Path, styled: bool) -> int:
    """Execute the ``edit`` subcommand."""
    if args.text is None and args.favourite is None:
        return _error("Nothing to edit: pass --text and/or --favourite/--no-favourite")
    if args.text is not None and not args.text.strip():
        return _error("Quote text must not be empty")

    database = load_database(database_path)
    record = edit_quote(database, args.quote_id, text=args.text, favourite=args.favourite)
    save_database(database, database_path)

    variables = database.variables()
    print_quote(parse_quote(record, variables), args.quote_id, variables, styled=styled)
    return 0


def _handle_delete(args: argparse.Namespace, database_path: Path, styled: bool) -> int:  # noqa: ARG001
    """Execute the ``delete`` subcommand."""
    database = load_database(database_path)
    delete_quote(database, args.quote_id)
    save_database(database, database_path)
    print(f"Deleted quote {args.quote_id}")
    return 0


def _handle_people(args: argparse.Namespace, database_path: Path, styled: bool) -> int:  # noqa: ARG001
    """Execute the ``people`` subcommand."""
    database = load_database(database_path)
    bindings = database.variables().bindings()
    if not bindings:
        print("No people defined.")
        return 0

    for letter, name in bindings:
        print(f"{letter}: {name}")
    return 0


_HANDLERS: dict[str, Callable[[argparse.Namespace, Path, bool], int]] = {
    "show": _handle_show,
    "list": _handle_list,
    "add": _handle_add,
    "edit": _handle_edit,
    "delete": _handle_delete,
    "people": _handle_people,
}


def main(argv: list[str] | None = None) -> int:
    """Run the quotebook CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    try:
        settings = load_settings()
    except ConfigError as exc:
        return _error(str(exc))

    # --- Configure logging --------------------------------------------
    try:
        setup_logging(settings.log_level, verbose=args.verbose)
    except ValueError as exc:
        return _error(str(exc))

    database_path = Path(args.database).expanduser() if args.database else settings.database_path
    styled = not (args.plain or settings.plain)

    # --- Dispatch to subcommand handler -------------------------------
    handler = _HANDLERS[args.command or "show"]
    try:
        return handler(args, database_path, styled)
    except (StorageError, QuoteNotFoundError) as exc:
        return _error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
