"""JSON persistence and editing of the quote collection.

The collection lives in a single UTF-8 JSON file (see
:mod:`quotebook.models.database` for its shape).  Loading validates the
document with Pydantic; editing helpers mutate a :class:`Database` in
memory and the caller persists it with :func:`save_database`.

Quote ids are 1-based positions, as shown in ``[Quote ID: n]`` headers.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from quotebook.exceptions import QuoteNotFoundError, StorageError
from quotebook.log import get_logger
from quotebook.models.database import Database, QuoteRecord

logger = get_logger(__name__)


def load_database(path: str | Path) -> Database:
    """Load the quote database from *path*.

    Args:
        path: Location of the JSON file.

    Returns:
        The validated :class:`Database`.  A missing file yields an empty
        collection so the first ``add`` can create it.

    Raises:
        StorageError: If the file cannot be read, is not valid JSON, or does
            not match the expected schema.
    """
    path = Path(path)
    if not path.exists():
        logger.info("Database %s not found, starting with an empty collection", path)
        return Database()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot read database {path}: {exc}", path=path) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageError(f"Invalid JSON in database {path}: {exc}", path=path) from exc

    try:
        database = Database.model_validate(data)
    except ValidationError as exc:
        raise StorageError(f"Database {path} does not match the expected schema: {exc}", path=path) from exc

    logger.debug(
        "Loaded %d quote(s) and %d person(s) from %s",
        len(database.quotes),
        len(database.people),
        path,
    )
    return database


def save_database(database: Database, path: str | Path) -> None:
    """Write *database* to *path* as indented JSON, creating parent directories.

    Raises:
        StorageError: If the file cannot be written.
    """
    path = Path(path)
    payload = json.dumps(database.model_dump(), indent=2, ensure_ascii=False)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload + "\n", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot write database {path}: {exc}", path=path) from exc

    logger.debug("Saved %d quote(s) to %s", len(database.quotes), path)


def _position(database: Database, quote_id: int) -> int:
    if not 1 <= quote_id <= len(database.quotes):
        raise QuoteNotFoundError(quote_id, len(database.quotes))
    return quote_id - 1


def get_quote(database: Database, quote_id: int) -> QuoteRecord:
    """Return the record with 1-based *quote_id*.

    Raises:
        QuoteNotFoundError: If *quote_id* is out of range.
    """
    return database.quotes[_position(database, quote_id)]


def add_quote(database: Database, text: str, favourite: bool = False) -> int:
    """Append a quote and return its 1-based id."""
    database.quotes.append(QuoteRecord(data=text, favourite=favourite))
    quote_id = len(database.quotes)
    logger.info("Added quote %d", quote_id)
    return quote_id


def edit_quote(
    database: Database,
    quote_id: int,
    text: str | None = None,
    favourite: bool | None = None,
) -> QuoteRecord:
    """Replace the text and/or favourite flag of a quote.

    Args:
        database: Collection to modify in place.
        quote_id: 1-based id of the quote.
        text: New raw text, or ``None`` to keep the current one.
        favourite: New favourite flag, or ``None`` to keep the current one.

    Returns:
        The updated record.

    Raises:
        QuoteNotFoundError: If *quote_id* is out of range.
    """
    position = _position(database, quote_id)
    changes: dict[str, object] = {}
    if text is not None:
        changes["data"] = text
    if favourite is not None:
        changes["favourite"] = favourite

    record = database.quotes[position].model_copy(update=changes)
    database.quotes[position] = record
    logger.info("Edited quote %d (%s)", quote_id, ", ".join(changes) or "no changes")
    return record


def delete_quote(database: Database, quote_id: int) -> QuoteRecord:
    """Remove a quote and return it.  Later quotes shift down by one id.

    Raises:
        QuoteNotFoundError: If *quote_id* is out of range.
    """
    record = database.quotes.pop(_position(database, quote_id))
    logger.info("Deleted quote %d", quote_id)
    return record
