"""Custom exceptions for quotebook.

The markup parser and renderer never raise; these cover the storage layer
that loads, saves and edits the quote collection.
"""

from __future__ import annotations

from pathlib import Path


class StorageError(Exception):
    """Raised when the quote database cannot be read or written.

    Covers unreadable files, invalid JSON and documents that do not match
    the expected ``{"quotes": [...], "people": [...]}`` shape.

    Attributes:
        path: The database file involved, if known.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class QuoteNotFoundError(LookupError):
    """Raised when a 1-based quote id is outside the collection.

    Attributes:
        quote_id: The id that was requested.
        count: Number of quotes in the collection at the time.
    """

    def __init__(self, quote_id: int, count: int) -> None:
        if count:
            message = f"Quote ID {quote_id} does not exist (valid range: 1-{count})"
        else:
            message = f"Quote ID {quote_id} does not exist (the collection is empty)"
        super().__init__(message)
        self.quote_id = quote_id
        self.count = count
