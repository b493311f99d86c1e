"""quotebook: quotes with inline markup, rendered for the terminal.

Quotes support ``<emphasis>``, ``*action*`` spans and ``{A}``..``{F}``
substitution of names from a shared people list.
"""

from __future__ import annotations

from quotebook.exceptions import QuoteNotFoundError, StorageError
from quotebook.markup import is_variable_token, parse, parse_quote
from quotebook.models.database import Database, QuoteRecord, VariableTable
from quotebook.models.segments import (
    EmphasisText,
    ParsedQuote,
    PlainText,
    Segment,
    VariableRef,
)
from quotebook.render import render

__version__ = "0.1.0"

__all__ = [
    "Database",
    "EmphasisText",
    "ParsedQuote",
    "PlainText",
    "QuoteNotFoundError",
    "QuoteRecord",
    "Segment",
    "StorageError",
    "VariableRef",
    "VariableTable",
    "is_variable_token",
    "parse",
    "parse_quote",
    "render",
]
