"""Data models for quotebook."""

from __future__ import annotations

from quotebook.models.database import Database, QuoteRecord, VariableTable
from quotebook.models.segments import (
    EmphasisText,
    ParsedQuote,
    PlainText,
    Segment,
    VariableRef,
)

__all__ = [
    "Database",
    "EmphasisText",
    "ParsedQuote",
    "PlainText",
    "QuoteRecord",
    "Segment",
    "VariableRef",
    "VariableTable",
]
