"""Markup parser for quote text.

Turns a raw quote string into an ordered list of
:mod:`~quotebook.models.segments` objects.  Three constructs are recognised:

- ``<text>`` -- emphasis; the angle brackets are dropped.
- ``*text*`` -- an action; the asterisks stay part of the emphasised text.
- ``{A}`` .. ``{F}`` -- replaced by the matching name from the variable
  table, as plain characters, wherever it appears.

The parser is lenient and never raises: an unterminated span is emitted as
plain text and unknown ``{X}`` tokens are left untouched.
"""

from __future__ import annotations

from collections.abc import Sequence

from quotebook.log import get_logger
from quotebook.models.database import VARIABLE_LETTERS, QuoteRecord, VariableTable
from quotebook.models.segments import EmphasisText, ParsedQuote, PlainText, Segment

logger = get_logger(__name__)

_EMPHASIS_OPEN = "<"
_EMPHASIS_CLOSE = ">"
_ACTION = "*"
_TOKEN_LENGTH = 3


def is_variable_token(window: str) -> bool:
    """Return whether *window* is exactly a ``{A}``-``{F}`` token.

    Args:
        window: Candidate substring, normally the three characters starting
            at a ``{``.  Shorter windows (including the empty string at the
            end of the input) never match.
    """
    return (
        len(window) == _TOKEN_LENGTH
        and window[0] == "{"
        and window[1] in VARIABLE_LETTERS
        and window[2] == "}"
    )


def parse(text: str, variables: Sequence[str]) -> list[Segment]:
    """Parse quote markup into formatting segments.

    Args:
        text: Raw quote text.  May be empty.
        variables: Names substituted for ``{A}``..``{F}``; a plain list is
            accepted and wrapped in a :class:`VariableTable`.

    Returns:
        Segments in source order.  Only :class:`PlainText` and
        :class:`EmphasisText` are produced; an empty *text* yields ``[]``.
    """
    table = VariableTable.from_people(variables)
    segments: list[Segment] = []
    buffer: list[str] = []

    emphasis = False
    action = False

    def _flush(kind: type[PlainText] | type[EmphasisText]) -> None:
        segments.append(kind("".join(buffer)))
        buffer.clear()

    i = 0
    length = len(text)
    while i < length:
        char = text[i]

        # Substitution applies in every mode, before delimiters are looked at.
        if char == "{" and is_variable_token(text[i : i + _TOKEN_LENGTH]):
            name = table.lookup(text[i + 1])
            if name:
                buffer.append(name)
            i += _TOKEN_LENGTH
            continue

        if emphasis:
            if char == _EMPHASIS_CLOSE:
                _flush(EmphasisText)
                emphasis = False
            else:
                buffer.append(char)
        elif action:
            buffer.append(char)
            if char == _ACTION:
                _flush(EmphasisText)
                action = False
        elif char == _EMPHASIS_OPEN:
            if buffer:
                _flush(PlainText)
            emphasis = True
        elif char == _ACTION:
            if buffer:
                _flush(PlainText)
            action = True
            buffer.append(char)
        else:
            buffer.append(char)

        i += 1

    # Whatever is left -- including an unterminated span -- is plain text.
    if buffer:
        _flush(PlainText)

    return segments


def parse_quote(record: QuoteRecord, variables: Sequence[str]) -> ParsedQuote:
    """Parse a stored quote record.

    Args:
        record: The raw quote as loaded from the database.
        variables: Names substituted for ``{A}``..``{F}``.

    Returns:
        A :class:`ParsedQuote` carrying the segments and the favourite flag.
    """
    segments = parse(record.text, variables)
    logger.debug("Parsed quote into %d segment(s)", len(segments))
    return ParsedQuote(segments=tuple(segments), favourite=record.favourite)
