"""Segment models produced by the markup parser.

These dataclasses are intentionally simple, frozen stdlib dataclasses: the
parser creates them, the renderer reads them and nothing else touches them.

- :class:`PlainText` -- verbatim characters, rendered unstyled.
- :class:`EmphasisText` -- the body of a ``<...>`` emphasis span or a
  ``*...*`` action span (with its asterisks), rendered emphasised.
- :class:`VariableRef` -- an unresolved ``{A}``-style reference.  The parser
  resolves substitutions inline, so it never emits one; the renderer still
  accepts it and draws the referenced name in bold.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlainText:
    """Unstyled text.

    Attributes:
        text: The characters, with any variable substitutions applied.
    """

    text: str


@dataclass(frozen=True)
class EmphasisText:
    """Text rendered with the emphasis style.

    Attributes:
        text: Span body.  Emphasis spans lose their ``<``/``>`` delimiters,
            action spans keep both ``*`` characters.
    """

    text: str


@dataclass(frozen=True)
class VariableRef:
    """A reference to a person in the variable table, by letter.

    Attributes:
        letter: Single uppercase letter ``A``-``F``.
    """

    letter: str


Segment = PlainText | EmphasisText | VariableRef


@dataclass(frozen=True)
class ParsedQuote:
    """A quote after parsing, ready for rendering.

    Attributes:
        segments: Ordered formatting segments.
        favourite: Whether the source record is marked as a favourite.
    """

    segments: tuple[Segment, ...] = ()
    favourite: bool = False
