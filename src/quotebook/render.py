"""Renderer for parsed quote segments.

Turns the segments produced by :func:`quotebook.markup.parse` into a single
display string.  Styled pieces are wrapped in the ANSI SGR codes of a
:mod:`rich` style; the text itself is emitted untouched, so tabs, carriage
returns and other control characters reach the terminal exactly as they do
for plain segments.

Rendering is stateless: the same segments always produce the same string,
independent of the host terminal.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.color import ColorSystem
from rich.style import Style

from quotebook.models.database import VariableTable
from quotebook.models.segments import EmphasisText, PlainText, Segment, VariableRef

EMPHASIS_STYLE = "bold yellow"
VARIABLE_STYLE = "bold"
HEADER_STYLE = "bold blue"


def stylize(text: str, style: str) -> str:
    """Return *text* wrapped in the standard-colour ANSI codes for *style*.

    Args:
        text: Text to style.  Empty text is returned unchanged.
        style: A :mod:`rich` style definition such as ``"bold yellow"``.
    """
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


def render(
    segments: Iterable[Segment],
    variables: Sequence[str],
    *,
    styled: bool = True,
) -> str:
    """Render segments into a display string.

    Args:
        segments: Segments in display order.
        variables: Names used to resolve :class:`VariableRef` segments.
        styled: When ``False`` every segment is emitted as plain text.

    Returns:
        The concatenated output; ``""`` for no segments.
    """
    table = VariableTable.from_people(variables)
    parts: list[str] = []

    for segment in segments:
        if isinstance(segment, PlainText):
            parts.append(segment.text)
            continue

        if isinstance(segment, EmphasisText):
            text, style = segment.text, EMPHASIS_STYLE
        elif isinstance(segment, VariableRef):
            # Not produced by the parser, which substitutes names inline.
            text, style = table.lookup(segment.letter), VARIABLE_STYLE
        else:
            raise TypeError(f"Unsupported segment type: {type(segment).__name__}")

        parts.append(stylize(text, style) if styled else text)

    return "".join(parts)
