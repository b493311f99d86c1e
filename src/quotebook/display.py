"""Console display of quotes.

Renders a :class:`~quotebook.models.segments.ParsedQuote` as a header line
(``[Quote ID: 3] ♥``) followed by the rendered quote body.

The primary entry point is :func:`format_quote`, which returns the
formatted string.  :func:`print_quote` is a convenience wrapper that writes
directly to stdout.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from quotebook.models.segments import ParsedQuote
from quotebook.render import HEADER_STYLE, render, stylize

FAVOURITE_MARKER = " ♥"


def format_header(quote_id: int, favourite: bool, *, styled: bool = True) -> str:
    """Return the header line for a quote.

    Args:
        quote_id: 1-based id shown to the user.
        favourite: Append the favourite marker when ``True``.
        styled: Apply the header style.
    """
    header = f"[Quote ID: {quote_id}]"
    if favourite:
        header += FAVOURITE_MARKER
    return stylize(header, HEADER_STYLE) if styled else header


def format_quote(
    quote: ParsedQuote,
    quote_id: int,
    variables: Sequence[str],
    *,
    styled: bool = True,
) -> str:
    """Render a parsed quote with its header line.

    Args:
        quote: The parsed quote.
        quote_id: 1-based id shown in the header.
        variables: Names used by the renderer.
        styled: Apply terminal styling.

    Returns:
        Two lines (header and body) without a trailing newline.
    """
    header = format_header(quote_id, quote.favourite, styled=styled)
    body = render(quote.segments, variables, styled=styled)
    return f"{header}\n{body}"


def print_quote(
    quote: ParsedQuote,
    quote_id: int,
    variables: Sequence[str],
    *,
    styled: bool = True,
) -> None:
    """Format and print a quote to stdout."""
    sys.stdout.write(format_quote(quote, quote_id, variables, styled=styled) + "\n")
