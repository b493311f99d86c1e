"""Pydantic models for the persisted quote database.

The database is a single JSON document::

    {
      "quotes": [{"data": "go *fast*, {A}", "favourite": false}],
      "people": ["Alice", "Bob"]
    }

- :class:`QuoteRecord` -- one raw, unparsed quote.
- :class:`Database` -- the whole document.
- :class:`VariableTable` -- the read-only ``people`` list, addressed by the
  letters ``A``-``F``.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

VARIABLE_LETTERS = "ABCDEF"


class VariableTable(tuple):
    """Immutable ordered list of names, indexed by letter (``A`` -> 0).

    Lookups never fail: letters outside ``A``-``F`` and positions past the
    end of the table resolve to an empty string.
    """

    __slots__ = ()

    @classmethod
    def from_people(cls, people: Iterable[str]) -> VariableTable:
        """Build a table from the persisted ``people`` list."""
        if isinstance(people, cls):
            return people
        return cls(str(name) for name in people)

    def lookup(self, letter: str) -> str:
        """Return the name bound to *letter*, or ``""`` when unbound."""
        if len(letter) != 1 or letter not in VARIABLE_LETTERS:
            return ""
        index = VARIABLE_LETTERS.index(letter)
        if index >= len(self):
            return ""
        return self[index]

    def bindings(self) -> list[tuple[str, str]]:
        """Return ``(letter, name)`` pairs for every addressable name."""
        return list(zip(VARIABLE_LETTERS, self))

    def __repr__(self) -> str:
        return f"VariableTable({list(self)!r})"


class QuoteRecord(BaseModel):
    """A single stored quote in its raw markup form.

    Attributes:
        data: Raw quote text (the persisted key name).
        favourite: Whether the quote is marked as a favourite.
    """

    model_config = ConfigDict(frozen=True)

    data: str
    favourite: bool = False

    @property
    def text(self) -> str:
        """The raw quote text."""
        return self.data


class Database(BaseModel):
    """The complete persisted collection.

    Attributes:
        quotes: Stored quotes; ids shown to users are 1-based positions.
        people: Names addressable from quotes as ``{A}``..``{F}``.
    """

    quotes: list[QuoteRecord] = Field(default_factory=list)
    people: list[str] = Field(default_factory=list)

    def variables(self) -> VariableTable:
        """Return the ``people`` list as a :class:`VariableTable`."""
        return VariableTable.from_people(self.people)
