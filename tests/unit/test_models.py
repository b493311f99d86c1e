"""Tests for segment and database data models."""

from __future__ import annotations

import dataclasses
import typing

import pytest
from pydantic import ValidationError

from quotebook.models.database import Database, QuoteRecord, VariableTable
from quotebook.models.segments import EmphasisText, ParsedQuote, PlainText, Segment, VariableRef


class TestSegments:
    """Tests for the segment dataclasses."""

    def test_segment_equality(self) -> None:
        """Segments with the same kind and text are equal."""
        assert PlainText("a") == PlainText("a")
        assert EmphasisText("a") == EmphasisText("a")

    def test_segment_kinds_are_distinct(self) -> None:
        """PlainText and EmphasisText with equal text are not equal."""
        assert PlainText("a") != EmphasisText("a")

    def test_segments_are_frozen(self) -> None:
        """Segments cannot be mutated after creation."""
        segment = PlainText("a")

        with pytest.raises(dataclasses.FrozenInstanceError):
            segment.text = "b"  # type: ignore[misc]

    def test_variable_ref_letter(self) -> None:
        """VariableRef stores its letter."""
        assert VariableRef("C").letter == "C"

    def test_segment_alias_members(self) -> None:
        """The Segment alias is the union of the three segment kinds."""
        assert typing.get_args(Segment) == (PlainText, EmphasisText, VariableRef)
        assert isinstance(EmphasisText("x"), Segment)

    def test_parsed_quote_defaults(self) -> None:
        """A bare ParsedQuote has no segments and is not a favourite."""
        quote = ParsedQuote()

        assert quote.segments == ()
        assert quote.favourite is False


class TestVariableTable:
    """Tests for letter-indexed name lookup."""

    def test_lookup_by_position(self) -> None:
        """A maps to position 0, B to position 1."""
        table = VariableTable(["Alice", "Bob"])

        assert table.lookup("A") == "Alice"
        assert table.lookup("B") == "Bob"

    def test_lookup_beyond_table_is_empty(self) -> None:
        """Letters past the end of the table resolve to an empty string."""
        assert VariableTable(["Alice"]).lookup("F") == ""

    @pytest.mark.parametrize("letter", ["G", "a", "", "AB", "{"])
    def test_lookup_invalid_letter_is_empty(self, letter: str) -> None:
        """Anything but a single A-F letter resolves to an empty string."""
        table = VariableTable(["n1", "n2", "n3", "n4", "n5", "n6", "n7"])

        assert table.lookup(letter) == ""

    def test_bindings_limited_to_six_letters(self) -> None:
        """Only the first six names are addressable."""
        table = VariableTable(["n1", "n2", "n3", "n4", "n5", "n6", "n7"])

        bindings = table.bindings()

        assert len(bindings) == 6
        assert bindings[0] == ("A", "n1")
        assert bindings[-1] == ("F", "n6")

    def test_from_people_reuses_table(self) -> None:
        """Building a table from a table returns the same object."""
        table = VariableTable(["Alice"])

        assert VariableTable.from_people(table) is table

    def test_from_people_copies_list(self) -> None:
        """Later changes to the source list do not affect the table."""
        people = ["Alice"]
        table = VariableTable.from_people(people)
        people.append("Bob")

        assert len(table) == 1

    def test_table_is_immutable(self) -> None:
        """Item assignment is not supported."""
        table = VariableTable(["Alice"])

        with pytest.raises(TypeError):
            table[0] = "Bob"  # type: ignore[index]


class TestQuoteRecord:
    """Tests for the persisted quote model."""

    def test_text_property(self) -> None:
        """``text`` exposes the persisted ``data`` field."""
        assert QuoteRecord(data="hello").text == "hello"

    def test_favourite_defaults_false(self) -> None:
        """Records are not favourites unless marked."""
        assert QuoteRecord(data="hello").favourite is False

    def test_record_is_frozen(self) -> None:
        """Records cannot be mutated in place."""
        record = QuoteRecord(data="hello")

        with pytest.raises(ValidationError):
            record.data = "changed"  # type: ignore[misc]

    def test_missing_data_is_invalid(self) -> None:
        """A record without text fails validation."""
        with pytest.raises(ValidationError):
            QuoteRecord.model_validate({"favourite": True})


class TestDatabase:
    """Tests for the top-level document model."""

    def test_empty_database(self) -> None:
        """Defaults are an empty collection with no people."""
        database = Database()

        assert database.quotes == []
        assert database.people == []

    def test_validate_document(self) -> None:
        """The on-disk JSON shape validates into records."""
        database = Database.model_validate(
            {
                "quotes": [{"data": "<hi>", "favourite": True}],
                "people": ["Alice"],
            }
        )

        assert database.quotes == [QuoteRecord(data="<hi>", favourite=True)]
        assert database.variables() == VariableTable(["Alice"])
        assert isinstance(database.variables(), VariableTable)
