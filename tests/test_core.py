"""Tests for the pure list mutation helpers."""

import pytest

from todo_notes.core import check_indices, parse_indices, remove_positions, renumber
from todo_notes.models import IndexOutOfRange, InvalidArgument, ListEntry


def entries(*texts):
    return [ListEntry(i, t) for i, t in enumerate(texts, start=1)]


class TestRenumber:
    def test_fills_gaps_by_position(self):
        result = renumber([ListEntry(3, "a"), ListEntry(9, "b")])
        assert result == [ListEntry(1, "a"), ListEntry(2, "b")]


class TestParseIndices:
    def test_space_separated_string(self):
        assert parse_indices(["1 3 4"]) == {1, 3, 4}

    def test_multiple_args_and_commas(self):
        assert parse_indices(["2,5", "7"]) == {2, 5, 7}

    def test_duplicates_collapse(self):
        assert parse_indices(["2 2", "2"]) == {2}

    @pytest.mark.parametrize("arg", ["x", "1 two", "1.5", "-1"])
    def test_non_numeric(self, arg):
        with pytest.raises(InvalidArgument):
            parse_indices([arg])

    def test_empty(self):
        with pytest.raises(InvalidArgument):
            parse_indices(["  "])


class TestCheckIndices:
    def test_max_over_count(self):
        with pytest.raises(IndexOutOfRange) as exc:
            check_indices({1, 10}, 3)
        assert exc.value.index == 10
        assert exc.value.count == 3

    def test_zero(self):
        with pytest.raises(IndexOutOfRange) as exc:
            check_indices({0}, 3)
        assert exc.value.index == 0

    def test_empty_list(self):
        with pytest.raises(IndexOutOfRange) as exc:
            check_indices({1}, 0)
        assert "empty" in str(exc.value)


class TestRemovePositions:
    def test_single(self):
        remaining, removed = remove_positions(entries("a", "b", "c"), [2])
        assert remaining == entries("a", "c")
        assert removed == [ListEntry(2, "b")]

    def test_order_of_request_does_not_matter(self):
        items = entries("a", "b", "c", "d", "e")
        assert remove_positions(items, [2, 4]) == remove_positions(items, [4, 2])

    def test_removed_ascending(self):
        _, removed = remove_positions(entries("a", "b", "c", "d", "e"), [5, 1, 3])
        assert removed == [ListEntry(1, "a"), ListEntry(3, "c"), ListEntry(5, "e")]

    def test_adjacent_positions(self):
        remaining, _ = remove_positions(entries("a", "b", "c", "d"), [2, 3])
        assert remaining == entries("a", "d")

    def test_remove_all(self):
        remaining, removed = remove_positions(entries("a", "b"), [1, 2])
        assert remaining == []
        assert len(removed) == 2

    def test_input_not_mutated(self):
        items = entries("a", "b", "c")
        remove_positions(items, [1])
        assert items == entries("a", "b", "c")
