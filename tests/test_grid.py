"""Tests for grid construction, lookup, adjacency and rendering."""

import random

import pytest
from pydantic import ValidationError

from src.wordgrid import (
    ALPHABET,
    Cell,
    Grid,
    InvalidInputError,
    from_letter_string,
    generate_random,
    is_adjacent,
    render_grid,
)


class TestGenerateRandom:
    """Test cases for random grid generation."""

    def test_shape_and_positions(self):
        """Every cell sits at its own (row, col)."""
        grid = generate_random(5, random.Random(1))
        assert grid.size == 5
        for i, row in enumerate(grid.rows):
            assert len(row) == 5
            for j, cell in enumerate(row):
                assert cell.position == (i, j)

    def test_letters_from_alphabet(self):
        """Random letters are uppercase A-Z."""
        grid = generate_random(6, random.Random(3))
        assert all(letter in ALPHABET for letter in grid.letters)

    def test_seeded_generation_is_deterministic(self):
        """The same seed yields the same grid."""
        a = generate_random(4, random.Random(42))
        b = generate_random(4, random.Random(42))
        assert a.letters == b.letters

    def test_different_seeds_differ(self):
        """Different seeds should (practically always) give different grids."""
        a = generate_random(4, random.Random(1))
        b = generate_random(4, random.Random(2))
        assert a.letters != b.letters

    def test_zero_size_rejected(self):
        with pytest.raises(ValueError):
            generate_random(0)


class TestFromLetterString:
    """Test cases for custom grids typed in by the player."""

    def test_row_major_mapping(self, letters):
        """Cell (i, j) holds the character at index i*4+j."""
        grid = from_letter_string(letters, 4)
        for i in range(4):
            for j in range(4):
                assert grid.cell(i, j).letter == letters[i * 4 + j]

    def test_lowercase_is_uppercased(self):
        grid = from_letter_string("catsdogsbearmice", 4)
        assert grid.letters == "CATSDOGSBEARMICE"

    @pytest.mark.parametrize("text", ["", "CATS", "CATSDOGSBEARMIC", "CATSDOGSBEARMICEX"])
    def test_wrong_length_rejected(self, text):
        """Anything other than exactly 16 characters fails on a 4x4 board."""
        with pytest.raises(InvalidInputError) as exc:
            from_letter_string(text, 4)
        assert exc.value.code == "INVALID_INPUT"
        assert "16" in str(exc.value)

    def test_non_letters_accepted(self):
        """Digits and punctuation are kept as-is; only length is checked."""
        grid = from_letter_string("ab1!cdefghijklmn", 4)
        assert grid.cell(0, 0).letter == "A"
        assert grid.cell(0, 2).letter == "1"
        assert grid.cell(0, 3).letter == "!"

    def test_multi_char_uppercase_kept(self):
        """Characters that uppercase to two letters stay one cell wide."""
        grid = from_letter_string("ßbcd", 2)
        assert grid.cell(0, 0).letter == "ß"

    def test_other_sizes(self):
        grid = from_letter_string("abcdefghi", 3)
        assert grid.size == 3
        assert grid.cell(2, 2).letter == "I"


class TestGridModel:
    """Test cases for Grid invariants and lookup."""

    def test_non_square_rejected(self):
        rows = [
            [Cell(letter="A", row=0, col=0), Cell(letter="B", row=0, col=1)],
        ]
        with pytest.raises(ValidationError):
            Grid(rows=rows)

    def test_misplaced_cell_rejected(self):
        rows = [
            [Cell(letter="A", row=0, col=0), Cell(letter="B", row=0, col=1)],
            [Cell(letter="C", row=1, col=1), Cell(letter="D", row=1, col=0)],
        ]
        with pytest.raises(ValidationError):
            Grid(rows=rows)

    def test_out_of_range_lookup(self, letters):
        grid = from_letter_string(letters)
        with pytest.raises(IndexError):
            grid.cell(4, 0)
        assert not grid.in_bounds(-1, 0)

    def test_cell_is_immutable(self):
        cell = Cell(letter="A", row=0, col=0)
        with pytest.raises(ValidationError):
            cell.letter = "B"

    def test_cell_rejects_negative_coordinates(self):
        with pytest.raises(ValidationError):
            Cell(letter="A", row=-1, col=0)


class TestAdjacency:
    """Test cases for the 8-directional adjacency rule."""

    def test_all_neighbours(self):
        centre = Cell(letter="A", row=1, col=1)
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                other = Cell(letter="B", row=1 + dr, col=1 + dc)
                assert is_adjacent(centre, other)

    def test_two_away_not_adjacent(self):
        a = Cell(letter="A", row=0, col=0)
        assert not is_adjacent(a, Cell(letter="B", row=0, col=2))
        assert not is_adjacent(a, Cell(letter="B", row=2, col=1))
        assert not is_adjacent(a, Cell(letter="B", row=2, col=2))


class TestRenderGrid:
    """Test cases for plain-text rendering."""

    def test_render_plain(self):
        grid = from_letter_string("abcd", 2)
        assert render_grid(grid) == " A   B\n C   D"

    def test_render_selected(self):
        grid = from_letter_string("abcd", 2)
        assert render_grid(grid, [(0, 1)]) == " A  [B]\n C   D"
