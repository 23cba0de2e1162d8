"""Tests for path selection rules."""

import pytest

from src.wordgrid import NonAdjacentSelectionError, PathSelector, from_letter_string, is_adjacent


@pytest.fixture
def grid(letters):
    return from_letter_string(letters, 4)


class TestAttemptSelect:
    """Test cases for extending the path."""

    def test_first_selection_always_succeeds(self, grid):
        selector = PathSelector()
        assert selector.attempt_select(grid.cell(3, 3)) is True
        assert selector.positions == [(3, 3)]
        assert selector.current_word == "E"

    def test_adjacent_extension(self, grid):
        selector = PathSelector()
        for col in range(3):
            selector.attempt_select(grid.cell(0, col))
        assert selector.current_word == "CAT"

    def test_diagonal_extension(self, grid):
        selector = PathSelector()
        selector.attempt_select(grid.cell(0, 0))
        assert selector.attempt_select(grid.cell(1, 1)) is True
        assert selector.current_word == "CO"

    def test_non_adjacent_rejected(self, grid):
        """A far cell fails and leaves the path untouched."""
        selector = PathSelector()
        selector.attempt_select(grid.cell(0, 0))
        with pytest.raises(NonAdjacentSelectionError) as exc:
            selector.attempt_select(grid.cell(2, 2))
        assert exc.value.code == "NON_ADJACENT"
        assert selector.positions == [(0, 0)]

    def test_reselecting_last_cell_is_ignored(self, grid):
        """Dragging over the same cell repeatedly has no effect."""
        selector = PathSelector()
        selector.attempt_select(grid.cell(0, 0))
        assert selector.attempt_select(grid.cell(0, 0)) is False
        assert selector.positions == [(0, 0)]

    def test_reselecting_earlier_cell_is_ignored(self, grid):
        """A cell already in the path is ignored even when adjacent to the last."""
        selector = PathSelector()
        selector.attempt_select(grid.cell(0, 0))
        selector.attempt_select(grid.cell(0, 1))
        selector.attempt_select(grid.cell(1, 1))
        assert selector.attempt_select(grid.cell(0, 0)) is False
        assert selector.current_word == "CAO"

    def test_reselecting_far_earlier_cell_is_ignored_not_rejected(self, grid):
        """Repeat check runs before adjacency, so no error is raised."""
        selector = PathSelector()
        for col in range(4):
            selector.attempt_select(grid.cell(0, col))
        assert selector.attempt_select(grid.cell(0, 0)) is False
        assert selector.current_word == "CATS"

    def test_every_extension_matches_adjacency(self, grid):
        """From the centre, accepted extensions are exactly the neighbours."""
        start = grid.cell(1, 1)
        for row in grid.rows:
            for cell in row:
                if cell.position == start.position:
                    continue
                selector = PathSelector()
                selector.attempt_select(start)
                if is_adjacent(start, cell):
                    assert selector.attempt_select(cell) is True
                else:
                    with pytest.raises(NonAdjacentSelectionError):
                        selector.attempt_select(cell)

    def test_path_never_repeats(self, grid):
        """A snake through the whole grid, with repeats mixed in, has unique positions."""
        selector = PathSelector()
        order = [(0, 0), (0, 1), (0, 0), (1, 1), (1, 0), (0, 1), (2, 0), (2, 1), (1, 1)]
        for row, col in order:
            selector.attempt_select(grid.cell(row, col))
        assert len(selector.positions) == len(set(selector.positions))
        for a, b in zip(selector.cells, selector.cells[1:]):
            assert is_adjacent(a, b)


class TestReset:
    """Test cases for clearing the path."""

    def test_reset_empty_is_noop(self):
        selector = PathSelector()
        selector.reset()
        assert selector.is_empty
        assert selector.current_word == ""

    def test_reset_after_selection(self, grid):
        selector = PathSelector()
        selector.attempt_select(grid.cell(0, 0))
        selector.attempt_select(grid.cell(0, 1))
        selector.reset()
        assert selector.positions == []
        assert selector.current_word == ""

    def test_reset_then_select_anywhere(self, grid):
        selector = PathSelector()
        selector.attempt_select(grid.cell(0, 0))
        selector.reset()
        assert selector.attempt_select(grid.cell(3, 3)) is True
