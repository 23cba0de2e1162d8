"""Data models for the letter grid."""

from typing import List, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Cell(BaseModel):
    """A single letter on the grid. Identity is (row, col)."""
    model_config = ConfigDict(frozen=True)

    letter: str = Field(..., min_length=1, max_length=1)
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)


class Grid(BaseModel):
    """
    An N x N grid of cells, indexed by row then column.

    Grids are never mutated; a new puzzle gets a new Grid.
    """
    model_config = ConfigDict(frozen=True)

    rows: List[List[Cell]]

    @model_validator(mode="after")
    def _check_square(self) -> "Grid":
        n = len(self.rows)
        if n == 0:
            raise ValueError("Grid must have at least one row")
        for i, row in enumerate(self.rows):
            if len(row) != n:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n}")
            for j, cell in enumerate(row):
                if cell.position != (i, j):
                    raise ValueError(
                        f"Cell at index ({i}, {j}) claims position {cell.position}"
                    )
        return self

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self.rows)

    @property
    def letters(self) -> str:
        """All letters in row-major order."""
        return "".join(cell.letter for row in self.rows for cell in row)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Cell:
        """
        Look up the cell at (row, col).

        Raises:
            IndexError: If the coordinates are outside the grid
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} grid")
        return self.rows[row][col]
