"""In-progress path selection."""

from typing import List, Tuple
from pydantic import BaseModel, Field

from .errors import NonAdjacentSelectionError
from .grid import is_adjacent
from .models import Cell


class PathSelector(BaseModel):
    """
    Holds the ordered cells of the word currently being traced.

    Every extension must be adjacent to the last selected cell, and no
    cell may appear twice.

    Attributes:
        cells: The selected cells, in selection order
    """

    cells: List[Cell] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.cells

    @property
    def positions(self) -> List[Tuple[int, int]]:
        """(row, col) of every selected cell, in order."""
        return [cell.position for cell in self.cells]

    @property
    def current_word(self) -> str:
        """Letters of the path concatenated in order; empty if nothing is selected."""
        return "".join(cell.letter for cell in self.cells)

    def contains(self, cell: Cell) -> bool:
        return cell.position in self.positions

    def attempt_select(self, cell: Cell) -> bool:
        """
        Try to extend the path with a cell.

        Args:
            cell: The cell the player touched

        Returns:
            True if the cell was appended, False if it was already selected
            (repeated drag events over the same cell are ignored)

        Raises:
            NonAdjacentSelectionError: If the cell is not next to the last one
        """
        if self.is_empty:
            self.cells = [cell]
            return True

        # Repeat check must come first: is_adjacent() is true for the same cell
        if self.contains(cell):
            return False

        last = self.cells[-1]
        if not is_adjacent(last, cell):
            raise NonAdjacentSelectionError(
                f"({cell.row}, {cell.col}) is not adjacent to ({last.row}, {last.col}). "
                "You must select an adjacent cell."
            )

        self.cells.append(cell)
        return True

    def reset(self) -> None:
        """Clear the selection."""
        self.cells = []
