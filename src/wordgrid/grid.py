"""Grid building, adjacency and rendering utilities."""

import random
import string
from typing import Iterable, List, Optional, Tuple

from .errors import InvalidInputError
from .models import Cell, Grid


ALPHABET = string.ascii_uppercase


def generate_random(size: int, rng: Optional[random.Random] = None) -> Grid:
    """
    Build a size x size grid with letters drawn uniformly from A-Z.

    Args:
        size: Number of rows and columns (must be at least 1)
        rng: Random source; pass a seeded random.Random for reproducible grids

    Returns:
        A new Grid
    """
    if size < 1:
        raise ValueError(f"Grid size must be at least 1, got {size}")
    rng = rng or random.Random()

    rows = [
        [Cell(letter=rng.choice(ALPHABET), row=i, col=j) for j in range(size)]
        for i in range(size)
    ]
    return Grid(rows=rows)


def _normalize_letter(char: str) -> str:
    # Some characters uppercase to more than one ("ß" -> "SS"); keep those as typed
    upper = char.upper()
    return upper if len(upper) == 1 else char


def from_letter_string(letters: str, size: int = 4) -> Grid:
    """
    Slice a row-major letter string into a size x size grid.

    The character at index i*size+j becomes the cell at (i, j), uppercased.
    Any character is accepted; only the length is checked.

    Raises:
        InvalidInputError: If len(letters) != size*size
    """
    if size < 1:
        raise ValueError(f"Grid size must be at least 1, got {size}")

    expected = size * size
    if len(letters) != expected:
        raise InvalidInputError(
            f"Please enter exactly {expected} letters (got {len(letters)})."
        )

    rows = [
        [
            Cell(letter=_normalize_letter(letters[i * size + j]), row=i, col=j)
            for j in range(size)
        ]
        for i in range(size)
    ]
    return Grid(rows=rows)


def is_adjacent(a: Cell, b: Cell) -> bool:
    """
    True if b is one of the 8 neighbours of a.

    Also true when a and b are the same cell; callers that must exclude
    re-selection check for repeats first.
    """
    return abs(a.row - b.row) <= 1 and abs(a.col - b.col) <= 1


def render_grid(grid: Grid, selected: Iterable[Tuple[int, int]] = ()) -> str:
    """Render the grid to a string, one row per line, selected cells in brackets."""
    chosen = set(selected)
    lines: List[str] = []
    for row in grid.rows:
        lines.append(" ".join(
            f"[{cell.letter}]" if cell.position in chosen else f" {cell.letter} "
            for cell in row
        ).rstrip())
    return "\n".join(lines)
