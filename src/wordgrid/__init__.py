"""Letter grid, path selection and word judging for word-grid puzzles."""

from .models import Cell, Grid
from .errors import (
    WordGridError,
    InvalidInputError,
    NonAdjacentSelectionError,
    DuplicateWordError,
    UnknownWordError,
)
from .grid import ALPHABET, generate_random, from_letter_string, is_adjacent, render_grid
from .path import PathSelector
from .judge import WordJudge, score_word
from .data import Dictionary, load_dictionary, default_dictionary

__all__ = [
    # Models
    "Cell",
    "Grid",
    # Errors
    "WordGridError",
    "InvalidInputError",
    "NonAdjacentSelectionError",
    "DuplicateWordError",
    "UnknownWordError",
    # Grid utilities
    "ALPHABET",
    "generate_random",
    "from_letter_string",
    "is_adjacent",
    "render_grid",
    # Selection and judging
    "PathSelector",
    "WordJudge",
    "score_word",
    # Dictionary
    "Dictionary",
    "load_dictionary",
    "default_dictionary",
]
