"""Error taxonomy for the word grid engine.

Every error here is recoverable: the session layer turns them into
user-facing outcomes and the game stays playable.
"""


class WordGridError(ValueError):
    """Base class for all engine errors."""
    code = "WORD_GRID_ERROR"
    title = "Error"


class InvalidInputError(WordGridError):
    """Custom grid input has the wrong length."""
    code = "INVALID_INPUT"
    title = "Input Error"


class NonAdjacentSelectionError(WordGridError):
    """A selection attempt breaks the adjacency chain."""
    code = "NON_ADJACENT"
    title = "Invalid Move"


class DuplicateWordError(WordGridError):
    """The word was already accepted this session."""
    code = "DUPLICATE_WORD"
    title = "Duplicate Word"


class UnknownWordError(WordGridError):
    """The word is not in the dictionary."""
    code = "UNKNOWN_WORD"
    title = "Invalid Word"
