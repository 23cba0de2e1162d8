import logging
import random
from typing import List, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from .models import GridMode, Outcome, SessionConfig, SessionSnapshot
from ..wordgrid.data import Dictionary, load_dictionary
from ..wordgrid.errors import (
    DuplicateWordError,
    InvalidInputError,
    NonAdjacentSelectionError,
    UnknownWordError,
    WordGridError,
)
from ..wordgrid.grid import from_letter_string, generate_random
from ..wordgrid.judge import WordJudge
from ..wordgrid.models import Grid
from ..wordgrid.path import PathSelector

logger = logging.getLogger(__name__)


class GameSession(BaseModel):
    """
    Manages one player's word-grid game.

    Owns the active grid, the in-progress selection, the cumulative score
    and the list of accepted words. Each handler applies one UI event,
    records the outcome in ``last_outcome`` and returns it; engine errors
    are turned into failure outcomes rather than raised.

    Attributes:
        config: Session configuration (grid size, seed, dictionary)
        grid: The active grid
        mode: Whether the grid was generated ("random") or typed in ("custom")
        selector: The in-progress path
        judge: Word validator holding the dictionary
        score: Total points earned
        history: Accepted words, in acceptance order
        last_outcome: Outcome of the most recent event
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: SessionConfig = Field(default_factory=SessionConfig)
    judge: WordJudge
    grid: Optional[Grid] = None
    mode: GridMode = "random"
    selector: PathSelector = Field(default_factory=PathSelector)
    score: int = Field(default=0, ge=0)
    history: List[str] = Field(default_factory=list)
    last_outcome: Optional[Outcome] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Seed the random source and deal a random grid if none was given."""
        self._rng = random.Random(self.config.seed)
        if self.grid is None:
            self.grid = generate_random(self.config.size, self._rng)

    @classmethod
    def create(
        cls,
        config: Optional[SessionConfig] = None,
        dictionary: Optional[Dictionary] = None,
        **config_kwargs: Any
    ) -> "GameSession":
        """
        Factory method to create a session with its grid and dictionary.

        Args:
            config: Optional SessionConfig instance
            dictionary: Shared word list; loaded from config.dictionary when None
            **config_kwargs: Config parameters if config not provided

        Raises:
            InvalidInputError: If config.letters has the wrong length
            FileNotFoundError: If config.dictionary does not exist
        """
        if config is None:
            config = SessionConfig(**config_kwargs)
        if dictionary is None:
            dictionary = load_dictionary(config.dictionary)

        judge = WordJudge(dictionary=dictionary)
        if config.letters is not None:
            grid = from_letter_string(config.letters, config.size)
            return cls(config=config, judge=judge, grid=grid, mode="custom")

        return cls(config=config, judge=judge)

    @property
    def current_word(self) -> str:
        return self.selector.current_word

    def _record(self, outcome: Outcome) -> Outcome:
        self.last_outcome = outcome
        return outcome

    def _fail(self, error: WordGridError, word: Optional[str] = None) -> Outcome:
        return self._record(Outcome(
            kind="failure",
            code=error.code,
            title=error.title,
            message=str(error),
            word=word,
        ))

    def on_cell_interaction(self, row: int, col: int) -> Outcome:
        """
        Apply a tap or drag over the cell at (row, col).

        Coordinates outside the grid and cells already in the path are
        ignored. A non-adjacent cell is rejected and the path is kept.
        """
        if not self.grid.in_bounds(row, col):
            return self._record(Outcome(
                kind="ignored",
                message=f"({row}, {col}) is outside the grid",
            ))

        cell = self.grid.cell(row, col)
        try:
            appended = self.selector.attempt_select(cell)
        except NonAdjacentSelectionError as e:
            logger.debug("Rejected selection at %s: %s", cell.position, e)
            return self._fail(e)

        if not appended:
            return self._record(Outcome(
                kind="ignored",
                message=f"({row}, {col}) is already selected",
                word=self.current_word,
            ))

        return self._record(Outcome(
            kind="selected",
            message=f"Selected {cell.letter}",
            word=self.current_word,
        ))

    def on_submit(self) -> Outcome:
        """
        Submit the current word.

        The selection is consumed whether or not the word is accepted.
        """
        word = self.current_word
        try:
            points = self.judge.submit(word, self.history)
        except (DuplicateWordError, UnknownWordError) as e:
            self.selector.reset()
            logger.info("Rejected %r: %s", word, e.code)
            return self._fail(e, word=word)

        if points is None:
            return self._record(Outcome(kind="ignored", message="Nothing to submit"))

        self.score += points
        self.selector.reset()
        logger.info("Accepted %r for %d points (score %d)", word, points, self.score)
        return self._record(Outcome(
            kind="success",
            title="Good Job!",
            message=f'"{word}" is valid! (+{points} points)',
            word=word,
            points=points,
        ))

    def on_reset_selection(self) -> Outcome:
        """Drop the in-progress selection without scoring."""
        self.selector.reset()
        return self._record(Outcome(kind="reset", message="Selection cleared"))

    def set_grid(self, grid: Grid, mode: Optional[GridMode] = None) -> Outcome:
        """
        Replace the active grid. Score and history are kept.

        Args:
            grid: The new grid
            mode: The grid's mode; the current mode is kept when None
        """
        if mode is not None:
            self.mode = mode
        self.grid = grid
        self.selector.reset()
        logger.debug("Grid replaced (%s mode): %s", self.mode, grid.letters)
        return self._record(Outcome(kind="grid_changed", message=f"New {self.mode} grid"))

    def set_custom_grid(self, letters: str) -> Outcome:
        """
        Switch to a grid typed in by the player.

        On wrong-length input the grid, mode and selection are unchanged.
        """
        try:
            grid = from_letter_string(letters, self.grid.size)
        except InvalidInputError as e:
            return self._fail(e)

        return self.set_grid(grid, mode="custom")

    def toggle_grid_mode(self) -> Outcome:
        """
        Flip between random and custom grids.

        Going to custom keeps the current letters until set_custom_grid()
        is called; going back to random deals a fresh random grid.
        """
        if self.mode == "random":
            self.mode = "custom"
            self.selector.reset()
            size = self.grid.size
            return self._record(Outcome(
                kind="grid_changed",
                message=f"Enter {size * size} letters for a custom grid",
            ))

        return self.set_grid(generate_random(self.grid.size, self._rng), mode="random")

    def snapshot(self) -> SessionSnapshot:
        """Immutable copy of everything the UI renders."""
        return SessionSnapshot(
            grid=self.grid,
            mode=self.mode,
            selected=tuple(self.selector.positions),
            current_word=self.current_word,
            score=self.score,
            history=tuple(self.history),
            last_outcome=self.last_outcome,
        )
