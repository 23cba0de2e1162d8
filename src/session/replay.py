import json
import shlex
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Any
from pydantic import BaseModel, Field, ConfigDict

from .game import GameSession
from .models import Event, EventResult, Outcome, ReplayResult, SessionConfig
from ..wordgrid.data import Dictionary
from ..wordgrid.grid import render_grid


def parse_command(line: str) -> Event:
    """
    Parse a text command into an Event.

    Commands:
        select ROW COL | submit | reset | custom LETTERS | toggle

    Raises:
        ValueError: If the command is unknown or its arguments are malformed
    """
    parts = shlex.split(line)
    if not parts:
        raise ValueError("Empty command")

    name, args = parts[0].lower(), parts[1:]

    if name == "select":
        if len(args) != 2:
            raise ValueError("Usage: select ROW COL")
        try:
            row, col = int(args[0]), int(args[1])
        except ValueError:
            raise ValueError(f"Row and column must be integers, got {args[0]!r} {args[1]!r}") from None
        return Event(type="select", row=row, col=col)

    if name == "custom":
        if len(args) != 1:
            raise ValueError("Usage: custom LETTERS")
        return Event(type="custom", letters=args[0])

    if name in ("submit", "reset", "toggle"):
        if args:
            raise ValueError(f"'{name}' takes no arguments")
        return Event(type=name)

    raise ValueError(f"Unknown command: '{parts[0]}'")


class Replay(BaseModel):
    """
    Drives a GameSession from an ordered list of events.

    Events are applied strictly in order since selection rules depend on
    what was selected before.

    Attributes:
        session: The session being driven
        config: Configuration the session was built from
        results: One EventResult per applied event
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session: GameSession
    config: SessionConfig = Field(default_factory=SessionConfig)
    results: List[EventResult] = Field(default_factory=list)
    started_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        config: Optional[SessionConfig] = None,
        dictionary: Optional[Dictionary] = None,
        **config_kwargs: Any
    ) -> "Replay":
        """
        Factory method to create a replay around a fresh session.

        Args:
            config: Optional SessionConfig instance
            dictionary: Shared word list (loaded from config when None)
            **config_kwargs: Config parameters if config not provided
        """
        if config is None:
            config = SessionConfig(**config_kwargs)

        session = GameSession.create(config=config, dictionary=dictionary)
        return cls(session=session, config=config)

    def apply(self, event: Event) -> EventResult:
        """Dispatch one event to the session and record the result."""
        if self.started_at is None:
            self.started_at = datetime.now()

        session = self.session
        if event.type == "select":
            outcome = session.on_cell_interaction(event.row, event.col)
        elif event.type == "submit":
            outcome = session.on_submit()
        elif event.type == "reset":
            outcome = session.on_reset_selection()
        elif event.type == "custom":
            outcome = session.set_custom_grid(event.letters)
        else:
            outcome = session.toggle_grid_mode()

        result = EventResult(
            index=len(self.results),
            event=event,
            outcome=outcome,
            score=session.score,
            current_word=session.current_word,
        )
        self.results.append(result)
        return result

    def run(self, events: Optional[List[Event]] = None, verbose: bool = False) -> ReplayResult:
        """
        Apply events in order and return the final result.

        Args:
            events: Events to apply (defaults to config.events)
            verbose: Print the board and outcome after each event
        """
        events = self.config.events if events is None else events
        self.started_at = self.started_at or datetime.now()

        if verbose:
            print(f"Grid ({self.session.mode}):")
            print(render_grid(self.session.grid))
            print("-" * 40)

        for event in events:
            result = self.apply(event)
            if verbose:
                print(describe(result.outcome))
                print(render_grid(self.session.grid, self.session.selector.positions))
                print(f"Word: {result.current_word}  Score: {result.score}")
                print("-" * 40)

        return self.get_result()

    def get_result(self) -> ReplayResult:
        """Get the replay result so far."""
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        return ReplayResult(
            config=self.config,
            events=self.results,
            final_state=self.session.snapshot(),
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the replay result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)


def describe(outcome: Outcome) -> str:
    """One-line, user-facing description of an outcome."""
    if outcome.kind == "failure":
        return f"❌ {outcome.title}: {outcome.message}"
    if outcome.kind == "success":
        return f"✅ {outcome.title} {outcome.message}"
    return outcome.message
