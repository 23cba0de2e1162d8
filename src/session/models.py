"""
Pydantic models for the session layer.

This module contains the data models (configuration, outcomes, snapshots,
events and replay results) used throughout the session layer. The logic
classes (GameSession, Replay) live in their own files.
"""

from typing import List, Optional, Literal, Tuple
from pydantic import BaseModel, Field, ConfigDict, model_validator

from ..wordgrid.models import Grid


# Type aliases
GridMode = Literal["random", "custom"]
OutcomeKind = Literal["selected", "ignored", "success", "failure", "reset", "grid_changed"]
EventType = Literal["select", "submit", "reset", "custom", "toggle"]


class Outcome(BaseModel):
    """What happened on the last event, for the UI to report."""
    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    message: str = ""
    code: Optional[str] = None  # Error code on failure, e.g. "UNKNOWN_WORD"
    title: Optional[str] = None
    word: Optional[str] = None
    points: int = 0


class SessionSnapshot(BaseModel):
    """Immutable view of a session after an event."""
    model_config = ConfigDict(frozen=True)

    grid: Grid
    mode: GridMode
    selected: Tuple[Tuple[int, int], ...] = ()
    current_word: str = ""
    score: int = 0
    history: Tuple[str, ...] = ()
    last_outcome: Optional[Outcome] = None


class Event(BaseModel):
    """A single inbound event from the UI layer."""
    type: EventType
    row: Optional[int] = None
    col: Optional[int] = None
    letters: Optional[str] = None

    @model_validator(mode="after")
    def _check_fields(self) -> "Event":
        if self.type == "select" and (self.row is None or self.col is None):
            raise ValueError("select events need row and col")
        if self.type == "custom" and self.letters is None:
            raise ValueError("custom events need letters")
        return self


class SessionConfig(BaseModel):
    """Configuration for a game session."""
    size: int = Field(default=4, ge=1)
    seed: Optional[int] = None
    dictionary: Optional[str] = None  # Path to a word list; bundled list if unset
    letters: Optional[str] = None  # Start on a custom grid instead of a random one
    events: List[Event] = Field(default_factory=list)


class EventResult(BaseModel):
    """Result of applying one event."""
    index: int
    event: Event
    outcome: Outcome
    score: int = 0
    current_word: str = ""


class ReplayResult(BaseModel):
    """Result of a complete replay run."""
    config: SessionConfig
    events: List[EventResult] = Field(default_factory=list)
    final_state: Optional[SessionSnapshot] = None
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
