"""Game session layer for the word grid engine."""

from .models import (
    GridMode,
    OutcomeKind,
    EventType,
    Outcome,
    SessionSnapshot,
    Event,
    SessionConfig,
    EventResult,
    ReplayResult,
)
from .game import GameSession
from .replay import Replay, parse_command, describe

__all__ = [
    "GridMode",
    "OutcomeKind",
    "EventType",
    "Outcome",
    "SessionSnapshot",
    "Event",
    "SessionConfig",
    "EventResult",
    "ReplayResult",
    "GameSession",
    "Replay",
    "parse_command",
    "describe",
]
