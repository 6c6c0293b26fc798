"""Round engine: selection state machine, scoring and countdown."""

from .models import (
    RoundState,
    Selection,
    GestureStart,
    GestureMove,
    GestureEnd,
    KeyPress,
    CursorMoved,
    SelectionChanged,
    SelectionCancelled,
    SelectionFinished,
    WordFound,
    TimerTicked,
    RoundCompleted,
    RoundResult,
)
from .selection import SelectionEngine, snap_run, match_word
from .scoring import score_for_word, completion_percentage
from .timer import Countdown, AsyncioScheduler, IntervalScheduler
from .round import WordSearchRound

__all__ = [
    "RoundState",
    "Selection",
    "GestureStart",
    "GestureMove",
    "GestureEnd",
    "KeyPress",
    "CursorMoved",
    "SelectionChanged",
    "SelectionCancelled",
    "SelectionFinished",
    "WordFound",
    "TimerTicked",
    "RoundCompleted",
    "RoundResult",
    "SelectionEngine",
    "snap_run",
    "match_word",
    "score_for_word",
    "completion_percentage",
    "Countdown",
    "AsyncioScheduler",
    "IntervalScheduler",
    "WordSearchRound",
]
