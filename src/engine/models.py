"""
Pydantic models for the round engine.

Input events describe what the player did (pointer, touch or keyboard);
output events describe what changed. A UI layer feeds the former into
WordSearchRound.handle() and renders from the latter.
"""

from typing import List, Optional, Literal, Union
from pydantic import BaseModel, Field

from ..puzzle.models import Cell


RoundState = Literal["ready", "playing", "completed"]
SelectionState = Literal["idle", "selecting"]
Pointer = Literal["mouse", "touch", "keyboard"]
CompletionReason = Literal["all_found", "timeout", "submitted", "abandoned"]


class Selection(BaseModel):
    """A straight run of cells between a start and an end cell."""
    start: Cell
    end: Cell
    cells: List[Cell] = Field(default_factory=list)  # guide line, start to end inclusive
    word: str = ""


# Input events

class GestureStart(BaseModel):
    kind: Literal["gesture_start"] = "gesture_start"
    row: int
    col: int
    pointer: Pointer = "mouse"


class GestureMove(BaseModel):
    kind: Literal["gesture_move"] = "gesture_move"
    row: int
    col: int
    pointer: Pointer = "mouse"


class GestureEnd(BaseModel):
    kind: Literal["gesture_end"] = "gesture_end"
    row: int
    col: int
    pointer: Pointer = "mouse"


class KeyPress(BaseModel):
    """A key name as reported by the browser (ArrowUp, Enter, ' ', Escape, ...)."""
    kind: Literal["key"] = "key"
    key: str


InputEvent = Union[GestureStart, GestureMove, GestureEnd, KeyPress]


# Output events

class CursorMoved(BaseModel):
    kind: Literal["cursor_moved"] = "cursor_moved"
    cell: Cell


class SelectionChanged(BaseModel):
    kind: Literal["selection_changed"] = "selection_changed"
    selection: Selection


class SelectionCancelled(BaseModel):
    kind: Literal["selection_cancelled"] = "selection_cancelled"


class SelectionFinished(BaseModel):
    """A finalized selection; `match` is the target word it spelled, if any."""
    kind: Literal["selection_finished"] = "selection_finished"
    selection: Selection
    match: Optional[str] = None


class WordFound(BaseModel):
    kind: Literal["word_found"] = "word_found"
    word: str
    points: int
    total_points: int


class TimerTicked(BaseModel):
    kind: Literal["timer_ticked"] = "timer_ticked"
    elapsed: int
    remaining: Optional[int] = None  # None for untimed rounds


class RoundResult(BaseModel):
    """Completion payload handed to the grading/persistence layer."""
    found_words: List[str] = Field(default_factory=list)
    score: float = 0.0  # percentage of configured words found
    time_spent: int = 0  # elapsed seconds; also counted for untimed rounds
    points: int = 0  # in-game points including time bonus
    reason: Optional[CompletionReason] = None


class RoundCompleted(BaseModel):
    kind: Literal["round_completed"] = "round_completed"
    result: RoundResult


OutputEvent = Union[
    CursorMoved,
    SelectionChanged,
    SelectionCancelled,
    SelectionFinished,
    WordFound,
    TimerTicked,
    RoundCompleted,
]
