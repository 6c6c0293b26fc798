"""
Selection engine: turns pointer, touch and keyboard input into word selections.

States are idle -> selecting -> idle. Free-hand drags are snapped to the
nearest of the eight straight-line directions and clamped to the grid, so
a selection is always a straight run of cells.
"""

import math
from typing import Collection, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from ..puzzle.directions import OCTANTS
from ..puzzle.grid import Grid
from ..puzzle.models import Cell
from .models import (
    SelectionState,
    Selection,
    InputEvent,
    OutputEvent,
    GestureStart,
    GestureMove,
    GestureEnd,
    KeyPress,
    CursorMoved,
    SelectionChanged,
    SelectionCancelled,
    SelectionFinished,
)


ARROW_KEYS = {
    "ArrowUp": (-1, 0),
    "ArrowDown": (1, 0),
    "ArrowLeft": (0, -1),
    "ArrowRight": (0, 1),
}
CONFIRM_KEYS = {"Enter", " ", "Space", "Spacebar"}
CANCEL_KEYS = {"Escape", "Esc"}


def snap_run(grid: Grid, start: Cell, target: Cell) -> List[Cell]:
    """
    Straight run of cells from `start` towards `target`.

    The direction is the octant closest to the start->target angle and the
    length is the larger of the row/column distances. The run stops at the
    grid edge.
    """
    d_row = target.row - start.row
    d_col = target.col - start.col
    if d_row == 0 and d_col == 0:
        return [start]

    # Rows grow downward, so flip the row axis to get a conventional angle
    angle = math.atan2(-d_row, d_col)
    step_row, step_col = OCTANTS[round(angle / (math.pi / 4)) % 8]
    length = max(abs(d_row), abs(d_col))

    cells = [start]
    for i in range(1, length + 1):
        cell = Cell(start.row + step_row * i, start.col + step_col * i)
        if not grid.in_bounds(cell.row, cell.col):
            break
        cells.append(cell)
    return cells


def match_word(word: str, targets: Collection[str]) -> Optional[str]:
    """Return the target spelled by `word` forwards or backwards, if any."""
    if not word:
        return None
    word = word.upper()
    if word in targets:
        return word
    reverse = word[::-1]
    if reverse in targets:
        return reverse
    return None


class SelectionEngine(BaseModel):
    """
    Interaction state machine for one grid.

    Attributes:
        grid: The grid being searched (read only)
        state: idle or selecting
        selection: The in-progress selection, if any
        cursor: Keyboard cursor cell
        keyboard: Whether the in-progress selection was started from the keyboard
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    grid: Grid
    state: SelectionState = "idle"
    selection: Optional[Selection] = None
    cursor: Cell = Cell(0, 0)
    keyboard: bool = False

    def build_selection(self, start: Cell, target: Cell) -> Selection:
        cells = snap_run(self.grid, start, target)
        return Selection(start=start, end=cells[-1], cells=cells, word=self.grid.read(cells))

    def begin(self, cell: Cell, keyboard: bool = False) -> List[OutputEvent]:
        if not self.grid.in_bounds(cell.row, cell.col):
            return []
        self.state = "selecting"
        self.keyboard = keyboard
        self.selection = self.build_selection(cell, cell)
        return [SelectionChanged(selection=self.selection)]

    def extend(self, cell: Cell) -> List[OutputEvent]:
        if self.state != "selecting" or self.selection is None:
            return []
        updated = self.build_selection(self.selection.start, cell)
        if updated == self.selection:
            return []
        self.selection = updated
        return [SelectionChanged(selection=updated)]

    def finish(self, cell: Cell, targets: Collection[str]) -> List[OutputEvent]:
        if self.state != "selecting" or self.selection is None:
            return []
        final = self.build_selection(self.selection.start, cell)
        self._reset()
        # A run crossing a blank cell reads shorter than it is and never matches
        match = match_word(final.word, targets) if len(final.word) == len(final.cells) else None
        return [SelectionFinished(selection=final, match=match)]

    def cancel(self) -> List[OutputEvent]:
        if self.state != "selecting":
            return []
        self._reset()
        return [SelectionCancelled()]

    def move_cursor(self, d_row: int, d_col: int) -> List[OutputEvent]:
        row = min(max(self.cursor.row + d_row, 0), max(self.grid.rows - 1, 0))
        col = min(max(self.cursor.col + d_col, 0), max(self.grid.cols - 1, 0))
        if (row, col) == self.cursor:
            return []
        self.cursor = Cell(row, col)
        events: List[OutputEvent] = [CursorMoved(cell=self.cursor)]
        if self.keyboard:
            events.extend(self.extend(self.cursor))
        return events

    def handle(self, event: InputEvent, targets: Collection[str]) -> Tuple[SelectionState, List[OutputEvent]]:
        """
        Apply one input event.

        Args:
            event: Pointer, touch or keyboard event
            targets: Uppercase words still to be found

        Returns:
            The new state and the events emitted by the transition
        """
        if isinstance(event, GestureStart):
            events = self.begin(Cell(event.row, event.col))
        elif isinstance(event, GestureMove):
            events = self.extend(Cell(event.row, event.col))
        elif isinstance(event, GestureEnd):
            events = self.finish(Cell(event.row, event.col), targets)
        elif isinstance(event, KeyPress):
            events = self._handle_key(event.key, targets)
        else:
            raise ValueError(f"Unsupported input event: {event!r}")
        return self.state, events

    def _handle_key(self, key: str, targets: Collection[str]) -> List[OutputEvent]:
        if key in ARROW_KEYS:
            return self.move_cursor(*ARROW_KEYS[key])
        if key in CONFIRM_KEYS:
            if self.state == "selecting":
                return self.finish(self.cursor, targets)
            return self.begin(self.cursor, keyboard=True)
        if key in CANCEL_KEYS:
            return self.cancel()
        return []

    def _reset(self) -> None:
        self.state = "idle"
        self.selection = None
        self.keyboard = False
