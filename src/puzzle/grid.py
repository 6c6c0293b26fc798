"""Grid model and rendering utilities."""

from typing import Iterable, List
from pydantic import BaseModel, Field

from .models import Cell, EMPTY


class Grid(BaseModel):
    """
    A rows x cols matrix of uppercase letters or the EMPTY marker.

    Reads and writes are bounds-checked; out-of-range access raises IndexError
    rather than wrapping around like negative list indices would.
    """

    cells: List[List[str]] = Field(default_factory=list)

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Grid":
        """Create a grid with every cell set to EMPTY."""
        return cls(cells=[[EMPTY for _ in range(cols)] for _ in range(rows)])

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Grid":
        """Build a grid from strings, one per row. '.' marks an empty cell."""
        return cls(cells=[
            [EMPTY if ch == "." else ch.upper() for ch in row]
            for row in rows
        ])

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self.cells[row][col]

    def set(self, row: int, col: int, letter: str) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        self.cells[row][col] = letter.upper()

    def read(self, cells: Iterable[Cell]) -> str:
        """Concatenate the letters at the given cells, skipping out-of-range ones."""
        return "".join(
            self.cells[c.row][c.col] for c in cells if self.in_bounds(c.row, c.col)
        )

    def empty_cells(self) -> List[Cell]:
        return [
            Cell(r, c)
            for r in range(self.rows)
            for c in range(self.cols)
            if self.cells[r][c] == EMPTY
        ]

    def clone(self) -> "Grid":
        return Grid(cells=[row.copy() for row in self.cells])

    def render(self, empty: str = ".", sep: str = " ") -> str:
        """Render the grid to a string, one line per row."""
        return "\n".join(
            sep.join(letter or empty for letter in row)
            for row in self.cells
        )
