"""Data models for puzzle configuration, placement and validation."""

from typing import List, Optional, Literal, NamedTuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


Difficulty = Literal["easy", "medium", "hard"]
FillerMode = Literal["uniform", "weighted"]

# Marker for a cell no word or filler letter has claimed
EMPTY = ""


class CamelModel(BaseModel):
    """Accepts both snake_case and camelCase keys (web payloads use camelCase)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Cell(NamedTuple):
    """A single grid coordinate."""
    row: int
    col: int


class GridSize(CamelModel):
    rows: int = Field(..., ge=0)
    cols: int = Field(..., ge=0)


class Orientations(CamelModel):
    """Which straight-line directions words may run in."""
    horizontal: bool = True
    vertical: bool = True
    diagonal: bool = True
    reverse_horizontal: bool = False
    reverse_vertical: bool = False
    reverse_diagonal: bool = False

    @classmethod
    def all(cls) -> "Orientations":
        return cls(
            horizontal=True,
            vertical=True,
            diagonal=True,
            reverse_horizontal=True,
            reverse_vertical=True,
            reverse_diagonal=True,
        )


class WordSearchConfig(CamelModel):
    """Configuration for one word-search round. Immutable once a round starts."""
    words: List[str] = Field(default_factory=list)
    grid_size: GridSize = Field(default_factory=lambda: GridSize(rows=10, cols=10))
    orientations: Orientations = Field(default_factory=Orientations)
    difficulty: Difficulty = "medium"
    time_limit: Optional[int] = Field(None, ge=0)  # seconds; None or 0 means untimed
    show_word_list: bool = True
    fill_random_letters: bool = True
    filler: FillerMode = "uniform"

    @field_validator("words")
    @classmethod
    def normalize_words(cls, words: List[str]) -> List[str]:
        return [w.strip().upper() for w in words]

    @property
    def is_timed(self) -> bool:
        return bool(self.time_limit)


class Placement(BaseModel):
    """A word committed to the grid at an anchor cell along a direction."""
    word: str
    row: int
    col: int
    d_row: int
    d_col: int

    def cells(self) -> List[Cell]:
        return [
            Cell(self.row + self.d_row * i, self.col + self.d_col * i)
            for i in range(len(self.word))
        ]


class PlacementCandidate(Placement):
    """A feasible placement still being ranked."""
    overlap: int = 0


class ValidationError(BaseModel):
    """A single configuration problem."""
    code: str
    message: str
    word: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of configuration validation."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)
