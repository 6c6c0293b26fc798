"""
Pydantic models for gradable activities and their submissions.

Each activity kind carries its own configuration and submission schema and
is tagged by `type`, so a raw payload parses straight into the right model.
"""

from datetime import datetime
from typing import Annotated, Dict, List, Optional, Literal, Union
from pydantic import Field, TypeAdapter

from ..puzzle.models import CamelModel, WordSearchConfig


class ActivityConfiguration(CamelModel):
    """Settings shared by every activity kind."""
    time_limit: Optional[int] = Field(None, ge=0)  # seconds
    attempts: Optional[int] = Field(None, ge=1)
    passing_score: Optional[float] = Field(None, ge=0, le=100)
    instructions: Optional[str] = None
    is_graded: bool = False  # ungraded unless the activity opts in


# Multiple choice

class Question(CamelModel):
    text: str
    options: List[str] = Field(default_factory=list)
    correct_answer: int = Field(..., ge=0)  # index into options
    points: int = Field(1, ge=0)


class MultipleChoiceConfig(ActivityConfiguration):
    questions: List[Question] = Field(default_factory=list)


class MultipleChoiceSubmission(CamelModel):
    answers: List[Optional[int]] = Field(default_factory=list)


# Drag and drop

class DragItem(CamelModel):
    draggable_id: str
    content: str = ""
    correct_zone_id: str


class DropZone(CamelModel):
    zone_id: str
    label: str = ""


class DragDropConfig(ActivityConfiguration):
    items: List[DragItem] = Field(default_factory=list)
    drop_zones: List[DropZone] = Field(default_factory=list)


class DragDropSubmission(CamelModel):
    matches: Dict[str, str] = Field(default_factory=dict)  # draggable_id -> zone_id


# Fill in the blanks

class Blank(CamelModel):
    id: str
    correct_answer: str
    position: int = Field(0, ge=0)


class FillBlanksConfig(ActivityConfiguration):
    text: str = ""
    blanks: List[Blank] = Field(default_factory=list)


class FillBlanksSubmission(CamelModel):
    answers: Dict[str, str] = Field(default_factory=dict)  # blank id -> answer


# Word search

class WordSearchActivityConfig(WordSearchConfig, ActivityConfiguration):
    pass


class WordSearchSubmission(CamelModel):
    found_words: List[str] = Field(default_factory=list)
    score: float = 0.0
    time_spent: int = 0


# Flashcards

class Flashcard(CamelModel):
    front: str
    back: str


class FlashcardConfig(ActivityConfiguration):
    cards: List[Flashcard] = Field(default_factory=list)


class FlashcardSubmission(CamelModel):
    completed_cards: int = Field(0, ge=0)


# Activities, tagged by type

class MultipleChoiceActivity(CamelModel):
    type: Literal["QUIZ_MULTIPLE_CHOICE"] = "QUIZ_MULTIPLE_CHOICE"
    id: Optional[str] = None
    title: str = ""
    configuration: MultipleChoiceConfig


class DragDropActivity(CamelModel):
    type: Literal["QUIZ_DRAG_DROP"] = "QUIZ_DRAG_DROP"
    id: Optional[str] = None
    title: str = ""
    configuration: DragDropConfig


class FillBlanksActivity(CamelModel):
    type: Literal["QUIZ_FILL_BLANKS"] = "QUIZ_FILL_BLANKS"
    id: Optional[str] = None
    title: str = ""
    configuration: FillBlanksConfig


class WordSearchActivity(CamelModel):
    type: Literal["GAME_WORD_SEARCH"] = "GAME_WORD_SEARCH"
    id: Optional[str] = None
    title: str = ""
    configuration: WordSearchActivityConfig


class FlashcardActivity(CamelModel):
    type: Literal["GAME_FLASHCARDS"] = "GAME_FLASHCARDS"
    id: Optional[str] = None
    title: str = ""
    configuration: FlashcardConfig


Activity = Annotated[
    Union[
        MultipleChoiceActivity,
        DragDropActivity,
        FillBlanksActivity,
        WordSearchActivity,
        FlashcardActivity,
    ],
    Field(discriminator="type"),
]

ActivityAdapter: TypeAdapter = TypeAdapter(Activity)


class GradingResult(CamelModel):
    """Outcome of grading one submission."""
    grade: float  # 0-100
    score: float  # raw points earned
    total_points: float
    passed: Optional[bool] = None  # None when the activity has no passing score
    graded_by: str = "SYSTEM"
    graded_at: datetime = Field(default_factory=datetime.now)
    feedback: str = "Auto-graded by system"
