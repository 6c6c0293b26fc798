"""Auto-grading for activity submissions."""

from .models import (
    Activity,
    ActivityAdapter,
    ActivityConfiguration,
    GradingResult,
    MultipleChoiceActivity,
    MultipleChoiceConfig,
    MultipleChoiceSubmission,
    Question,
    DragDropActivity,
    DragDropConfig,
    DragDropSubmission,
    DragItem,
    DropZone,
    FillBlanksActivity,
    FillBlanksConfig,
    FillBlanksSubmission,
    Blank,
    WordSearchActivity,
    WordSearchActivityConfig,
    WordSearchSubmission,
    FlashcardActivity,
    FlashcardConfig,
    FlashcardSubmission,
    Flashcard,
)
from .autograde import grade, auto_grade, GRADERS
from .errors import GradingError, NotGradableError, UnsupportedActivityError

__all__ = [
    "Activity",
    "ActivityAdapter",
    "ActivityConfiguration",
    "GradingResult",
    "MultipleChoiceActivity",
    "MultipleChoiceConfig",
    "MultipleChoiceSubmission",
    "Question",
    "DragDropActivity",
    "DragDropConfig",
    "DragDropSubmission",
    "DragItem",
    "DropZone",
    "FillBlanksActivity",
    "FillBlanksConfig",
    "FillBlanksSubmission",
    "Blank",
    "WordSearchActivity",
    "WordSearchActivityConfig",
    "WordSearchSubmission",
    "FlashcardActivity",
    "FlashcardConfig",
    "FlashcardSubmission",
    "Flashcard",
    "grade",
    "auto_grade",
    "GRADERS",
    "GradingError",
    "NotGradableError",
    "UnsupportedActivityError",
]
