"""
Auto-grading of activity submissions.

Maps each activity kind's submission payload to a 0-100 grade:
1. Multiple choice: share of questions answered correctly (raw score in points)
2. Drag and drop: share of items dropped in their correct zone
3. Fill in the blanks: share of blanks matching, ignoring case and surrounding space
4. Word search: share of configured words found
5. Flashcards: share of cards completed
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type
from pydantic import BaseModel

from ..puzzle.generator import order_words
from .errors import NotGradableError, UnsupportedActivityError
from .models import (
    Activity,
    ActivityAdapter,
    ActivityConfiguration,
    GradingResult,
    MultipleChoiceConfig,
    MultipleChoiceSubmission,
    DragDropConfig,
    DragDropSubmission,
    FillBlanksConfig,
    FillBlanksSubmission,
    WordSearchActivityConfig,
    WordSearchSubmission,
    FlashcardConfig,
    FlashcardSubmission,
)


logger = logging.getLogger(__name__)

# (points earned, points available, grade 0-100)
Score = Tuple[float, float, float]


def _percentage(correct: float, total: float) -> float:
    return (correct / total) * 100 if total else 0.0


def grade_multiple_choice(submission: MultipleChoiceSubmission, config: MultipleChoiceConfig) -> Score:
    questions = config.questions
    answers = submission.answers
    correct = [
        q for i, q in enumerate(questions)
        if i < len(answers) and answers[i] == q.correct_answer
    ]
    earned = sum(q.points for q in correct)
    available = sum(q.points for q in questions)
    return earned, available, _percentage(len(correct), len(questions))


def grade_drag_drop(submission: DragDropSubmission, config: DragDropConfig) -> Score:
    correct = sum(
        1 for item in config.items
        if submission.matches.get(item.draggable_id) == item.correct_zone_id
    )
    total = len(config.items)
    return correct, total, _percentage(correct, total)


def grade_fill_blanks(submission: FillBlanksSubmission, config: FillBlanksConfig) -> Score:
    correct = sum(
        1 for blank in config.blanks
        if submission.answers.get(blank.id, "").strip().lower() == blank.correct_answer.strip().lower()
    )
    total = len(config.blanks)
    return correct, total, _percentage(correct, total)


def grade_word_search(submission: WordSearchSubmission, config: WordSearchActivityConfig) -> Score:
    words = order_words(config.words)
    found = {w.strip().upper() for w in submission.found_words} & set(words)
    return len(found), len(words), _percentage(len(found), len(words))


def grade_flashcards(submission: FlashcardSubmission, config: FlashcardConfig) -> Score:
    total = len(config.cards)
    completed = min(submission.completed_cards, total)
    return completed, total, _percentage(completed, total)


# activity type -> (submission model, grading function)
GRADERS: Dict[str, Tuple[Type[BaseModel], Callable[[Any, Any], Score]]] = {
    "QUIZ_MULTIPLE_CHOICE": (MultipleChoiceSubmission, grade_multiple_choice),
    "QUIZ_DRAG_DROP": (DragDropSubmission, grade_drag_drop),
    "QUIZ_FILL_BLANKS": (FillBlanksSubmission, grade_fill_blanks),
    "GAME_WORD_SEARCH": (WordSearchSubmission, grade_word_search),
    "GAME_FLASHCARDS": (FlashcardSubmission, grade_flashcards),
}


def _passed(config: ActivityConfiguration, grade: float) -> Optional[bool]:
    if config.passing_score is None:
        return None
    return grade >= config.passing_score


def grade(activity: Activity, submission: Any) -> GradingResult:
    """
    Grade a submission against its activity.

    Args:
        activity: A parsed activity of any gradable kind
        submission: The submission model for that kind, or a raw dict

    Returns:
        GradingResult with grade, raw score and pass/fail

    Raises:
        NotGradableError: If the activity is not configured as graded
        UnsupportedActivityError: If no grader exists for the activity type
    """
    if activity.type not in GRADERS:
        raise UnsupportedActivityError(activity.type)
    if not activity.configuration.is_graded:
        raise NotGradableError(activity.type)

    submission_model, grader = GRADERS[activity.type]
    if not isinstance(submission, submission_model):
        submission = submission_model.model_validate(submission)

    earned, available, percentage = grader(submission, activity.configuration)
    logger.debug("Graded %s: %.1f (%s/%s)", activity.type, percentage, earned, available)

    return GradingResult(
        grade=percentage,
        score=earned,
        total_points=available,
        passed=_passed(activity.configuration, percentage),
    )


def auto_grade(activity_type: str, configuration: Dict[str, Any], content: Dict[str, Any]) -> GradingResult:
    """
    Grade raw payloads as stored by the web layer.

    Args:
        activity_type: Type tag, e.g. "QUIZ_MULTIPLE_CHOICE"
        configuration: Activity configuration payload
        content: Submission payload

    Returns:
        GradingResult for the submission
    """
    if activity_type not in GRADERS:
        raise UnsupportedActivityError(activity_type)

    activity = ActivityAdapter.validate_python({"type": activity_type, "configuration": configuration})
    return grade(activity, content)
