import logging
import random
from typing import Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..puzzle.generator import GeneratedPuzzle, generate, order_words
from ..puzzle.models import WordSearchConfig
from .models import (
    RoundState,
    CompletionReason,
    InputEvent,
    OutputEvent,
    RoundResult,
    RoundCompleted,
    SelectionFinished,
    TimerTicked,
    WordFound,
)
from .scoring import score_for_word, completion_percentage
from .selection import SelectionEngine
from .timer import Countdown, IntervalScheduler


logger = logging.getLogger(__name__)


class WordSearchRound(BaseModel):
    """
    One playthrough of a word-search puzzle, from ready to completed.

    Owns the generated grid, the selection engine and the countdown. Input
    events are ignored unless the round is playing, and once completed the
    found words and points never change again.

    Attributes:
        config: Round configuration
        puzzle: Generated grid and placements (set by start())
        state: ready, playing or completed
        found_words: Words found so far, in the order they were found
        points: Accumulated in-game points
        result: Completion payload once the round is over
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: WordSearchConfig
    puzzle: Optional[GeneratedPuzzle] = None
    state: RoundState = "ready"
    found_words: List[str] = Field(default_factory=list)
    points: int = 0
    result: Optional[RoundResult] = None
    seed: Optional[int] = None

    _rng: random.Random = PrivateAttr(default=None)
    _selection: Optional[SelectionEngine] = PrivateAttr(default=None)
    _countdown: Optional[Countdown] = PrivateAttr(default=None)
    _scheduler: Optional[IntervalScheduler] = PrivateAttr(default=None)
    _on_complete: Optional[Callable[[RoundResult], None]] = PrivateAttr(default=None)
    _listeners: List[Callable[[OutputEvent], None]] = PrivateAttr(default_factory=list)

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(
        cls,
        config: WordSearchConfig,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        scheduler: Optional[IntervalScheduler] = None,
        on_complete: Optional[Callable[[RoundResult], None]] = None,
    ) -> "WordSearchRound":
        """
        Factory method to create a round with its collaborators.

        Args:
            config: Round configuration
            seed: Optional random seed for reproducibility
            rng: Random source; takes precedence over `seed`
            scheduler: Interval source driving the countdown (None = tick manually)
            on_complete: Called once with the RoundResult when the round completes

        Returns:
            A new round in the ready state
        """
        round_ = cls(config=config, seed=seed)
        if rng is not None:
            round_._rng = rng
        round_._scheduler = scheduler
        round_._on_complete = on_complete
        return round_

    @property
    def words(self) -> List[str]:
        """Distinct configured words, uppercase."""
        return order_words(self.config.words)

    @property
    def remaining_words(self) -> List[str]:
        return [w for w in self.words if w not in self.found_words]

    @property
    def selection(self) -> Optional[SelectionEngine]:
        return self._selection

    @property
    def elapsed(self) -> int:
        return self._countdown.elapsed if self._countdown else 0

    @property
    def time_remaining(self) -> int:
        if self._countdown is None:
            return self.config.time_limit or 0
        return self._countdown.remaining

    def subscribe(self, listener: Callable[[OutputEvent], None]) -> None:
        """Register a listener for every emitted event, including timer ticks."""
        self._listeners.append(listener)

    def start(self) -> GeneratedPuzzle:
        """
        Generate the grid and begin play.

        Raises:
            ValueError: If the round has already started or completed
        """
        if self.state != "ready":
            raise ValueError(f"Cannot start a round that is {self.state}")

        self.puzzle = generate(self.config, rng=self._rng, seed=self.seed)
        self._selection = SelectionEngine(grid=self.puzzle.grid)
        self.found_words = []
        self.points = 0
        self.state = "playing"

        self._countdown = Countdown(self.config.time_limit, scheduler=self._scheduler)
        self._countdown.start(on_second=self.tick)

        logger.info(
            "Round started: %d words placed, time limit %s",
            len(self.puzzle.placements), self.config.time_limit or "none"
        )
        return self.puzzle

    def handle(self, event: InputEvent) -> List[OutputEvent]:
        """Feed one input event through the selection engine and score any find."""
        if self.state != "playing" or self._selection is None:
            return []

        _, selection_events = self._selection.handle(event, self.remaining_words)

        events: List[OutputEvent] = []
        for emitted in selection_events:
            events.append(emitted)
            if isinstance(emitted, SelectionFinished) and emitted.match:
                events.extend(self._record_find(emitted.match))

        return self._emit(events)

    def tick(self) -> List[OutputEvent]:
        """Advance the countdown by one second. Ignored unless playing."""
        if self.state != "playing" or self._countdown is None:
            return []

        expired = self._countdown.tick()
        events: List[OutputEvent] = [TimerTicked(
            elapsed=self._countdown.elapsed,
            remaining=self._countdown.remaining if self._countdown.timed else None,
        )]
        if expired:
            events.extend(self._complete("timeout"))
        return self._emit(events)

    def submit(self) -> RoundResult:
        """
        End the round now and return its result.

        Raises:
            ValueError: If the round has not started
        """
        if self.state == "ready":
            raise ValueError("Cannot submit a round that has not started")
        if self.state == "playing":
            self._emit(self._complete("submitted"))
        return self.result

    def abandon(self) -> None:
        """Stop the round without reporting a result."""
        if self._countdown is not None:
            self._countdown.stop()
        if self.state != "completed":
            self.state = "completed"
            self.result = self._build_result("abandoned")
            logger.info("Round abandoned with %d/%d words found", len(self.found_words), len(self.words))

    def _record_find(self, word: str) -> List[OutputEvent]:
        if word in self.found_words:
            return []

        points = score_for_word(word, self.time_remaining, self.config.time_limit)
        self.found_words.append(word)
        self.points += points
        events: List[OutputEvent] = [WordFound(word=word, points=points, total_points=self.points)]

        placed = self.puzzle.placed_words if self.puzzle else []
        if placed and all(w in self.found_words for w in placed):
            events.extend(self._complete("all_found"))
        return events

    def _complete(self, reason: CompletionReason) -> List[OutputEvent]:
        if self.state == "completed":
            return []

        if self._countdown is not None:
            self._countdown.stop()
        self.state = "completed"
        self.result = self._build_result(reason)

        logger.info(
            "Round completed (%s): %d/%d words, %d points",
            reason, len(self.found_words), len(self.words), self.points
        )
        if self._on_complete is not None:
            self._on_complete(self.result)
        return [RoundCompleted(result=self.result)]

    def _build_result(self, reason: CompletionReason) -> RoundResult:
        return RoundResult(
            found_words=list(self.found_words),
            score=completion_percentage(self.found_words, self.words),
            time_spent=self.elapsed,
            points=self.points,
            reason=reason,
        )

    def _emit(self, events: List[OutputEvent]) -> List[OutputEvent]:
        for event in events:
            for listener in self._listeners:
                listener(event)
        return events
