"""
Test suite for scoring, the countdown and the round lifecycle.

Tests cover:
- Per-word scoring with and without a time bonus
- Countdown expiry and stale callbacks
- Finding words by gesture, idempotent finds, cancellation
- Completion by timeout, by finding every word, by submission and abandonment
"""

import asyncio

import pytest
from src.puzzle import GridSize, Orientations, WordSearchConfig
from src.engine import (
    WordSearchRound,
    Countdown,
    AsyncioScheduler,
    score_for_word,
    completion_percentage,
    GestureStart,
    GestureMove,
    GestureEnd,
    KeyPress,
    WordFound,
    TimerTicked,
    RoundCompleted,
    SelectionCancelled,
)


class FakeHandle:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records the interval callback so tests can fire it by hand."""

    def __init__(self):
        self.callback = None
        self.handle = None

    def every(self, seconds, callback):
        self.callback = callback
        self.handle = FakeHandle()
        return self.handle


def make_round(words=("CAT", "DOG", "BIRD"), time_limit=60, **kwargs) -> WordSearchRound:
    config = WordSearchConfig(
        words=list(words),
        grid_size=GridSize(rows=10, cols=10),
        orientations=Orientations.all(),
        time_limit=time_limit,
    )
    return WordSearchRound.create(config, seed=42, **kwargs)


def select(round_, word, reverse=False):
    """Drag across a placed word's cells and return the emitted events."""
    cells = round_.puzzle.placement_for(word).cells()
    start, end = (cells[-1], cells[0]) if reverse else (cells[0], cells[-1])
    events = round_.handle(GestureStart(row=start.row, col=start.col))
    events += round_.handle(GestureMove(row=end.row, col=end.col))
    events += round_.handle(GestureEnd(row=end.row, col=end.col))
    return events


class TestScoring:
    """Test cases for word scoring."""

    def test_time_bonus(self):
        """Half the time left earns half the bonus."""
        assert score_for_word("CAT", 30, 60) == 55

    def test_full_bonus_at_start(self):
        assert score_for_word("BIRD", 60, 60) == 90

    def test_no_bonus_when_untimed(self):
        assert score_for_word("CAT", 0, None) == 30
        assert score_for_word("CAT", 0, 0) == 30

    def test_bonus_is_floored(self):
        """The bonus rounds down."""
        assert score_for_word("CAT", 1, 3) == 30 + 16

    def test_completion_percentage(self):
        assert completion_percentage(["CAT"], ["CAT", "DOG"]) == 50.0
        assert completion_percentage([], []) == 0.0


class TestCountdown:
    """Test cases for the countdown timer."""

    def test_expires_once(self):
        """The countdown expires on the last second and ignores later ticks."""
        countdown = Countdown(3)
        countdown.start()
        assert [countdown.tick() for _ in range(3)] == [False, False, True]
        assert countdown.remaining == 0
        assert countdown.tick() is False
        assert countdown.elapsed == 3

    def test_untimed_never_expires(self):
        countdown = Countdown(None)
        countdown.start()
        assert not any(countdown.tick() for _ in range(100))
        assert countdown.elapsed == 100

    def test_stop_releases_handle(self):
        """Stopping cancels the scheduled interval."""
        scheduler = FakeScheduler()
        countdown = Countdown(10, scheduler=scheduler)
        countdown.start()
        countdown.stop()
        assert scheduler.handle.cancelled is True
        assert countdown.tick() is False

    def test_asyncio_scheduler(self):
        """The asyncio scheduler fires repeatedly until cancelled."""
        calls = []

        async def run():
            handle = AsyncioScheduler().every(0.01, lambda: calls.append(1))
            await asyncio.sleep(0.1)
            handle.cancel()
            await asyncio.sleep(0)
            count = len(calls)
            await asyncio.sleep(0.05)
            return count

        count = asyncio.run(run())
        assert count >= 1
        assert len(calls) == count


class TestRoundLifecycle:
    """Test cases for starting, playing and completing a round."""

    def test_start_generates_grid(self):
        round_ = make_round()
        puzzle = round_.start()
        assert round_.state == "playing"
        assert sorted(puzzle.placed_words) == ["BIRD", "CAT", "DOG"]

    def test_cannot_start_twice(self):
        round_ = make_round()
        round_.start()
        with pytest.raises(ValueError):
            round_.start()

    def test_gestures_ignored_before_start(self):
        round_ = make_round()
        assert round_.handle(GestureStart(row=0, col=0)) == []
        assert round_.tick() == []

    def test_find_word_scores(self):
        """Finding a word adds base points plus the full bonus at t=0."""
        round_ = make_round()
        round_.start()
        events = select(round_, "CAT")
        found = [e for e in events if isinstance(e, WordFound)]
        assert len(found) == 1
        assert found[0].points == 30 + 50
        assert round_.found_words == ["CAT"]
        assert round_.points == 80

    def test_find_after_half_time(self):
        """Thirty seconds into a sixty-second round CAT is worth 55."""
        round_ = make_round()
        round_.start()
        for _ in range(30):
            round_.tick()
        select(round_, "CAT")
        assert round_.points == 55

    def test_reverse_selection_finds_word(self):
        round_ = make_round()
        round_.start()
        select(round_, "BIRD", reverse=True)
        assert round_.found_words == ["BIRD"]

    def test_refinding_does_not_double_count(self):
        """Selecting a found word again changes nothing."""
        round_ = make_round()
        round_.start()
        select(round_, "CAT")
        points = round_.points
        events = select(round_, "CAT")
        assert not any(isinstance(e, WordFound) for e in events)
        assert round_.found_words == ["CAT"]
        assert round_.points == points

    def test_escape_does_not_score(self):
        """Cancelling a selection never touches found words or points."""
        round_ = make_round()
        round_.start()
        cells = round_.puzzle.placement_for("DOG").cells()
        round_.handle(GestureStart(row=cells[0].row, col=cells[0].col))
        round_.handle(GestureMove(row=cells[-1].row, col=cells[-1].col))
        events = round_.handle(KeyPress(key="Escape"))
        assert isinstance(events[0], SelectionCancelled)
        round_.handle(GestureEnd(row=cells[-1].row, col=cells[-1].col))
        assert round_.found_words == []
        assert round_.points == 0

    def test_timeout_completes_round(self):
        """Ten ticks of a ten-second round complete it with nothing found."""
        results = []
        round_ = make_round(time_limit=10, on_complete=results.append)
        round_.start()
        events = []
        for _ in range(10):
            events += round_.tick()
        assert round_.state == "completed"
        assert isinstance(events[-1], RoundCompleted)
        assert len(results) == 1
        assert results[0].found_words == []
        assert results[0].score == 0
        assert results[0].time_spent == 10
        assert results[0].reason == "timeout"

    def test_ticks_after_completion_ignored(self):
        """A late timer callback cannot change a completed round."""
        results = []
        scheduler = FakeScheduler()
        round_ = make_round(time_limit=2, scheduler=scheduler, on_complete=results.append)
        round_.start()
        scheduler.callback()
        scheduler.callback()
        assert round_.state == "completed"
        assert scheduler.handle.cancelled is True
        assert scheduler.callback() == []
        assert len(results) == 1
        assert round_.result.time_spent == 2

    def test_finding_all_words_completes(self):
        results = []
        round_ = make_round(on_complete=results.append)
        round_.start()
        for word in ["CAT", "DOG", "BIRD"]:
            events = select(round_, word)
        assert isinstance(events[-1], RoundCompleted)
        assert round_.state == "completed"
        assert results[0].score == 100.0
        assert results[0].reason == "all_found"
        assert results[0].points == 30 + 50 + 30 + 50 + 40 + 50

    def test_gestures_ignored_after_completion(self):
        round_ = make_round()
        round_.start()
        round_.submit()
        assert select(round_, "CAT") == []
        assert round_.found_words == []

    def test_submit_reports_once(self):
        """Manual submission completes once; later calls return the same result."""
        results = []
        round_ = make_round(on_complete=results.append)
        round_.start()
        select(round_, "DOG")
        round_.tick()
        result = round_.submit()
        assert result.found_words == ["DOG"]
        assert result.score == pytest.approx(100 / 3)
        assert result.time_spent == 1
        assert round_.submit() == result
        assert len(results) == 1

    def test_submit_before_start_raises(self):
        with pytest.raises(ValueError):
            make_round().submit()

    def test_abandon_stops_timer_without_reporting(self):
        results = []
        scheduler = FakeScheduler()
        round_ = make_round(scheduler=scheduler, on_complete=results.append)
        round_.start()
        round_.abandon()
        assert scheduler.handle.cancelled is True
        assert round_.state == "completed"
        assert round_.result.reason == "abandoned"
        assert results == []

    def test_untimed_round_ticks(self):
        """Untimed rounds count elapsed time without a deadline or bonus."""
        round_ = make_round(time_limit=None)
        round_.start()
        events = round_.tick()
        assert isinstance(events[0], TimerTicked)
        assert events[0].remaining is None
        select(round_, "CAT")
        assert round_.points == 30
        assert round_.submit().time_spent == 1

    def test_listeners_receive_events(self):
        seen = []
        round_ = make_round()
        round_.subscribe(seen.append)
        round_.start()
        round_.tick()
        select(round_, "CAT")
        kinds = [e.kind for e in seen]
        assert kinds[0] == "timer_ticked"
        assert "word_found" in kinds
