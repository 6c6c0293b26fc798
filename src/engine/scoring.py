"""Per-word scoring and round completion percentage."""

from typing import Collection, Optional


POINTS_PER_LETTER = 10
MAX_TIME_BONUS = 50


def score_for_word(word: str, time_remaining: int, time_limit: Optional[int]) -> int:
    """
    Points for finding a word: 10 per letter plus a time bonus.

    The bonus is floor(50 * time_remaining / time_limit) for timed rounds and
    zero for untimed ones.
    """
    base = POINTS_PER_LETTER * len(word)
    if not time_limit or time_limit <= 0:
        return base
    bonus = (MAX_TIME_BONUS * max(0, time_remaining)) // time_limit
    return base + bonus


def completion_percentage(found_words: Collection[str], words: Collection[str]) -> float:
    """Share of words found, 0-100. An empty word list scores 0."""
    if not words:
        return 0.0
    return 100 * len(found_words) / len(words)
