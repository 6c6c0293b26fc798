"""Placement planning: feasibility checks, overlap ranking and committing words."""

import logging
import random
from typing import List, Optional

from .directions import Direction
from .grid import Grid
from .models import Difficulty, Placement, PlacementCandidate, EMPTY


logger = logging.getLogger(__name__)

# Randomized (direction, anchor) trials per word before giving up
MAX_ATTEMPTS = 100
HARD_MAX_ATTEMPTS = 300


def attempt_budget(difficulty: Difficulty) -> int:
    return HARD_MAX_ATTEMPTS if difficulty == "hard" else MAX_ATTEMPTS


def can_place(grid: Grid, word: str, row: int, col: int, d_row: int, d_col: int) -> bool:
    """Check every cell is in bounds and either empty or already holds the same letter."""
    if not word:
        return False

    last = len(word) - 1
    if not grid.in_bounds(row, col) or not grid.in_bounds(row + d_row * last, col + d_col * last):
        return False

    for i, letter in enumerate(word.upper()):
        current = grid.cells[row + d_row * i][col + d_col * i]
        if current != EMPTY and current != letter:
            return False
    return True


def overlap_count(grid: Grid, word: str, row: int, col: int, d_row: int, d_col: int) -> int:
    """Count the word's target cells that already hold the matching letter."""
    overlap = 0
    for i, letter in enumerate(word.upper()):
        r, c = row + d_row * i, col + d_col * i
        if grid.in_bounds(r, c) and grid.cells[r][c] == letter:
            overlap += 1
    return overlap


def try_place(grid: Grid, word: str, row: int, col: int, d_row: int, d_col: int) -> bool:
    """Write the word into the grid if it fits. The grid is untouched on failure."""
    if not can_place(grid, word, row, col, d_row, d_col):
        return False

    for i, letter in enumerate(word.upper()):
        grid.cells[row + d_row * i][col + d_col * i] = letter
    return True


def rank_candidates(
    candidates: List[PlacementCandidate],
    difficulty: Difficulty
) -> List[PlacementCandidate]:
    """
    Order candidates by preference for the given difficulty.

    Hard puzzles keep only crossing candidates when any exist and sort them by
    descending overlap. Easy and medium keep sampling order.
    """
    if difficulty != "hard":
        return list(candidates)

    crossing = [c for c in candidates if c.overlap > 0]
    pool = crossing or candidates
    return sorted(pool, key=lambda c: c.overlap, reverse=True)


def plan_placement(
    grid: Grid,
    word: str,
    directions: List[Direction],
    difficulty: Difficulty,
    rng: random.Random,
    max_attempts: Optional[int] = None,
) -> Optional[Placement]:
    """
    Sample random anchors and directions for a word and commit the best one.

    Easy accepts the first feasible candidate. Medium accepts the first
    crossing candidate, or any feasible one once half the budget is spent.
    Hard spends the whole budget and commits the highest-overlap candidate.

    Args:
        grid: Grid to place into (mutated on success)
        word: Uppercase word to place
        directions: Allowed unit vectors
        difficulty: Placement policy
        rng: Random source for sampling
        max_attempts: Override for the per-word trial budget

    Returns:
        The committed Placement, or None if no feasible candidate was found
    """
    word = word.upper()
    if not word or not directions or grid.rows == 0 or grid.cols == 0:
        return None

    budget = max_attempts if max_attempts is not None else attempt_budget(difficulty)
    candidates: List[PlacementCandidate] = []

    for attempt in range(budget):
        d_row, d_col = rng.choice(directions)
        row = rng.randrange(grid.rows)
        col = rng.randrange(grid.cols)

        if not can_place(grid, word, row, col, d_row, d_col):
            continue

        candidate = PlacementCandidate(
            word=word, row=row, col=col, d_row=d_row, d_col=d_col,
            overlap=overlap_count(grid, word, row, col, d_row, d_col),
        )

        if difficulty == "easy":
            return _commit(grid, candidate)
        if difficulty == "medium" and (candidate.overlap > 0 or attempt >= budget // 2):
            return _commit(grid, candidate)

        candidates.append(candidate)

    if not candidates:
        logger.debug("No feasible placement for %s in %d attempts", word, budget)
        return None

    return _commit(grid, rank_candidates(candidates, difficulty)[0])


def _commit(grid: Grid, candidate: PlacementCandidate) -> Placement:
    try_place(grid, candidate.word, candidate.row, candidate.col, candidate.d_row, candidate.d_col)
    return Placement(
        word=candidate.word,
        row=candidate.row,
        col=candidate.col,
        d_row=candidate.d_row,
        d_col=candidate.d_col,
    )
