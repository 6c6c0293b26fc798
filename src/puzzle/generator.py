"""
Grid generation for word-search puzzles.

Places every configured word (longest first) with the placement planner and
fills the leftover cells with filler letters. All randomness comes from the
injected random.Random so a fixed seed reproduces the same puzzle.
"""

import logging
import random
import string
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .directions import directions_for
from .grid import Grid
from .models import FillerMode, Placement, WordSearchConfig
from .placement import plan_placement


logger = logging.getLogger(__name__)

# Letter weights for "weighted" filler, taken from the standard
# Bananagrams tile distribution (144 tiles)
LETTER_WEIGHTS: Dict[str, int] = {
    "A": 13, "B": 3, "C": 3, "D": 6, "E": 18, "F": 3, "G": 4,
    "H": 3, "I": 12, "J": 2, "K": 2, "L": 5, "M": 3, "N": 8,
    "O": 11, "P": 3, "Q": 2, "R": 9, "S": 6, "T": 9, "U": 6,
    "V": 3, "W": 3, "X": 2, "Y": 3, "Z": 2
}


class GeneratedPuzzle(BaseModel):
    """A generated grid together with where each word ended up."""
    grid: Grid
    placements: List[Placement] = Field(default_factory=list)
    unplaced: List[str] = Field(default_factory=list)
    seed: Optional[int] = None

    @property
    def placed_words(self) -> List[str]:
        return [p.word for p in self.placements]

    def placement_for(self, word: str) -> Optional[Placement]:
        word = word.upper()
        return next((p for p in self.placements if p.word == word), None)


def order_words(words: List[str]) -> List[str]:
    """
    Order words for placement: longest first, then more distinct letters first.

    Blank entries and repeats are dropped. Ties keep input order.
    """
    unique: List[str] = []
    for word in words:
        word = word.strip().upper()
        if word and word not in unique:
            unique.append(word)
    return sorted(unique, key=lambda w: (len(w), len(set(w))), reverse=True)


def fill_empty_cells(grid: Grid, rng: random.Random, mode: FillerMode = "uniform") -> int:
    """
    Fill every empty cell with a filler letter.

    Returns:
        Number of cells filled
    """
    empty = grid.empty_cells()
    if not empty:
        return 0

    if mode == "weighted":
        letters = rng.choices(
            list(LETTER_WEIGHTS.keys()),
            weights=list(LETTER_WEIGHTS.values()),
            k=len(empty),
        )
    else:
        letters = [rng.choice(string.ascii_uppercase) for _ in empty]

    for cell, letter in zip(empty, letters):
        grid.cells[cell.row][cell.col] = letter
    return len(empty)


def generate(
    config: WordSearchConfig,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> GeneratedPuzzle:
    """
    Generate a word-search grid from a configuration.

    Never raises for a model-valid configuration: words that cannot be placed
    are logged and listed in `unplaced`, and the rest of the puzzle is still
    built.

    Args:
        config: Round configuration
        rng: Random source; takes precedence over `seed`
        seed: Seed for a fresh random.Random when `rng` is not given

    Returns:
        GeneratedPuzzle with the grid, placements and unplaced words
    """
    if rng is None:
        rng = random.Random(seed)

    grid = Grid.empty(config.grid_size.rows, config.grid_size.cols)
    directions = directions_for(config.orientations)

    if not directions:
        logger.warning("No orientation enabled; no words can be placed")

    placements: List[Placement] = []
    unplaced: List[str] = []

    for word in order_words(config.words):
        placement = plan_placement(grid, word, directions, config.difficulty, rng)
        if placement is None:
            logger.warning("Could not place word: %s", word)
            unplaced.append(word)
            continue
        placements.append(placement)

    if config.fill_random_letters:
        filled = fill_empty_cells(grid, rng, config.filler)
        logger.debug("Filled %d cells with %s filler", filled, config.filler)

    logger.info(
        "Generated %dx%d grid: %d placed, %d unplaced",
        grid.rows, grid.cols, len(placements), len(unplaced)
    )

    return GeneratedPuzzle(grid=grid, placements=placements, unplaced=unplaced, seed=seed)
