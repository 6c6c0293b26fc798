"""Word-search puzzle generation."""

from .models import (
    EMPTY,
    Cell,
    GridSize,
    Orientations,
    WordSearchConfig,
    Placement,
    PlacementCandidate,
    ValidationError,
    ValidationResult,
)
from .grid import Grid
from .directions import directions_for, ORIENTATION_VECTORS, OCTANTS
from .placement import can_place, try_place, overlap_count, plan_placement
from .generator import generate, GeneratedPuzzle, LETTER_WEIGHTS
from .validation import validate_config

__all__ = [
    # Models
    "EMPTY",
    "Cell",
    "GridSize",
    "Orientations",
    "WordSearchConfig",
    "Placement",
    "PlacementCandidate",
    "ValidationError",
    "ValidationResult",
    # Grid
    "Grid",
    # Directions
    "directions_for",
    "ORIENTATION_VECTORS",
    "OCTANTS",
    # Placement
    "can_place",
    "try_place",
    "overlap_count",
    "plan_placement",
    # Generation
    "generate",
    "GeneratedPuzzle",
    "LETTER_WEIGHTS",
    # Validation
    "validate_config",
]
