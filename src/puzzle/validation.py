"""
Configuration validation for word-search rounds.

Validates:
1. Word list (non-empty list, no blank entries, no repeats)
2. Orientations (at least one direction enabled)
3. Grid size (non-zero, practical range as a warning)
4. Fit (every word can geometrically fit along some enabled direction)

Generation itself never fails on these; this layer lets callers reject a
configuration before a round starts.
"""

from typing import List

from .directions import directions_for
from .models import WordSearchConfig, ValidationError, ValidationResult


MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 20


def validate_words(words: List[str]) -> List[ValidationError]:
    """Check the word list is non-empty with no blank or repeated entries."""
    errors: List[ValidationError] = []

    if not words:
        errors.append(ValidationError(
            code="EMPTY_WORD_LIST",
            message="At least one word is required"
        ))
        return errors

    seen = set()
    for i, word in enumerate(words):
        if not word:
            errors.append(ValidationError(
                code="EMPTY_WORD",
                message=f"Word {i + 1} is empty"
            ))
            continue
        if word in seen:
            errors.append(ValidationError(
                code="DUPLICATE_WORD",
                message=f"'{word}' appears more than once",
                word=word
            ))
        seen.add(word)

    return errors


def max_run_length(config: WordSearchConfig) -> int:
    """Longest straight run available along any enabled direction."""
    rows, cols = config.grid_size.rows, config.grid_size.cols
    longest = 0
    for d_row, d_col in directions_for(config.orientations):
        if d_row and d_col:
            longest = max(longest, min(rows, cols))
        elif d_row:
            longest = max(longest, rows)
        else:
            longest = max(longest, cols)
    return longest


def validate_config(config: WordSearchConfig) -> ValidationResult:
    """
    Main validation function for a round configuration.

    Returns a ValidationResult with:
    - valid: True if a round can be generated with every word placeable
    - errors: problems that make the configuration unusable
    - warnings: problems generation tolerates
    """
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []

    errors.extend(validate_words(config.words))

    if not directions_for(config.orientations):
        errors.append(ValidationError(
            code="NO_ORIENTATION",
            message="At least one orientation must be enabled"
        ))

    rows, cols = config.grid_size.rows, config.grid_size.cols
    if rows == 0 or cols == 0:
        errors.append(ValidationError(
            code="EMPTY_GRID",
            message=f"Grid size {rows}x{cols} has no cells"
        ))
    elif not (MIN_GRID_SIZE <= rows <= MAX_GRID_SIZE and MIN_GRID_SIZE <= cols <= MAX_GRID_SIZE):
        warnings.append(ValidationError(
            code="GRID_SIZE_RANGE",
            message=(
                f"Grid size {rows}x{cols} is outside the recommended "
                f"{MIN_GRID_SIZE}-{MAX_GRID_SIZE} range"
            )
        ))

    longest = max_run_length(config)
    if longest:
        for word in config.words:
            if len(word) > longest:
                errors.append(ValidationError(
                    code="WORD_TOO_LONG",
                    message=f"'{word}' ({len(word)} letters) cannot fit; longest run is {longest}",
                    word=word
                ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
