"""
Main entry point for generating word-search puzzles.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --seed 42 --output puzzles/round1.json --verbose
    python -m src.main config.yaml --validate-only
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .puzzle import WordSearchConfig, generate, validate_config


def load_config(config_path: str) -> WordSearchConfig:
    """Load a round configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return WordSearchConfig(**data)


def main():
    parser = argparse.ArgumentParser(
        description="Generate a word-search puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  words: [python, lists, tuples, loops]
  gridSize: {rows: 10, cols: 10}
  orientations:
    horizontal: true
    vertical: true
    diagonal: true
    reverseHorizontal: true
  difficulty: hard
  timeLimit: 300
  fillRandomLetters: true
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible grid"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the generated puzzle as JSON"
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only validate the configuration"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log generation details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    validation = validate_config(config)
    for warning in validation.warnings:
        print(f"⚠ {warning.message}", file=sys.stderr)
    if not validation.valid:
        print(f"✗ Configuration has {len(validation.errors)} errors:", file=sys.stderr)
        for err in validation.errors:
            print(f"  - [{err.code}] {err.message}", file=sys.stderr)
        return 1

    if args.validate_only:
        print("✓ Configuration is valid")
        return 0

    puzzle = generate(config, seed=args.seed)

    print(puzzle.grid.render())
    print()
    if config.show_word_list:
        print("Words: " + ", ".join(puzzle.placed_words))
    if puzzle.unplaced:
        print("Could not place: " + ", ".join(puzzle.unplaced))

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(
                {"config": config.model_dump(by_alias=True), **puzzle.model_dump()},
                f,
                indent=2,
            )
        print(f"\nPuzzle saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
