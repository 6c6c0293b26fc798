"""Test configuration loading, validation and the command-line entry point."""

import json
import sys

import pytest
from src.main import load_config, main
from src.puzzle import GridSize, Orientations, WordSearchConfig, validate_config


CONFIG_YAML = """
words: [python, loops, lists]
gridSize: {rows: 8, cols: 8}
orientations:
  horizontal: true
  vertical: false
  diagonal: false
  reverseHorizontal: true
difficulty: hard
timeLimit: 120
fillRandomLetters: false
"""


def codes(items):
    return [item.code for item in items]


class TestConfigModel:
    """Test the configuration model."""

    def test_words_normalized(self):
        config = WordSearchConfig(words=[" cat ", "Dog"])
        assert config.words == ["CAT", "DOG"]

    def test_camel_case_keys(self):
        config = WordSearchConfig.model_validate({
            "words": ["cat"],
            "gridSize": {"rows": 6, "cols": 7},
            "orientations": {"reverseDiagonal": True},
            "timeLimit": 30,
            "showWordList": False,
        })
        assert config.grid_size.cols == 7
        assert config.orientations.reverse_diagonal is True
        assert config.time_limit == 30
        assert config.show_word_list is False
        assert config.is_timed is True

    def test_negative_time_limit_rejected(self):
        with pytest.raises(ValueError):
            WordSearchConfig(words=["cat"], time_limit=-1)


class TestValidateConfig:
    """Test configuration validation."""

    def test_valid_config(self):
        result = validate_config(WordSearchConfig(words=["cat", "dog"]))
        assert result.valid is True
        assert result.errors == []

    def test_empty_word_list(self):
        result = validate_config(WordSearchConfig(words=[]))
        assert result.valid is False
        assert "EMPTY_WORD_LIST" in codes(result.errors)

    def test_blank_and_duplicate_words(self):
        result = validate_config(WordSearchConfig(words=["cat", " ", "CAT"]))
        assert codes(result.errors) == ["EMPTY_WORD", "DUPLICATE_WORD"]

    def test_no_orientation(self):
        config = WordSearchConfig(
            words=["cat"],
            orientations=Orientations(horizontal=False, vertical=False, diagonal=False),
        )
        assert codes(validate_config(config).errors) == ["NO_ORIENTATION"]

    def test_empty_grid(self):
        config = WordSearchConfig(words=["cat"], grid_size=GridSize(rows=0, cols=10))
        assert "EMPTY_GRID" in codes(validate_config(config).errors)

    def test_grid_size_range_is_warning(self):
        config = WordSearchConfig(words=["cat"], grid_size=GridSize(rows=4, cols=30))
        result = validate_config(config)
        assert result.valid is True
        assert codes(result.warnings) == ["GRID_SIZE_RANGE"]

    def test_word_too_long_for_directions(self):
        """Fit depends on enabled directions: a diagonal-only 5x8 grid fits 5 letters."""
        config = WordSearchConfig(
            words=["planet", "moon"],
            grid_size=GridSize(rows=5, cols=8),
            orientations=Orientations(horizontal=False, vertical=False, diagonal=True),
        )
        result = validate_config(config)
        assert codes(result.errors) == ["WORD_TOO_LONG"]
        assert result.errors[0].word == "PLANET"


class TestCli:
    """Test the YAML loader and main()."""

    def test_load_config(self, tmp_path):
        path = tmp_path / "round.yaml"
        path.write_text(CONFIG_YAML)
        config = load_config(str(path))
        assert config.words == ["PYTHON", "LOOPS", "LISTS"]
        assert config.orientations.reverse_horizontal is True
        assert config.difficulty == "hard"
        assert config.fill_random_letters is False

    def test_load_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_main_validate_only(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "round.yaml"
        path.write_text(CONFIG_YAML)
        monkeypatch.setattr(sys, "argv", ["main", str(path), "--validate-only"])
        assert main() == 0
        assert "Configuration is valid" in capsys.readouterr().out

    def test_main_rejects_invalid(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "round.yaml"
        path.write_text("words: []\n")
        monkeypatch.setattr(sys, "argv", ["main", str(path)])
        assert main() == 1
        assert "EMPTY_WORD_LIST" in capsys.readouterr().err

    def test_main_writes_puzzle(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "round.yaml"
        path.write_text(CONFIG_YAML)
        output = tmp_path / "out" / "puzzle.json"
        monkeypatch.setattr(sys, "argv", ["main", str(path), "--seed", "3", "--output", str(output)])
        assert main() == 0
        data = json.loads(output.read_text())
        assert data["config"]["gridSize"] == {"rows": 8, "cols": 8}
        assert len(data["grid"]["cells"]) == 8
        assert len(data["placements"]) + len(data["unplaced"]) == 3
