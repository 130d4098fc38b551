"""Tests for solver configuration module.

Tests SolverConfig validation and the YAML load/save helpers.
"""

import dataclasses

import pytest
import torch

from models.config import (
    SolverConfig,
    load_config,
    save_config,
    DISCOUNT_FACTOR,
    LEARNING_RATE,
    EXPLORATION_RATE,
    NUM_EPISODES,
    MAX_NUM_STEPS,
)


class TestSolverConfig:
    """Tests for SolverConfig dataclass."""

    def test_defaults(self):
        """Test default values."""
        config = SolverConfig()
        assert config.discount_factor == DISCOUNT_FACTOR == 0.97
        assert config.learning_rate == LEARNING_RATE == 0.3
        assert config.exploration_rate == EXPLORATION_RATE == 0.1
        assert config.num_episodes == NUM_EPISODES == 500
        assert config.max_num_steps == MAX_NUM_STEPS == 1000
        assert config.iterations_before_improvement is None
        assert config.seed is None

    def test_is_immutable(self):
        """Test fields cannot be reassigned."""
        config = SolverConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.discount_factor = 0.5

    @pytest.mark.parametrize("field,value,message", [
        ("discount_factor", 1.5, "discount_factor"),
        ("discount_factor", -0.1, "discount_factor"),
        ("learning_rate", 0.0, "learning_rate"),
        ("learning_rate", 1.1, "learning_rate"),
        ("exploration_rate", -0.01, "exploration_rate"),
        ("exploration_rate", 2.0, "exploration_rate"),
        ("num_episodes", 0, "num_episodes must be positive"),
        ("max_num_steps", -5, "max_num_steps must be positive"),
        ("iterations_before_improvement", -1, "iterations_before_improvement"),
    ])
    def test_invalid_values_raise(self, field, value, message):
        """Test out-of-range values raise ValueError."""
        with pytest.raises(ValueError) as exc_info:
            SolverConfig(**{field: value})
        assert message in str(exc_info.value)

    @pytest.mark.parametrize("field,value", [
        ("discount_factor", "high"),
        ("learning_rate", None),
        ("exploration_rate", True),
        ("num_episodes", 10.5),
        ("max_num_steps", "100"),
        ("iterations_before_improvement", 2.0),
        ("seed", "seven"),
    ])
    def test_wrong_types_raise(self, field, value):
        """Test non-numeric values raise ValueError naming the field."""
        with pytest.raises(ValueError) as exc_info:
            SolverConfig(**{field: value})
        assert field in str(exc_info.value)

    def test_integer_rates_accepted(self):
        """Test whole-number rates are valid numbers."""
        config = SolverConfig(discount_factor=1, learning_rate=1)
        assert config.discount_factor == 1

    def test_boundary_values_accepted(self):
        """Test inclusive bounds."""
        config = SolverConfig(
            discount_factor=1.0,
            learning_rate=1.0,
            exploration_rate=0.0,
            iterations_before_improvement=0,
        )
        assert config.discount_factor == 1.0

    def test_replace_returns_new_config(self):
        """Test builder-style override."""
        base = SolverConfig()
        changed = base.replace(iterations_before_improvement=3, seed=11)
        assert changed.iterations_before_improvement == 3
        assert changed.seed == 11
        assert base.iterations_before_improvement is None

    def test_replace_validates(self):
        """Test overrides are validated."""
        with pytest.raises(ValueError):
            SolverConfig().replace(learning_rate=0.0)

    def test_make_generator_without_seed(self):
        """Test no generator when no seed is set."""
        assert SolverConfig().make_generator() is None

    def test_make_generator_is_seeded(self):
        """Test generators from the same seed agree."""
        config = SolverConfig(seed=5)
        g1 = config.make_generator()
        g2 = config.make_generator()
        assert torch.equal(torch.rand(5, generator=g1), torch.rand(5, generator=g2))


class TestConfigIO:
    """Tests for YAML load/save."""

    def test_round_trip(self, tmp_path):
        """Test saving then loading gives an equal config."""
        path = tmp_path / "nested" / "solver.yaml"
        config = SolverConfig(discount_factor=0.9, iterations_before_improvement=3, seed=1)
        save_config(config, str(path))
        assert path.exists()
        assert load_config(str(path)) == config

    def test_flat_mapping_with_defaults(self, tmp_path):
        """Test a flat file with some keys fills in defaults."""
        path = tmp_path / "flat.yaml"
        path.write_text("learning_rate: 0.5\nnum_episodes: 10\n")
        config = load_config(str(path))
        assert config.learning_rate == 0.5
        assert config.num_episodes == 10
        assert config.discount_factor == DISCOUNT_FACTOR

    def test_missing_file_raises(self, tmp_path):
        """Test FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file_raises(self, tmp_path):
        """Test ValueError for an empty file."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(path))
        assert "empty" in str(exc_info.value)

    def test_unknown_keys_raise(self, tmp_path):
        """Test typos are reported."""
        path = tmp_path / "typo.yaml"
        path.write_text("solver:\n  discount_factr: 0.9\n")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(path))
        assert "discount_factr" in str(exc_info.value)

    def test_invalid_values_raise(self, tmp_path):
        """Test validation applies to loaded values."""
        path = tmp_path / "bad.yaml"
        path.write_text("solver:\n  exploration_rate: 3.0\n")
        with pytest.raises(ValueError):
            load_config(str(path))

    def test_null_solver_section_raises(self, tmp_path):
        """Test a solver key without settings is rejected."""
        path = tmp_path / "null.yaml"
        path.write_text("solver:\n")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(path))
        assert "mapping" in str(exc_info.value)

    def test_non_numeric_value_raises(self, tmp_path):
        """Test a string where a number belongs is a ValueError."""
        path = tmp_path / "word.yaml"
        path.write_text("solver:\n  discount_factor: high\n")
        with pytest.raises(ValueError) as exc_info:
            load_config(str(path))
        assert "discount_factor" in str(exc_info.value)
