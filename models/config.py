"""
Solver Configuration.

Defines the hyperparameter bundle consumed by every solver, its defaults,
and YAML load/save helpers.

iterations_before_improvement selects the dynamic-programming flavour:
None means policy iteration (evaluate to convergence), a positive count
means value iteration (that many sweeps per improvement round).
"""

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import torch
import yaml


DISCOUNT_FACTOR = 0.97
LEARNING_RATE = 0.3
EXPLORATION_RATE = 0.1
NUM_EPISODES = 500
MAX_NUM_STEPS = 1000
ITERATIONS_BEFORE_IMPROVEMENT: Optional[int] = None


@dataclass(frozen=True)
class SolverConfig:
    """Hyperparameters shared by all solvers.

    Attributes:
        discount_factor: Weight of future rewards, in [0, 1]
        learning_rate: TD step size, in (0, 1]
        exploration_rate: Epsilon for epsilon-greedy selection, in [0, 1]
        num_episodes: Number of TD training episodes (bandit: pulls)
        max_num_steps: Step cap per episode, also the sweep cap of
            policy evaluation
        iterations_before_improvement: Evaluation sweeps per improvement
            round (None for policy iteration)
        seed: Optional seed for a private torch generator
    """
    discount_factor: float = DISCOUNT_FACTOR
    learning_rate: float = LEARNING_RATE
    exploration_rate: float = EXPLORATION_RATE
    num_episodes: int = NUM_EPISODES
    max_num_steps: int = MAX_NUM_STEPS
    iterations_before_improvement: Optional[int] = ITERATIONS_BEFORE_IMPROVEMENT
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("discount_factor", "learning_rate", "exploration_rate"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
        optional = ("iterations_before_improvement", "seed")
        for name in ("num_episodes", "max_num_steps") + optional:
            value = getattr(self, name)
            if value is None and name in optional:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not 0.0 <= self.discount_factor <= 1.0:
            raise ValueError("discount_factor must be in [0, 1]")
        if not 0.0 < self.learning_rate <= 1.0:
            raise ValueError("learning_rate must be in (0, 1]")
        if not 0.0 <= self.exploration_rate <= 1.0:
            raise ValueError("exploration_rate must be in [0, 1]")
        if self.num_episodes <= 0:
            raise ValueError("num_episodes must be positive")
        if self.max_num_steps <= 0:
            raise ValueError("max_num_steps must be positive")
        if (self.iterations_before_improvement is not None
                and self.iterations_before_improvement < 0):
            raise ValueError("iterations_before_improvement must be None or non-negative")

    def replace(self, **overrides: Any) -> "SolverConfig":
        """Return a copy with some fields changed (validated again)."""
        return replace(self, **overrides)

    def make_generator(self) -> Optional[torch.Generator]:
        """Create a torch generator seeded from `seed`, or None if unset."""
        if self.seed is None:
            return None
        generator = torch.Generator()
        generator.manual_seed(self.seed)
        return generator

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: str) -> SolverConfig:
    """Load solver configuration from YAML file.

    Missing keys take their defaults.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        SolverConfig built from the file

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is empty, has unknown keys or invalid values
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raise ValueError("Config file is empty")
    if not isinstance(raw, dict):
        raise ValueError("Config file must contain a mapping")

    # Accept either a flat mapping or one nested under "solver"
    settings = raw.get("solver", raw)
    if not isinstance(settings, dict):
        raise ValueError("Solver settings must be a mapping")

    known = {f.name for f in fields(SolverConfig)}
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    return SolverConfig(**settings)


def save_config(config: SolverConfig, config_path: str) -> None:
    """Save solver configuration to YAML file.

    Args:
        config: Configuration to save
        config_path: Path to output YAML file
    """
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    output = {"solver": config.to_dict()}

    with open(path, 'w') as f:
        yaml.dump(output, f, default_flow_style=False, sort_keys=False)
