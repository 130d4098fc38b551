"""
Study Configuration.

Defines the configuration dataclass and predefined Optuna studies for
tuning the temporal-difference solvers on gridworld layouts.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Literal


DEFAULT_LAYOUT = [
    "....",
    ".#..",
    "..#.",
    "...E",
]


@dataclass
class StudyConfig:
    """Configuration for a single Optuna study.

    Attributes:
        study_name: Unique name for the study
        algorithm: TD solver to tune ("sarsa" or "q_learning")
        layout: Gridworld rows ('.' air, '#' wall, 'E' end)
        n_trials: Number of trials per study (default 50)
        seeds_per_trial: Independent training runs averaged per trial
        num_episodes: Training episodes per run
        max_num_steps: Step cap per episode and per evaluation rollout
        discount_factor: Fixed discount used for training and scoring
        storage_path: Optuna storage URL
    """
    study_name: str
    algorithm: Literal["sarsa", "q_learning"]
    layout: List[str] = field(default_factory=lambda: list(DEFAULT_LAYOUT))
    n_trials: int = 50
    seeds_per_trial: int = 5
    num_episodes: int = 300
    max_num_steps: int = 200
    discount_factor: float = 0.97
    storage_path: str = "sqlite:///data/optuna/td_tuning.db"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.algorithm not in ("sarsa", "q_learning"):
            raise ValueError(
                f"Invalid algorithm '{self.algorithm}'. Must be 'sarsa' or 'q_learning'"
            )
        if self.n_trials <= 0:
            raise ValueError("n_trials must be positive")
        if self.seeds_per_trial <= 0:
            raise ValueError("seeds_per_trial must be positive")


STUDY_CONFIGS: Dict[str, StudyConfig] = {
    "sarsa_gridworld": StudyConfig(
        study_name="sarsa_gridworld",
        algorithm="sarsa",
    ),
    "q_learning_gridworld": StudyConfig(
        study_name="q_learning_gridworld",
        algorithm="q_learning",
    ),
    "sarsa_corridor": StudyConfig(
        study_name="sarsa_corridor",
        algorithm="sarsa",
        layout=["........E"],
    ),
    "q_learning_corridor": StudyConfig(
        study_name="q_learning_corridor",
        algorithm="q_learning",
        layout=["........E"],
    ),
}
