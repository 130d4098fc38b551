"""
Hyperparameter Tuning Module.

This module provides Optuna integration for tuning the learning and
exploration rates of SARSA and Q-learning on gridworld layouts.
"""

from tuning.study_config import StudyConfig, STUDY_CONFIGS
from tuning.search_spaces import suggest_hyperparams, get_default_params
from tuning.objective import create_objective, score_params

__all__ = [
    "StudyConfig",
    "STUDY_CONFIGS",
    "suggest_hyperparams",
    "get_default_params",
    "create_objective",
    "score_params",
]
