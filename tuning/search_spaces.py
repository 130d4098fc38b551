"""
Hyperparameter Search Spaces.

Defines search spaces for the tunable TD parameters. The discount factor
is fixed by the study since it also defines the score being maximized.
"""

from optuna import Trial
from typing import Dict, Any


def suggest_hyperparams(trial: Trial) -> Dict[str, Any]:
    """Suggest all hyperparameters for a trial.

    Args:
        trial: Optuna trial object

    Returns:
        Dictionary of hyperparameter values
    """
    params: Dict[str, Any] = {}

    params["learning_rate"] = trial.suggest_float(
        "learning_rate", 0.01, 1.0, log=True
    )
    params["exploration_rate"] = trial.suggest_float(
        "exploration_rate", 0.01, 0.5
    )

    return params


def get_default_params() -> Dict[str, Any]:
    """Get default hyperparameters for testing.

    Returns:
        Dictionary of default hyperparameter values
    """
    return {
        "learning_rate": 0.3,
        "exploration_rate": 0.1,
    }
