"""
Optuna Objective Function.

Trains a TD solver with suggested hyperparameters on a gridworld and
scores the greedy policy by its average discounted return.
"""

from typing import Any, Callable, Dict

import optuna
from optuna import Trial

from environments.gridworld import Gridworld
from models.config import SolverConfig
from solvers.evaluation import evaluate_policy
from solvers.temporal_difference import q_learning, sarsa
from tuning.study_config import StudyConfig
from tuning.search_spaces import suggest_hyperparams


SOLVERS = {
    "sarsa": sarsa,
    "q_learning": q_learning,
}


def score_params(config: StudyConfig, params: Dict[str, Any], seed: int) -> float:
    """Train once and return the greedy policy's average return.

    Args:
        config: Study configuration
        params: learning_rate and exploration_rate
        seed: Seed for this training run

    Returns:
        Average discounted return over non-terminal start states
    """
    mdp = Gridworld.from_layout(config.layout)
    solver_config = SolverConfig(
        discount_factor=config.discount_factor,
        learning_rate=params["learning_rate"],
        exploration_rate=params["exploration_rate"],
        num_episodes=config.num_episodes,
        max_num_steps=config.max_num_steps,
        seed=seed,
    )
    action_value = SOLVERS[config.algorithm](mdp, solver_config)
    policy = action_value.greedy_policy(mdp.get_states(), mdp.get_actions())
    return evaluate_policy(mdp, policy, solver_config).avg_return


def create_objective(config: StudyConfig) -> Callable[[Trial], float]:
    """Create Optuna objective function for a study.

    Args:
        config: Study configuration

    Returns:
        Objective function that takes a Trial and returns float (avg return)
    """

    def objective(trial: Trial) -> float:
        """Train over several seeds and return the mean score.

        Args:
            trial: Optuna trial object

        Returns:
            Average return across seeds
        """
        params = suggest_hyperparams(trial)

        scores = []
        for seed in range(config.seeds_per_trial):
            scores.append(score_params(config, params, seed))

            # Report running mean to Optuna for pruning
            trial.report(sum(scores) / len(scores), seed)

            if trial.should_prune():
                raise optuna.TrialPruned()

        return sum(scores) / len(scores)

    return objective
