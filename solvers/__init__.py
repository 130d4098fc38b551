"""
Solvers Package.

- dynamic_programming: policy evaluation/improvement, policy iteration,
  value iteration (needs the transition model)
- temporal_difference: SARSA and Q-learning (learns from sampled steps)
- bandit: epsilon-greedy value estimation for multi-armed bandits
- evaluation: discounted-return rollouts of a fixed policy

Run `python -m solvers --help` for the command-line interface.
"""

from solvers.dynamic_programming import (
    CONVERGENCE_THRESHOLD,
    PlanningResult,
    policy_evaluation,
    policy_improvement,
    policy_iteration,
    value_iteration,
)
from solvers.temporal_difference import temporal_difference, sarsa, q_learning
from solvers.bandit import BanditResult, epsilon_greedy_bandit
from solvers.evaluation import EvalResult, evaluate_policy, rollout

__all__ = [
    "CONVERGENCE_THRESHOLD",
    "PlanningResult",
    "policy_evaluation",
    "policy_improvement",
    "policy_iteration",
    "value_iteration",
    "temporal_difference",
    "sarsa",
    "q_learning",
    "BanditResult",
    "epsilon_greedy_bandit",
    "EvalResult",
    "evaluate_policy",
    "rollout",
]
