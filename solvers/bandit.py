"""
Epsilon-Greedy Bandit Solver.

Estimates arm values with constant step-size updates:
Q(a) += alpha * (r - Q(a))

Uses SolverConfig.num_episodes as the number of pulls, learning_rate as
alpha and exploration_rate as epsilon.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import torch

from models.config import SolverConfig
from models.mdp import Bandit
from models.value import StateActionValue


@dataclass
class BanditResult:
    """Result of a bandit run.

    Attributes:
        action_value: Estimated value per arm
        pull_counts: Number of pulls per arm
        rewards: Reward of every pull, in order
        best_action: Greedy arm under the final estimates
    """
    action_value: StateActionValue
    pull_counts: Dict[Any, int]
    rewards: List[float]
    best_action: Any

    @property
    def avg_reward(self) -> float:
        return sum(self.rewards) / len(self.rewards) if self.rewards else 0.0


def epsilon_greedy_bandit(
    bandit: Bandit,
    config: SolverConfig,
    generator: Optional[torch.Generator] = None,
) -> BanditResult:
    """Play a bandit for config.num_episodes pulls.

    Args:
        bandit: Bandit to play
        config: Solver configuration
        generator: Optional torch generator; defaults to config.make_generator()

    Returns:
        BanditResult with estimates, pull counts and rewards
    """
    actions = bandit.get_actions()
    if generator is None:
        generator = config.make_generator()

    action_value = StateActionValue(actions)
    pull_counts = {action: 0 for action in actions}
    rewards: List[float] = []

    for _ in range(config.num_episodes):
        action = action_value.epsilon_greedy(config.exploration_rate, generator)
        reward = bandit.reward(action, generator)
        current = action_value.get(action)
        action_value.insert(action, current + config.learning_rate * (reward - current))
        pull_counts[action] += 1
        rewards.append(reward)

    return BanditResult(
        action_value=action_value,
        pull_counts=pull_counts,
        rewards=rewards,
        best_action=action_value.greedy(),
    )
