"""
K-Armed Bandit Environment.

Each arm has a hidden mean drawn from a standard normal distribution.
Pulling an arm returns its mean plus unit-variance Gaussian noise.
"""

from typing import List, Optional

import torch

from models.mdp import Bandit
from models.sampler import Sampler


class KArmedBandit(Bandit):
    """Stationary k-armed Gaussian bandit. Arms are the integers 0..k-1.

    Args:
        k: Number of arms
        generator: Optional torch generator for drawing the arm means
    """

    def __init__(self, k: int, generator: Optional[torch.Generator] = None):
        if k <= 0:
            raise ValueError("k must be positive")
        self.arm_values: List[float] = torch.randn(k, generator=generator).tolist()
        self._actions = Sampler(range(k))

    def get_actions(self) -> Sampler[int]:
        return self._actions

    def reward(self, action: int, generator: Optional[torch.Generator] = None) -> float:
        """Sample the reward of an arm."""
        noise = torch.randn(1, generator=generator).item()
        return self.arm_values[action] + noise

    def optimal_action(self) -> int:
        """Arm with the highest mean."""
        return max(range(len(self.arm_values)), key=lambda arm: self.arm_values[arm])
