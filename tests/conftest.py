"""
Root pytest configuration for the tabular MDP solver tests.

Provides shared markers and the 2x2 gridworld fixtures used across test
packages:

    . .      (0,0) (0,1)
    # E      wall  (1,1) terminal
"""

import pytest
import torch

from environments.gridworld import Gridworld, GridworldAction, GridworldState
from models.config import SolverConfig
from models.policy import Policy
from models.value import StateValue


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow-running"
    )


@pytest.fixture
def gridworld():
    """2x2 gridworld with one wall and one end cell."""
    return Gridworld.from_layout(["..", "#E"])


@pytest.fixture
def test_config():
    """Configuration matching the reference gridworld results."""
    return SolverConfig(
        discount_factor=0.97,
        iterations_before_improvement=None,
        exploration_rate=0.1,
    )


@pytest.fixture
def generator():
    """Seeded torch generator for deterministic draws."""
    g = torch.Generator()
    g.manual_seed(1234)
    return g


@pytest.fixture
def optimal_policy(gridworld):
    """Optimal policy of the 2x2 gridworld."""
    policy = Policy(gridworld.get_states(), gridworld.get_actions())
    policy.insert(GridworldState(0, 0), GridworldAction.RIGHT)
    policy.insert(GridworldState(0, 1), GridworldAction.DOWN)
    policy.insert(GridworldState(1, 1), GridworldAction.UP)
    return policy


@pytest.fixture
def optimal_state_value(gridworld):
    """Optimal state values of the 2x2 gridworld (gamma = 0.97)."""
    state_value = StateValue(gridworld.get_states())
    state_value.insert(GridworldState(0, 0), 96.0)
    state_value.insert(GridworldState(0, 1), 100.0)
    state_value.insert(GridworldState(1, 1), 0.0)
    return state_value
