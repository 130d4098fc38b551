"""Environments implementing the MDP and Bandit interfaces."""

from environments.gridworld import (
    Cell,
    Gridworld,
    GridworldAction,
    GridworldState,
    NO_OP_TRANSITION_REWARD,
    END_TRANSITION_REWARD,
)
from environments.bandit import KArmedBandit

__all__ = [
    "Cell",
    "Gridworld",
    "GridworldAction",
    "GridworldState",
    "NO_OP_TRANSITION_REWARD",
    "END_TRANSITION_REWARD",
    "KArmedBandit",
]
