"""
Policy Evaluation by Rollout.

Runs a deterministic policy from each start state and measures the
discounted return actually collected. Complements the Bellman-based
policy_evaluation with a direct check of what a learned policy does.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from models.config import SolverConfig
from models.mdp import MDP
from models.policy import Policy


@dataclass
class EvalResult:
    """Result of a rollout evaluation.

    Attributes:
        returns: Discounted return per start state
        avg_return: Average across start states
        max_return: Best return across start states
        reached_terminal: Whether each rollout ended in a terminal state
    """
    returns: Dict[Any, float]
    avg_return: float
    max_return: float
    reached_terminal: Dict[Any, bool]


def rollout(mdp: MDP, policy: Policy, config: SolverConfig, start_state: Any):
    """Follow a policy for at most max_num_steps steps.

    Returns:
        (discounted_return, reached_terminal)
    """
    state = start_state
    total = 0.0
    discount = 1.0
    for _ in range(config.max_num_steps):
        if mdp.is_state_terminal(state):
            return total, True
        state, reward = mdp.transition(state, policy.get(state))
        total += discount * reward
        discount *= config.discount_factor
    return total, mdp.is_state_terminal(state)


def evaluate_policy(
    mdp: MDP,
    policy: Policy,
    config: SolverConfig,
    start_states: Optional[Iterable[Any]] = None,
) -> EvalResult:
    """Roll out a policy from every start state.

    Args:
        mdp: Environment
        policy: Policy to follow
        config: Supplies discount_factor and max_num_steps
        start_states: Defaults to every non-terminal state of the MDP

    Returns:
        EvalResult with per-state returns
    """
    if start_states is None:
        start_states = [s for s in mdp.get_states() if not mdp.is_state_terminal(s)]

    returns: Dict[Any, float] = {}
    reached: Dict[Any, bool] = {}
    for state in start_states:
        returns[state], reached[state] = rollout(mdp, policy, config, state)

    values = list(returns.values())
    return EvalResult(
        returns=returns,
        avg_return=sum(values) / len(values) if values else 0.0,
        max_return=max(values) if values else 0.0,
        reached_terminal=reached,
    )
