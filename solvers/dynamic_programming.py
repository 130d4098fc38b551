"""
Dynamic-Programming Solvers.

Model-based planning over a known deterministic transition function:

- policy_evaluation: synchronous Bellman backups for a fixed policy
- policy_improvement: one-step greedy lookahead on a state-value table
- policy_iteration: evaluate to convergence, improve, repeat until the
  policy stops changing
- value_iteration: same loop with only a few evaluation sweeps per round

Which of the last two applies is chosen by
SolverConfig.iterations_before_improvement (None vs a positive count).
"""

from dataclasses import dataclass
from typing import Optional

import torch

from models.config import SolverConfig
from models.errors import PreconditionError
from models.mdp import MDP
from models.policy import Policy
from models.value import StateValue


# L-infinity change below which a sweep counts as converged
CONVERGENCE_THRESHOLD = 1e-5


@dataclass
class PlanningResult:
    """Result of policy iteration or value iteration.

    Attributes:
        state_value: Value table of the final policy
        policy: Final (fixed-point) policy
        improvement_rounds: Number of evaluate/improve rounds performed
    """
    state_value: StateValue
    policy: Policy
    improvement_rounds: int


def policy_evaluation(
    mdp: MDP,
    config: SolverConfig,
    policy: Policy,
    initial_state_value: Optional[StateValue] = None,
    verbose: bool = False,
) -> StateValue:
    """Estimate the value of a fixed policy.

    Each sweep backs up every state from the previous sweep's table
    (Jacobi style), then replaces the table. Stops when the largest change
    in a sweep is below CONVERGENCE_THRESHOLD, after
    iterations_before_improvement sweeps when that is set, or after
    max_num_steps sweeps.

    Args:
        mdp: Environment providing states and transitions
        config: Solver configuration
        policy: Policy to evaluate
        initial_state_value: Optional warm start (not modified)
        verbose: Print a notice when the sweep cap is hit

    Returns:
        Estimated StateValue (not converged if a cap was hit)
    """
    states = mdp.get_states()
    if initial_state_value is None:
        state_value = StateValue(states)
    else:
        state_value = initial_state_value.copy()

    cap = config.iterations_before_improvement
    sweep = 0
    while True:
        sweep += 1
        updated = state_value.copy()
        for state in states:
            action = policy.get(state)
            next_state, reward = mdp.transition(state, action)
            updated.insert(state, reward + config.discount_factor * state_value.get(next_state))
        delta = updated.max_difference(state_value)
        state_value = updated

        if delta < CONVERGENCE_THRESHOLD:
            break
        if cap is not None and sweep >= cap:
            break
        if sweep >= config.max_num_steps:
            if verbose:
                print(f"  Evaluation stopped after {sweep} sweeps (delta={delta:.3e})")
            break

    return state_value


def policy_improvement(
    mdp: MDP,
    config: SolverConfig,
    state_value: StateValue,
) -> Policy:
    """Build the greedy policy with respect to a state-value table.

    For every state picks the action maximizing r + gamma * V(s'). Ties go
    to the action listed first in the action sampler.

    Args:
        mdp: Environment providing states, actions and transitions
        config: Solver configuration
        state_value: Value table to act greedily on (not modified)

    Returns:
        New greedy Policy
    """
    states = mdp.get_states()
    actions = mdp.get_actions()
    choices = {}
    for state in states:
        best_action = None
        best_value = None
        for action in actions:
            next_state, reward = mdp.transition(state, action)
            value = reward + config.discount_factor * state_value.get(next_state)
            if best_value is None or value > best_value:
                best_value = value
                best_action = action
        choices[state] = best_action
    return Policy.from_mapping(choices)


def _policy_value_iteration(
    mdp: MDP,
    config: SolverConfig,
    generator: Optional[torch.Generator],
    verbose: bool,
) -> PlanningResult:
    states = mdp.get_states()
    actions = mdp.get_actions()
    if generator is None:
        generator = config.make_generator()

    state_value = StateValue(states)
    policy = Policy(states, actions, generator)
    rounds = 0
    while True:
        rounds += 1
        state_value = policy_evaluation(mdp, config, policy, state_value, verbose=verbose)
        new_policy = policy_improvement(mdp, config, state_value)
        if verbose:
            changed = sum(1 for state in states if new_policy.get(state) != policy.get(state))
            print(f"Round {rounds} | Policy changes: {changed}")
        if new_policy == policy:
            break
        policy = new_policy

    return PlanningResult(state_value=state_value, policy=policy, improvement_rounds=rounds)


def policy_iteration(
    mdp: MDP,
    config: SolverConfig,
    generator: Optional[torch.Generator] = None,
    verbose: bool = False,
) -> PlanningResult:
    """Solve an MDP by policy iteration.

    Args:
        mdp: Environment to solve
        config: Solver configuration; iterations_before_improvement must be None
        generator: Optional torch generator for the random initial policy
        verbose: Print one line per improvement round

    Returns:
        PlanningResult with the optimal policy and its values

    Raises:
        PreconditionError: If iterations_before_improvement is set
    """
    if config.iterations_before_improvement is not None:
        raise PreconditionError(
            "iterations_before_improvement must be None for policy iteration"
        )
    return _policy_value_iteration(mdp, config, generator, verbose)


def value_iteration(
    mdp: MDP,
    config: SolverConfig,
    generator: Optional[torch.Generator] = None,
    verbose: bool = False,
) -> PlanningResult:
    """Solve an MDP by value iteration.

    Each improvement round runs only iterations_before_improvement
    evaluation sweeps.

    Args:
        mdp: Environment to solve
        config: Solver configuration; iterations_before_improvement must be > 0
        generator: Optional torch generator for the random initial policy
        verbose: Print one line per improvement round

    Returns:
        PlanningResult with the optimal policy and its values

    Raises:
        PreconditionError: If iterations_before_improvement is None or 0
    """
    n = config.iterations_before_improvement
    if n is None or n <= 0:
        raise PreconditionError(
            "iterations_before_improvement must be a positive integer for value iteration"
        )
    return _policy_value_iteration(mdp, config, generator, verbose)
