"""
Temporal-Difference Control.

SARSA and Q-learning share one online TD(0) loop:
Q(s,a) += alpha * (target - Q(s,a))

- SARSA (on-policy): target = r + gamma * Q(s', a') with a' the action
  actually taken next
- Q-learning (off-policy): target = r + gamma * max_a Q(s', a)

Both run a fixed budget of episodes; there is no convergence test. A
deployable policy is derived afterwards with ActionValue.greedy_policy().
"""

from typing import Optional

import torch

from models.config import SolverConfig
from models.mdp import MDP
from models.value import ActionValue


def temporal_difference(
    mdp: MDP,
    config: SolverConfig,
    use_max_next_action: bool,
    generator: Optional[torch.Generator] = None,
    log_frequency: Optional[int] = None,
) -> ActionValue:
    """Train an action-value table with the TD(0) control loop.

    Episodes start from a state drawn uniformly from all states, terminal
    ones included; such an episode only performs a zero-reward update.

    Args:
        mdp: Environment to learn from
        config: Solver configuration (discount, learning and exploration
            rates, episode and step budgets)
        use_max_next_action: False for SARSA, True for Q-learning
        generator: Optional torch generator; defaults to config.make_generator()
        log_frequency: Print progress every this many episodes

    Returns:
        Trained ActionValue table
    """
    states = mdp.get_states()
    actions = mdp.get_actions()
    if generator is None:
        generator = config.make_generator()

    gamma = config.discount_factor
    alpha = config.learning_rate
    epsilon = config.exploration_rate

    action_value = ActionValue(states, actions)

    for episode in range(1, config.num_episodes + 1):
        state = states.get_random(generator)
        action = action_value.epsilon_greedy(state, epsilon, generator)
        episode_return = 0.0
        steps = 0

        for _ in range(config.max_num_steps):
            next_state, reward = mdp.transition(state, action)
            # Always drawn: SARSA's next step uses it even under Q-learning
            next_action = action_value.epsilon_greedy(next_state, epsilon, generator)

            current = action_value.get(state, action)
            if use_max_next_action:
                q_value = action_value.get(next_state, action_value.greedy(next_state))
            else:
                q_value = action_value.get(next_state, next_action)
            target = reward + gamma * q_value
            action_value.insert(state, action, current + alpha * (target - current))

            episode_return += reward
            steps += 1
            state = next_state
            action = next_action
            if mdp.is_state_terminal(state):
                break

        if log_frequency and episode % log_frequency == 0:
            print(f"Episode {episode}/{config.num_episodes} | "
                  f"Steps: {steps} | "
                  f"Return: {episode_return:.1f}")

    return action_value


def sarsa(
    mdp: MDP,
    config: SolverConfig,
    generator: Optional[torch.Generator] = None,
    log_frequency: Optional[int] = None,
) -> ActionValue:
    """On-policy TD control."""
    return temporal_difference(mdp, config, False, generator, log_frequency)


def q_learning(
    mdp: MDP,
    config: SolverConfig,
    generator: Optional[torch.Generator] = None,
    log_frequency: Optional[int] = None,
) -> ActionValue:
    """Off-policy TD control."""
    return temporal_difference(mdp, config, True, generator, log_frequency)
