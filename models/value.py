"""
Value Tables.

Hash-map backed value functions, pre-populated with 0.0 for every key of
the sampler that builds them:

- StateValue: State -> expected return
- StateActionValue: Action -> expected return, for one fixed state
- ActionValue: State -> StateActionValue (the Q table)

Greedy selection breaks exact ties in favour of the first action in
sampler order.
"""

from typing import Dict, Generic, Hashable, ItemsView, Iterator, Optional, TypeVar

import torch

from models.errors import NotFound, NotFoundError
from models.policy import Policy
from models.sampler import Sampler


S = TypeVar("S", bound=Hashable)
A = TypeVar("A", bound=Hashable)


class StateValue(Generic[S]):
    """Mapping State -> float, zero-initialized over a state sampler."""

    def __init__(self, states: Sampler[S]):
        self._map: Dict[S, float] = {state: 0.0 for state in states}

    def get(self, state: S) -> float:
        """Return the value of a state.

        Raises:
            NotFoundError: If the state was not in the building sampler
        """
        try:
            return self._map[state]
        except KeyError:
            raise NotFoundError(NotFound.STATE_IN_STATE_VALUE, state) from None

    def insert(self, state: S, value: float) -> None:
        self._map[state] = value

    def max_difference(self, other: "StateValue[S]") -> float:
        """L-infinity distance to another table over the same states."""
        return max(abs(value - other.get(state)) for state, value in self._map.items())

    def items(self) -> ItemsView[S, float]:
        return self._map.items()

    def copy(self) -> "StateValue[S]":
        clone = StateValue.__new__(StateValue)
        clone._map = dict(self._map)
        return clone

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[S]:
        return iter(self._map)

    def __repr__(self) -> str:
        return f"StateValue({self._map!r})"


class StateActionValue(Generic[A]):
    """Action values for a single state.

    Keeps a reference to the action sampler it was built from so that
    epsilon-greedy exploration can draw from the full action set.
    """

    def __init__(self, actions: Sampler[A]):
        self._actions = actions
        self._map: Dict[A, float] = {action: 0.0 for action in actions}

    def get(self, action: A) -> float:
        """Return the value of an action.

        Raises:
            NotFoundError: If the action was not in the building sampler
        """
        try:
            return self._map[action]
        except KeyError:
            raise NotFoundError(NotFound.ACTION_IN_STATE_ACTION_VALUE, action) from None

    def insert(self, action: A, value: float) -> None:
        self._map[action] = value

    def greedy(self) -> A:
        """Return the arg-max action.

        Exact ties go to the action seen first in sampler order.
        """
        best_action = None
        best_value = None
        for action, value in self._map.items():
            if best_value is None or value > best_value:
                best_action = action
                best_value = value
        return best_action

    def epsilon_greedy(
        self,
        epsilon: float,
        generator: Optional[torch.Generator] = None
    ) -> A:
        """Explore with probability epsilon, otherwise act greedily.

        Exploration draws uniformly from the full action sampler, so it can
        pick the greedy action by chance.

        Args:
            epsilon: Exploration probability in [0, 1]
            generator: Optional torch generator for the coin flip and draw

        Returns:
            Selected action
        """
        if torch.rand(1, generator=generator).item() < epsilon:
            return self._actions.get_random(generator)
        return self.greedy()

    def items(self) -> ItemsView[A, float]:
        return self._map.items()

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"StateActionValue({self._map!r})"


class ActionValue(Generic[S, A]):
    """Q table: State -> StateActionValue, total over a state sampler.

    Args:
        states: Sampler over all states
        actions: Sampler over all actions
    """

    def __init__(self, states: Sampler[S], actions: Sampler[A]):
        self._map: Dict[S, StateActionValue[A]] = {
            state: StateActionValue(actions) for state in states
        }

    def state_action_value(self, state: S) -> StateActionValue[A]:
        """Return the action values of one state.

        Raises:
            NotFoundError: If the state was not in the building sampler
        """
        try:
            return self._map[state]
        except KeyError:
            raise NotFoundError(NotFound.STATE_IN_ACTION_VALUE, state) from None

    def get(self, state: S, action: A) -> float:
        return self.state_action_value(state).get(action)

    def insert(self, state: S, action: A, value: float) -> None:
        self.state_action_value(state).insert(action, value)

    def greedy(self, state: S) -> A:
        return self.state_action_value(state).greedy()

    def epsilon_greedy(
        self,
        state: S,
        epsilon: float,
        generator: Optional[torch.Generator] = None
    ) -> A:
        return self.state_action_value(state).epsilon_greedy(epsilon, generator)

    def greedy_policy(self, states: Sampler[S], actions: Sampler[A]) -> Policy[S, A]:
        """Derive a deployable policy by taking the greedy action everywhere.

        Args:
            states: Sampler over all states
            actions: Sampler over all actions

        Returns:
            Policy mapping every state to its greedy action
        """
        return Policy.from_mapping({state: self.greedy(state) for state in states})

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[S]:
        return iter(self._map)

    def __repr__(self) -> str:
        return f"ActionValue({self._map!r})"
