"""
MDP Interfaces.

Defines the contracts an environment must satisfy so the solvers can use it:

- Collection: enumerable value types (the capability set of states/actions)
- MDP: state/action samplers, terminal predicate and transition function
- Bandit: action sampler and a stochastic reward

States and actions are plain immutable values (frozen dataclasses, enums,
ints, tuples). Equality, hashing and copying come from the value type
itself; Collection only adds enumeration.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterable, Optional, Tuple

import torch

from models.sampler import Sampler


class Collection:
    """Mixin for value types that can enumerate every one of their values.

    Concrete types implement get_all(); random draws and samplers are
    derived from it. This is a plain mixin rather than an ABC so that it
    can be combined with Enum.
    """

    @classmethod
    def get_all(cls) -> Iterable["Collection"]:
        """Return every value of this type."""
        raise NotImplementedError(f"{cls.__name__} must implement get_all()")

    @classmethod
    def sampler(cls) -> Sampler:
        """Build a Sampler over get_all() in enumeration order."""
        return Sampler(cls.get_all())

    @classmethod
    def get_random(cls, generator: Optional[torch.Generator] = None) -> "Collection":
        """Return one value drawn uniformly from get_all()."""
        return cls.sampler().get_random(generator)


class State(Collection):
    """Marker base for MDP states."""
    pass


class Action(Collection):
    """Marker base for MDP actions."""
    pass


class MDP(ABC):
    """Deterministic Markov Decision Process.

    Samplers returned by get_states() and get_actions() must stay the same
    for the lifetime of the environment. transition() must be a pure
    function of its inputs.
    """

    @abstractmethod
    def get_states(self) -> Sampler:
        """Return the sampler over all states."""
        pass

    @abstractmethod
    def get_actions(self) -> Sampler:
        """Return the sampler over all actions."""
        pass

    @abstractmethod
    def is_state_terminal(self, state: Hashable) -> bool:
        """Determine whether a state is terminal."""
        pass

    @abstractmethod
    def transition(self, state: Hashable, action: Hashable) -> Tuple[Any, float]:
        """Given a state and an action, return (next_state, reward)."""
        pass


class Bandit(ABC):
    """Multi-armed bandit: a single state with stochastic rewards."""

    @abstractmethod
    def get_actions(self) -> Sampler:
        """Return the sampler over all arms."""
        pass

    @abstractmethod
    def reward(
        self,
        action: Hashable,
        generator: Optional[torch.Generator] = None
    ) -> float:
        """Sample the reward of pulling an arm."""
        pass
