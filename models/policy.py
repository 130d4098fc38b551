"""
Deterministic Policy.

A total mapping from every state of a sampler to one chosen action.
"""

from typing import Dict, Generic, Hashable, ItemsView, Iterator, Mapping, Optional, TypeVar

import torch

from models.errors import NotFound, NotFoundError
from models.sampler import Sampler


S = TypeVar("S", bound=Hashable)
A = TypeVar("A", bound=Hashable)


class Policy(Generic[S, A]):
    """Mapping State -> Action covering every state of a sampler.

    Each state starts with its own independent random action.

    Args:
        states: Sampler over all states
        actions: Sampler over all actions
        generator: Optional torch generator for the initial draws
    """

    def __init__(
        self,
        states: Sampler[S],
        actions: Sampler[A],
        generator: Optional[torch.Generator] = None,
    ):
        self._map: Dict[S, A] = {
            state: actions.get_random(generator) for state in states
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[S, A]) -> "Policy[S, A]":
        """Build a policy from known choices without any random draw.

        Args:
            mapping: Action for every state

        Returns:
            Policy holding a copy of the mapping
        """
        policy = cls.__new__(cls)
        policy._map = dict(mapping)
        return policy

    def get(self, state: S) -> A:
        """Return the action assigned to a state.

        Raises:
            NotFoundError: If the state was not in the building sampler
        """
        try:
            return self._map[state]
        except KeyError:
            raise NotFoundError(NotFound.STATE_IN_POLICY, state) from None

    def insert(self, state: S, action: A) -> None:
        self._map[state] = action

    def items(self) -> ItemsView[S, A]:
        return self._map.items()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Policy):
            return NotImplemented
        return self._map == other._map

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[S]:
        return iter(self._map)

    def __repr__(self) -> str:
        return f"Policy({self._map!r})"
