"""
Sampler.

A fixed, ordered, non-empty set of items supporting iteration and uniform
random selection. Used to describe "all states" and "all actions" of an MDP
without requiring each concrete type to enumerate itself.
"""

from typing import Generic, Iterable, Iterator, Optional, Tuple, TypeVar

import torch

from models.errors import EmptySamplerError


T = TypeVar("T")


class Sampler(Generic[T]):
    """Ordered collection of items with uniform random draws.

    Iteration order is construction order. It only matters for the
    determinism of tie-breaking in greedy selection.

    Args:
        items: Items to sample from. Must not be empty.

    Raises:
        EmptySamplerError: If items is empty
    """

    def __init__(self, items: Iterable[T]):
        self._items: Tuple[T, ...] = tuple(items)
        if not self._items:
            raise EmptySamplerError("Sampler must contain at least one item")

    def get_random(self, generator: Optional[torch.Generator] = None) -> T:
        """Draw one item with probability 1/N.

        Args:
            generator: Optional torch generator; global RNG when None

        Returns:
            A uniformly selected item
        """
        index = torch.randint(len(self._items), (1,), generator=generator).item()
        return self._items[index]

    def iter(self) -> Iterator[T]:
        return iter(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Sampler({list(self._items)!r})"
