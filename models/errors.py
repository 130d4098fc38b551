"""
Error Types.

Every failure in this library is a usage error: a container queried with a
key outside the sampler that built it, a sampler built from nothing, or a
configuration that does not match the requested algorithm. None of them
are retried.
"""

from enum import Enum
from typing import Any


class NotFound(Enum):
    """Lookup families that can miss a key."""
    STATE_IN_POLICY = "state not found in policy"
    STATE_IN_STATE_VALUE = "state not found in state value"
    STATE_IN_ACTION_VALUE = "state not found in action value"
    ACTION_IN_STATE_ACTION_VALUE = "action not found in state action value"


class NotFoundError(LookupError):
    """Raised when a container is queried with a key it was not built with.

    Attributes:
        kind: Which lookup family failed
        key: The offending state or action
    """

    def __init__(self, kind: NotFound, key: Any):
        super().__init__(f"{kind.value}: {key!r}")
        self.kind = kind
        self.key = key


class EmptySamplerError(ValueError):
    """Raised when a Sampler is constructed from zero items."""
    pass


class PreconditionError(ValueError):
    """Raised when a config is inconsistent with the requested algorithm.

    Checked before any computation happens.
    """
    pass
