"""
Models Package.

Containers and contracts shared by every solver:

- sampler: Sampler, a fixed non-empty set with uniform random draws
- mdp: Collection/State/Action value contracts, MDP and Bandit interfaces
- policy: Policy, a total State -> Action map
- value: StateValue, StateActionValue and ActionValue tables
- config: SolverConfig hyperparameters and YAML helpers
- errors: NotFoundError, EmptySamplerError, PreconditionError
"""

from models.errors import NotFound, NotFoundError, EmptySamplerError, PreconditionError
from models.sampler import Sampler
from models.mdp import Collection, State, Action, MDP, Bandit
from models.policy import Policy
from models.value import StateValue, StateActionValue, ActionValue
from models.config import SolverConfig, load_config, save_config

__all__ = [
    "NotFound",
    "NotFoundError",
    "EmptySamplerError",
    "PreconditionError",
    "Sampler",
    "Collection",
    "State",
    "Action",
    "MDP",
    "Bandit",
    "Policy",
    "StateValue",
    "StateActionValue",
    "ActionValue",
    "SolverConfig",
    "load_config",
    "save_config",
]
