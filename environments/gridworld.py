"""
Gridworld Environment.

A deterministic 2D grid of cells. The agent moves up, down, left or right:

- Moving into an air cell, a wall or off the grid costs -1
  (walls and edges leave the agent in place)
- Moving into the end cell pays +100 and is terminal
- Every action from the end cell keeps the agent there with reward 0

Layouts can be written as text rows: '.' air, '#' wall, 'E' end.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from models.mdp import MDP, Action
from models.policy import Policy
from models.sampler import Sampler
from models.value import StateValue


NO_OP_TRANSITION_REWARD = -1.0
END_TRANSITION_REWARD = 100.0


class Cell(Enum):
    """Content of one grid cell."""
    AIR = "."
    WALL = "#"
    END = "E"


@dataclass(frozen=True)
class GridworldState:
    """Position (row i, column j) on the grid.

    The set of valid positions depends on the layout, so states are
    enumerated by Gridworld.get_states() rather than by the type.
    """
    i: int
    j: int


class GridworldAction(Action, Enum):
    """Moves on the grid, enumerated in this order."""
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"

    @classmethod
    def get_all(cls):
        return list(cls)


_MOVES = {
    GridworldAction.UP: (-1, 0),
    GridworldAction.DOWN: (1, 0),
    GridworldAction.LEFT: (0, -1),
    GridworldAction.RIGHT: (0, 1),
}

_ARROWS = {
    GridworldAction.UP: "^",
    GridworldAction.DOWN: "v",
    GridworldAction.LEFT: "<",
    GridworldAction.RIGHT: ">",
}


class Gridworld(MDP):
    """Deterministic gridworld MDP.

    Args:
        cell_grid: Rows of cells, all of the same length
        states: Optional explicit state list; defaults to every non-wall
            cell in row-major order
        actions: Optional explicit action list; defaults to all four moves

    Raises:
        ValueError: On an empty or ragged grid, or a state off the grid
    """

    def __init__(
        self,
        cell_grid: Sequence[Sequence[Cell]],
        states: Optional[Sequence[GridworldState]] = None,
        actions: Optional[Sequence[GridworldAction]] = None,
    ):
        if not cell_grid or not cell_grid[0]:
            raise ValueError("cell_grid must have at least one cell")
        width = len(cell_grid[0])
        if any(len(row) != width for row in cell_grid):
            raise ValueError("All rows of cell_grid must have the same length")

        self.cell_grid: List[List[Cell]] = [list(row) for row in cell_grid]

        if states is None:
            states = [
                GridworldState(i, j)
                for i, row in enumerate(self.cell_grid)
                for j, cell in enumerate(row)
                if cell != Cell.WALL
            ]
        else:
            states = list(states)
            n, m = len(self.cell_grid), width
            for state in states:
                if not (0 <= state.i < n and 0 <= state.j < m):
                    raise ValueError(f"State {state!r} is outside the {n}x{m} grid")
        if actions is None:
            actions = GridworldAction.get_all()

        self._states = Sampler(states)
        self._actions = Sampler(actions)

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> "Gridworld":
        """Build a gridworld from text rows such as ["..", "#E"].

        Raises:
            ValueError: On an unknown cell character
        """
        symbols = {cell.value: cell for cell in Cell}
        grid = []
        for row in rows:
            try:
                grid.append([symbols[char] for char in row.strip()])
            except KeyError as e:
                raise ValueError(f"Unknown cell character {e.args[0]!r} in layout") from None
        return cls(grid)

    def get_grid_size(self) -> Tuple[int, int]:
        return len(self.cell_grid), len(self.cell_grid[0])

    def get_states(self) -> Sampler[GridworldState]:
        return self._states

    def get_actions(self) -> Sampler[GridworldAction]:
        return self._actions

    def is_state_terminal(self, state: GridworldState) -> bool:
        return self.cell_grid[state.i][state.j] == Cell.END

    def transition(
        self,
        state: GridworldState,
        action: GridworldAction
    ) -> Tuple[GridworldState, float]:
        """Apply a move and return (next_state, reward)."""
        cell = self.cell_grid[state.i][state.j]

        # A wall state is never reachable, treat it like the end cell
        if cell in (Cell.END, Cell.WALL):
            return state, 0.0

        di, dj = _MOVES[action]
        i, j = state.i + di, state.j + dj

        n, m = self.get_grid_size()
        if i < 0 or i >= n or j < 0 or j >= m:
            return state, NO_OP_TRANSITION_REWARD

        next_cell = self.cell_grid[i][j]
        if next_cell == Cell.WALL:
            return state, NO_OP_TRANSITION_REWARD
        if next_cell == Cell.END:
            return GridworldState(i, j), END_TRANSITION_REWARD
        return GridworldState(i, j), NO_OP_TRANSITION_REWARD

    def render_policy(self, policy: Policy) -> str:
        """Draw a policy as arrows; walls '#', end cells 'E'."""
        lines = []
        for i, row in enumerate(self.cell_grid):
            chars = []
            for j, cell in enumerate(row):
                state = GridworldState(i, j)
                if cell != Cell.AIR or state not in self._states:
                    chars.append(cell.value)
                else:
                    chars.append(_ARROWS[policy.get(state)])
            lines.append("".join(chars))
        return "\n".join(lines)

    def render_state_value(self, state_value: StateValue, width: int = 8) -> str:
        """Draw a state-value table as a grid of numbers."""
        lines = []
        for i, row in enumerate(self.cell_grid):
            cells = []
            for j, cell in enumerate(row):
                state = GridworldState(i, j)
                if state in self._states:
                    cells.append(f"{state_value.get(state):>{width}.2f}")
                else:
                    cells.append(f"{cell.value:>{width}}")
            lines.append(" ".join(cells))
        return "\n".join(lines)
