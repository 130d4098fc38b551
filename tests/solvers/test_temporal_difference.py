"""Tests for SARSA and Q-learning on the 2x2 gridworld."""

import pytest
import torch

from environments.gridworld import Gridworld, GridworldAction, GridworldState
from models.value import ActionValue
from solvers.temporal_difference import q_learning, sarsa, temporal_difference


TOP_LEFT = GridworldState(0, 0)
TOP_RIGHT = GridworldState(0, 1)
BOTTOM_RIGHT = GridworldState(1, 1)


@pytest.fixture
def td_config(test_config):
    return test_config.replace(
        learning_rate=0.3,
        exploration_rate=0.1,
        num_episodes=500,
        max_num_steps=1000,
    )


@pytest.mark.parametrize("solver", [sarsa, q_learning])
class TestTDControl:
    """Shared behavior of both TD solvers."""

    @pytest.mark.slow
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_learns_optimal_greedy_policy(self, solver, gridworld, td_config, seed):
        """Test the greedy actions of the learned table."""
        generator = torch.Generator().manual_seed(seed)
        action_value = solver(gridworld, td_config, generator)
        assert action_value.greedy(TOP_LEFT) == GridworldAction.RIGHT
        assert action_value.greedy(TOP_RIGHT) == GridworldAction.DOWN

    def test_table_covers_all_states(self, solver, gridworld, td_config, generator):
        """Test one entry per state."""
        action_value = solver(gridworld, td_config, generator)
        assert isinstance(action_value, ActionValue)
        assert len(action_value) == len(gridworld.get_states())

    def test_terminal_values_stay_zero(self, solver, gridworld, td_config, generator):
        """Test the end cell is never credited."""
        action_value = solver(gridworld, td_config, generator)
        for action in gridworld.get_actions():
            assert action_value.get(BOTTOM_RIGHT, action) == 0.0

    def test_final_step_value_near_reward(self, solver, gridworld, td_config, generator):
        """Test Q((0,1), DOWN) approaches the end reward."""
        action_value = solver(gridworld, td_config, generator)
        assert action_value.get(TOP_RIGHT, GridworldAction.DOWN) == pytest.approx(100.0, abs=1.0)

    def test_same_seed_same_table(self, solver, gridworld, td_config):
        """Test runs are reproducible."""
        config = td_config.replace(seed=5, num_episodes=50)
        first = solver(gridworld, config)
        second = solver(gridworld, config)
        for state in gridworld.get_states():
            for action in gridworld.get_actions():
                assert first.get(state, action) == second.get(state, action)

    def test_log_frequency(self, solver, gridworld, td_config, generator, capsys):
        """Test progress lines are printed."""
        config = td_config.replace(num_episodes=20)
        solver(gridworld, config, generator, log_frequency=10)
        out = capsys.readouterr().out
        assert "Episode 10/20" in out
        assert "Episode 20/20" in out

    def test_silent_by_default(self, solver, gridworld, td_config, generator, capsys):
        """Test nothing is printed without log_frequency."""
        solver(gridworld, td_config.replace(num_episodes=10), generator)
        assert capsys.readouterr().out == ""


class TestTemporalDifference:
    """Tests for the shared TD loop."""

    def test_wrappers_match_flag(self, gridworld, td_config):
        """Test sarsa and q_learning select the update rule."""
        config = td_config.replace(num_episodes=30)
        expected = temporal_difference(
            gridworld, config, True, torch.Generator().manual_seed(3)
        )
        actual = q_learning(gridworld, config, torch.Generator().manual_seed(3))
        for state in gridworld.get_states():
            for action in gridworld.get_actions():
                assert actual.get(state, action) == expected.get(state, action)

    def test_step_cap_limits_episode(self, td_config, capsys):
        """Test an episode stops after max_num_steps without a reachable end."""
        mdp = Gridworld.from_layout(["..", "#."])
        config = td_config.replace(num_episodes=1, max_num_steps=7, exploration_rate=0.0)
        temporal_difference(mdp, config, True, torch.Generator().manual_seed(0), log_frequency=1)
        assert "Steps: 7" in capsys.readouterr().out

    def test_q_learning_estimate_exceeds_sarsa_under_exploration(self, td_config):
        """Test the off-policy target never uses an exploratory action.

        With full exploration SARSA averages over all next actions while
        Q-learning keeps the best one, so its estimate is higher.
        """
        mdp = Gridworld.from_layout(["...", "..E"])
        config = td_config.replace(exploration_rate=1.0, num_episodes=300)
        s = sarsa(mdp, config, torch.Generator().manual_seed(0))
        q = q_learning(mdp, config, torch.Generator().manual_seed(0))
        start = GridworldState(0, 0)
        assert q.get(start, q.greedy(start)) > s.get(start, s.greedy(start))
