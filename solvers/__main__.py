"""
Solver CLI.

Solves a gridworld given as text rows.

Usage:
    python -m solvers solve --algorithm policy_iteration --layout "..,#E"
    python -m solvers solve --algorithm value_iteration --layout "..,#E" --sweeps 3
    python -m solvers solve --algorithm q_learning --layout "...,.#.,..E" --seed 0
    python -m solvers init-config solver.yaml
"""

import argparse
import sys
from pathlib import Path

from environments.gridworld import Gridworld
from models.config import SolverConfig, load_config, save_config
from models.errors import PreconditionError
from solvers.dynamic_programming import policy_iteration, value_iteration
from solvers.evaluation import evaluate_policy
from solvers.temporal_difference import q_learning, sarsa


DP_ALGORITHMS = {
    "policy_iteration": policy_iteration,
    "value_iteration": value_iteration,
}

TD_ALGORITHMS = {
    "sarsa": sarsa,
    "q_learning": q_learning,
}


def cmd_solve(args):
    """Solve a gridworld and print the resulting policy.

    Args:
        args: Parsed command line arguments
    """
    if args.config:
        if not Path(args.config).exists():
            print(f"Error: Config file not found: {args.config}")
            sys.exit(1)
        try:
            config = load_config(args.config)
        except ValueError as e:
            print(f"Error loading config: {e}")
            sys.exit(1)
    else:
        config = SolverConfig()

    if args.seed is not None:
        config = config.replace(seed=args.seed)
    if args.sweeps is not None:
        try:
            config = config.replace(iterations_before_improvement=args.sweeps)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)

    try:
        mdp = Gridworld.from_layout(args.layout.split(","))
    except ValueError as e:
        print(f"Error parsing layout: {e}")
        sys.exit(1)

    print(f"Algorithm: {args.algorithm}")
    print(f"Grid: {mdp.get_grid_size()[0]}x{mdp.get_grid_size()[1]} "
          f"({len(mdp.get_states())} states)")

    try:
        if args.algorithm in DP_ALGORITHMS:
            result = DP_ALGORITHMS[args.algorithm](mdp, config, verbose=args.verbose)
            policy = result.policy
            print(f"Converged after {result.improvement_rounds} improvement rounds")
            print("\nState values:")
            print(mdp.render_state_value(result.state_value))
        else:
            log_frequency = max(1, config.num_episodes // 10) if args.verbose else None
            action_value = TD_ALGORITHMS[args.algorithm](
                mdp, config, log_frequency=log_frequency
            )
            policy = action_value.greedy_policy(mdp.get_states(), mdp.get_actions())
    except PreconditionError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("\nPolicy:")
    print(mdp.render_policy(policy))

    eval_result = evaluate_policy(mdp, policy, config)
    print(f"\nAvg return: {eval_result.avg_return:.2f}")
    print(f"Max return: {eval_result.max_return:.2f}")


def cmd_init_config(args):
    """Write the default configuration to a YAML file.

    Args:
        args: Parsed command line arguments
    """
    save_config(SolverConfig(), args.output)
    print(f"Saved default config to: {args.output}")


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="solvers",
        description="Tabular MDP Solvers",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # solve command
    solve_parser = subparsers.add_parser(
        "solve",
        help="Solve a gridworld layout",
    )
    solve_parser.add_argument(
        "--algorithm", "-a",
        required=True,
        choices=sorted(list(DP_ALGORITHMS) + list(TD_ALGORITHMS)),
        help="Solver to run",
    )
    solve_parser.add_argument(
        "--layout", "-l",
        required=True,
        help="Comma-separated rows using '.' air, '#' wall, 'E' end",
    )
    solve_parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file",
    )
    solve_parser.add_argument(
        "--seed",
        type=int,
        help="Random seed override",
    )
    solve_parser.add_argument(
        "--sweeps",
        type=int,
        help="Override iterations_before_improvement",
    )
    solve_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print solver progress",
    )
    solve_parser.set_defaults(func=cmd_solve)

    # init-config command
    init_parser = subparsers.add_parser(
        "init-config",
        help="Write the default configuration file",
    )
    init_parser.add_argument(
        "output",
        help="Path to output YAML file",
    )
    init_parser.set_defaults(func=cmd_init_config)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
