"""
CLI to Run a Single Optuna Study.

Usage:
    python -m tuning.run_study --study sarsa_gridworld
    python -m tuning.run_study --study q_learning_corridor --trials 10
"""

import argparse
from pathlib import Path

import optuna
from optuna.samplers import TPESampler

from tuning.study_config import STUDY_CONFIGS, StudyConfig
from tuning.objective import create_objective


def describe_study(config: StudyConfig, n_trials: int, storage_path: str) -> str:
    """One line per setting of a study run."""
    return "\n".join([
        f"Study: {config.study_name} ({config.algorithm})",
        f"Layout: {','.join(config.layout)}",
        f"Trials: {n_trials} x {config.seeds_per_trial} seeds, "
        f"{config.num_episodes} episodes each",
        f"Storage: {storage_path}",
    ])


def format_best(study: optuna.Study) -> str:
    """Summarize the best trial of a finished study."""
    lines = [
        f"Finished trials: {len(study.trials)}",
        f"Best trial: {study.best_trial.number}",
        f"Best avg return: {study.best_value:.2f}",
        "Best hyperparameters:",
    ]
    lines.extend(f"  {key}: {value}" for key, value in study.best_params.items())
    return "\n".join(lines)


def write_summary(study: optuna.Study, results_dir: str) -> Path:
    """Write format_best() to <results_dir>/<study>_best.txt.

    Returns:
        Path of the written file
    """
    path = Path(results_dir) / f"{study.study_name}_best.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_best(study) + "\n")
    return path


def main():
    """Run a single Optuna study."""
    parser = argparse.ArgumentParser(description="Tune a TD solver on a gridworld")
    parser.add_argument(
        "--study",
        required=True,
        choices=list(STUDY_CONFIGS.keys()),
        help="Name of the study to run"
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=None,
        help="Number of trials (default: from config)"
    )
    parser.add_argument(
        "--storage",
        type=str,
        default=None,
        help="Optuna storage URL (default: from config)"
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default="data/optuna/results",
        help="Directory for the best-params summary"
    )
    args = parser.parse_args()

    config = STUDY_CONFIGS[args.study]
    n_trials = args.trials if args.trials is not None else config.n_trials
    storage_path = args.storage if args.storage is not None else config.storage_path

    if storage_path.startswith("sqlite:///"):
        Path(storage_path[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)

    print(describe_study(config, n_trials, storage_path))

    # Pruning compares running means across seeds, so skip the first seed
    study = optuna.create_study(
        study_name=config.study_name,
        storage=storage_path,
        direction="maximize",
        pruner=optuna.pruners.MedianPruner(n_startup_trials=5, n_warmup_steps=1),
        sampler=TPESampler(seed=42),
        load_if_exists=True
    )
    print(f"Resuming from {len(study.trials)} existing trials")

    study.optimize(create_objective(config), n_trials=n_trials)

    print()
    print(format_best(study))
    print(f"\nResults saved to: {write_summary(study, args.results_dir)}")


if __name__ == "__main__":
    main()
