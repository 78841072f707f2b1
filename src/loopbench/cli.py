"""Command-line interface for the loop order benchmark.

Provides the `loopbench` command. Modes:
- Default sweep (--all): sizes 100-500, all six loop orders
- Custom sweep (--sizes with --traversals, or --config file)
- Single pair read interactively from standard input
"""

from __future__ import annotations

import argparse
import sys

from loopbench.config import (
    DEFAULT_SEED,
    DEFAULT_TRIALS,
    ConfigError,
    ExperimentConfig,
    default_sweep,
    load_sweep_config,
)
from loopbench.driver import read_interactive_pair, run_experiment
from loopbench.matrix import SCALAR_TYPES
from loopbench.orders import InvalidOrderError, parse_orders


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="loopbench",
        description="Benchmark square matrix multiplication under every ijk loop order",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Evaluate default dataset (100-500 with all ijk permutations)",
    )
    parser.add_argument(
        "-i",
        "--iterations",
        type=int,
        default=None,
        help=f"Number of iterations per invocation (default: {DEFAULT_TRIALS})",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help=f"RNG seed for matrix generation (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "-N",
        "--sizes",
        type=int,
        nargs="+",
        help="Sizes to evaluate (space separated)",
    )
    parser.add_argument(
        "-t",
        "--traversals",
        nargs="+",
        help="Traversals to evaluate (space separated)",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Path to a YAML sweep configuration",
    )
    parser.add_argument(
        "--dtype",
        choices=list(SCALAR_TYPES),
        default=None,
        help="Scalar type of all matrices (default: int32)",
    )
    parser.add_argument(
        "--spread",
        action="store_true",
        help="Also report the coefficient of variation across trials",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser


def build_config(args: argparse.Namespace) -> ExperimentConfig:
    """Combine defaults, an optional sweep file and command-line flags.

    Explicit flags win over the sweep file, which wins over the defaults.
    Reads one pair from standard input when no sweep was requested.
    """
    if args.config:
        config = load_sweep_config(args.config)
    elif args.all:
        config = default_sweep()
    elif args.sizes and args.traversals:
        config = ExperimentConfig(
            sizes=list(args.sizes),
            orders=parse_orders(args.traversals),
            batch=True,
        )
    else:
        size, order = read_interactive_pair()
        config = ExperimentConfig(sizes=[size], orders=[order])

    # Flags override whatever the chosen mode supplied
    if args.config or args.all:
        if args.sizes:
            config.sizes = list(args.sizes)
        if args.traversals:
            config.orders = parse_orders(args.traversals)
    if args.iterations is not None:
        config.trials = args.iterations
    if args.seed is not None:
        config.seed = args.seed
    if args.dtype is not None:
        config.dtype = args.dtype
    config.spread = config.spread or args.spread
    config.quiet = args.quiet

    config.validate()
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
        run_experiment(config)
    except InvalidOrderError as e:
        print(f"\n{e}", file=sys.stderr)
        return 1
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
