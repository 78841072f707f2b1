"""Experiment orchestration.

For each configured size the driver draws one pair of input matrices and
evaluates every configured loop order against that same pair, so checksums
are comparable across orders. Sizes and orders run strictly one after the
other.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from loopbench.config import ConfigError, ExperimentConfig
from loopbench.kernel import get_kernel
from loopbench.matrix import MatrixGenerator, zeros
from loopbench.report import conditional_print, format_pair_result, render_report
from loopbench.results import ResultStore
from loopbench.trials import run_trials


def read_interactive_pair(
    input_fn: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> tuple[int, str]:
    """Prompt for a single (size, order) pair.

    Args:
        input_fn: Reads one answer given a prompt.
        out: Stream for the surrounding markers (default: stdout).

    Returns:
        Tuple of (size, order). The order is not validated here.

    Raises:
        ConfigError: If the size is not a non-negative integer.
    """
    out = out or sys.stdout
    print("-- BEGIN INPUT --", file=out)
    raw_size = input_fn("N     ==> ")
    order = input_fn("Order ==> ").strip()
    print("-- END INPUT --", file=out)

    try:
        size = int(raw_size.strip())
    except ValueError:
        raise ConfigError(f"Invalid matrix size: {raw_size.strip()!r}") from None
    if size < 0:
        raise ConfigError(f"Invalid matrix size: {size}")

    return size, order


def run_experiment(
    config: ExperimentConfig,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> ResultStore:
    """Run every configured (size, order) pair and report the results.

    In batch mode a progress line goes to ``err`` before each pair and the
    full report goes to ``out`` at the end. In single-pair mode each result is
    written to ``out`` as soon as it is known.

    Args:
        config: Experiment configuration.
        out: Result stream (default: stdout).
        err: Progress stream (default: stderr).

    Returns:
        ResultStore holding one entry per evaluated pair.

    Raises:
        ConfigError: If the configuration is invalid.
        InvalidOrderError: On the first unknown loop order; the run stops
            before any kernel call for that pair.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    config.validate()

    generator = MatrixGenerator(seed=config.seed, dtype=config.dtype)
    store = ResultStore()

    for n in config.sizes:
        a, b = generator.inputs(n)
        c = zeros(n, config.dtype)

        for order in config.orders:
            conditional_print(
                config.batch and not config.quiet,
                f"Trials for {n} with order {order}    ",
                file=err,
                end="\r",
                flush=True,
            )

            kernel = get_kernel(order)
            result = run_trials(kernel, a, b, c, n, config.trials)
            store.insert(n, order, result)

            conditional_print(
                not config.batch,
                format_pair_result(result, verbose=config.spread),
                file=out,
            )

    if config.batch:
        out.write(
            render_report(store, config.orders, config.sizes, spread=config.spread)
        )
        out.flush()

    return store
