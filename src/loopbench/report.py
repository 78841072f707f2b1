"""Plain-text rendering of benchmark results."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from loopbench.results import ResultStore
from loopbench.stats import format_stats
from loopbench.trials import TrialResult

HEADING_WIDTH = 7
DATA_WIDTH = 15
FP_PRECISION = 1

# Trailing blanks overwrite the last carriage-returned progress line
DONE_BANNER = "Done!" + " " * 32

ValueAccessor = Callable[[int, str], float | int]


def conditional_print(
    flag: bool, *args: object, file: TextIO | None = None, **kwargs
) -> None:
    """Print only when ``flag`` is true."""
    if flag:
        print(*args, file=file if file is not None else sys.stdout, **kwargs)


def format_cell(value: object) -> str:
    """Fixed one-digit precision for floats, integers printed as is."""
    if isinstance(value, float):
        return f"{value:.{FP_PRECISION}f}"
    return str(value)


def render_table(
    title: str,
    orders: Sequence[str],
    sizes: Sequence[int],
    accessor: ValueAccessor,
) -> str:
    """Render one table with a row per size and a column per order.

    Sizes and orders are laid out in the sequence given, not sorted.

    Args:
        title: Table title.
        orders: Column labels.
        sizes: Row labels.
        accessor: Called as ``accessor(size, order)`` for each cell.

    Returns:
        Formatted table string.
    """
    lines = ["", "", title, ""]

    header = f"{'N':>{HEADING_WIDTH}} "
    for order in orders:
        header += f"{order:>{DATA_WIDTH}} "
    lines.append(header)

    rule = f"{'=====':>{HEADING_WIDTH}} "
    rule += f"{'==========':>{DATA_WIDTH}} " * len(orders)
    lines.append(rule)

    for size in sizes:
        row = f"{size:>{HEADING_WIDTH}} "
        for order in orders:
            row += f"{format_cell(accessor(size, order)):>{DATA_WIDTH}} "
        lines.append(row)

    return "\n".join(lines) + "\n"


def render_report(
    store: ResultStore,
    orders: Sequence[str],
    sizes: Sequence[int],
    spread: bool = False,
) -> str:
    """Render the end-of-run summary: times, checksums and optionally CV.

    Sizes whose orders disagree on the checksum are flagged after the sums.
    """
    parts = [
        DONE_BANNER + "\n",
        render_table("TIMES (MICROSECONDS):", orders, sizes, store.time),
        render_table("SUMS:", orders, sizes, store.checksum),
    ]
    for n in dict.fromkeys(sizes):
        if store.checksums_agree(n):
            continue
        parts.append(f"\nWARNING: checksums differ across orders at N={n}\n")
    if spread:
        parts.append(render_table("SPREAD (CV %):", orders, sizes, store.cv_percent))
    return "".join(parts)


def format_pair_result(result: TrialResult, verbose: bool = False) -> str:
    """Format the result block printed after a single interactive pair."""
    lines = [
        "-- BEGIN OUTPUT --",
        f"Time (us) = {format_cell(result.avg_us)}",
        f"Sum       = {format_cell(result.checksum)}",
    ]
    if verbose:
        lines.append(f"Spread    = {format_stats(result.stats)}")
    lines.append("-- END OUTPUT --")
    return "\n".join(lines)
