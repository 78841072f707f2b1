"""Repeated, timed kernel invocations for one (size, order) pair."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from loopbench.kernel import Kernel
from loopbench.matrix import reset
from loopbench.stats import TimingStats, compute_stats

# Upper bound on the number of elements summed into a checksum
CHECKSUM_MAX = 10000


@dataclass(frozen=True)
class TrialResult:
    """Outcome of all trials for one (size, order) pair.

    Attributes:
        avg_us: Mean kernel time in microseconds.
        checksum: Sum of the leading accumulator elements after the last trial.
        times: Per-trial kernel times in microseconds.
    """

    avg_us: float
    checksum: int | float
    times: tuple[int, ...] = ()

    @property
    def stats(self) -> TimingStats:
        return compute_stats(self.times)


def checksum(c: np.ndarray, limit: int = CHECKSUM_MAX) -> int | float:
    """Sum the first ``min(limit, c.size)`` elements in row-major order.

    The sum is taken in the accumulator's own scalar type, so integer
    checksums wrap exactly like the kernel's accumulation does. Elements are
    added strictly left to right, so float checksums round like a sequential
    loop.
    """
    head = c.ravel(order="C")[: min(limit, c.size)]
    if head.size == 0:
        return c.dtype.type(0).item()
    with np.errstate(over="ignore"):
        return head.cumsum(dtype=c.dtype)[-1].item()


def run_trials(
    kernel: Kernel,
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    n: int,
    trial_count: int,
) -> TrialResult:
    """Run ``kernel`` ``trial_count`` times and summarize.

    The accumulator is zeroed before every trial. Timings are averaged over
    all trials; the checksum is taken from the last trial only.

    A ``trial_count`` below 1 is not supported (the average divides by it);
    configuration validation rejects such values before this is reached.

    Args:
        kernel: Kernel bound to a loop order.
        a: Left operand.
        b: Right operand.
        c: Accumulator, overwritten.
        n: Matrix size.
        trial_count: Number of timed repetitions.

    Returns:
        TrialResult with average time, checksum and raw timings.
    """
    times: list[int] = []
    for _ in range(trial_count):
        reset(c)
        times.append(kernel(a, b, c, n))

    return TrialResult(
        avg_us=sum(times) / trial_count,
        checksum=checksum(c),
        times=tuple(times),
    )
