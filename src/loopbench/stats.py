"""Spread statistics over per-trial kernel timings."""

from __future__ import annotations

import statistics
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TimingStats:
    """Statistical summary of the trials for one (size, order) pair.

    Attributes:
        times: Raw per-trial timings (in microseconds)
        mean: Arithmetic mean
        median: Median value
        stddev: Sample standard deviation (0 for fewer than two trials)
        cv: Coefficient of variation (stddev/mean)
        min: Fastest trial
        max: Slowest trial
    """

    times: tuple[float, ...]
    mean: float
    median: float
    stddev: float
    cv: float
    min: float
    max: float


def compute_stats(times: Sequence[float]) -> TimingStats:
    """Compute summary statistics from per-trial timings.

    Args:
        times: Timing measurements (in microseconds).

    Returns:
        TimingStats with all computed metrics.
    """
    if not times:
        return TimingStats(
            times=(),
            mean=0.0,
            median=0.0,
            stddev=0.0,
            cv=0.0,
            min=0.0,
            max=0.0,
        )

    mean = statistics.fmean(times)
    stddev = statistics.stdev(times) if len(times) > 1 else 0.0

    return TimingStats(
        times=tuple(times),
        mean=mean,
        median=float(statistics.median(times)),
        stddev=stddev,
        cv=stddev / mean if mean > 0 else 0.0,
        min=float(min(times)),
        max=float(max(times)),
    )


def format_stats(stats: TimingStats) -> str:
    """Format timing statistics for display.

    Returns:
        Formatted string like "4852.2us +/- 21.0us (CV=0.43%, 5 runs)".
    """
    cv_pct = stats.cv * 100
    return (
        f"{stats.mean:.1f}us +/- {stats.stddev:.1f}us "
        f"(CV={cv_pct:.2f}%, {len(stats.times)} runs)"
    )
