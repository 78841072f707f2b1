"""loopbench: dense matrix multiplication under every ijk loop order.

Measures how the nesting order of the three index loops affects wall-clock
time, and checks with a bounded checksum that every order computes the
same product.
"""

from __future__ import annotations

from loopbench.config import ConfigError, ExperimentConfig, default_sweep
from loopbench.driver import run_experiment
from loopbench.kernel import get_kernel, multiply
from loopbench.orders import LOOP_ORDERS, AxisBinding, InvalidOrderError, resolve_order
from loopbench.report import render_table
from loopbench.results import ResultStore
from loopbench.trials import TrialResult, checksum, run_trials

__all__ = [
    "LOOP_ORDERS",
    "AxisBinding",
    "ConfigError",
    "ExperimentConfig",
    "InvalidOrderError",
    "ResultStore",
    "TrialResult",
    "checksum",
    "default_sweep",
    "get_kernel",
    "multiply",
    "render_table",
    "resolve_order",
    "run_experiment",
    "run_trials",
]
