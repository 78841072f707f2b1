"""Experiment configuration: defaults, YAML sweep files and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from loopbench.matrix import DEFAULT_DTYPE, SCALAR_TYPES
from loopbench.orders import LOOP_ORDERS, parse_orders

DEFAULT_TRIALS = 5
DEFAULT_SEED = 0
DEFAULT_SIZES = (100, 200, 300, 400, 500)

SWEEP_KEYS = frozenset({"sizes", "orders", "trials", "seed", "dtype", "spread"})


class ConfigError(ValueError):
    """Raised for an unusable experiment configuration."""


@dataclass
class ExperimentConfig:
    """Everything the driver needs to run one experiment.

    Attributes:
        sizes: Matrix sizes to evaluate, in order.
        orders: Loop order labels to evaluate at every size, in order.
        trials: Timed repetitions per (size, order) pair.
        seed: Seed for input matrix generation.
        dtype: Scalar type name for all matrices.
        batch: Sweep mode (progress to stderr, tables at the end) rather than
            single-pair mode (result printed right away).
        spread: Add a coefficient-of-variation table to the report.
        quiet: Suppress progress lines.
    """

    sizes: list[int] = field(default_factory=list)
    orders: list[str] = field(default_factory=list)
    trials: int = DEFAULT_TRIALS
    seed: int = DEFAULT_SEED
    dtype: str = DEFAULT_DTYPE
    batch: bool = False
    spread: bool = False
    quiet: bool = False

    def validate(self) -> None:
        """Check sizes, trial count, seed and scalar type.

        Loop order labels are checked later, when each pair is dispatched.

        Raises:
            ConfigError: On the first invalid value found.
        """
        for size in self.sizes:
            if isinstance(size, bool) or not isinstance(size, int) or size < 0:
                raise ConfigError(f"Invalid matrix size: {size!r}")
        if isinstance(self.trials, bool) or not isinstance(self.trials, int):
            raise ConfigError(f"Invalid trial count: {self.trials!r}")
        if self.trials < 1:
            raise ConfigError(f"Trial count must be at least 1, got {self.trials}")
        if not isinstance(self.seed, int) or self.seed < 0:
            raise ConfigError(f"Invalid seed: {self.seed!r}")
        if self.dtype not in SCALAR_TYPES:
            supported = ", ".join(SCALAR_TYPES)
            raise ConfigError(
                f"Unsupported scalar type '{self.dtype}' (expected one of: {supported})"
            )


def default_sweep() -> ExperimentConfig:
    """Sizes 100 to 500 in steps of 100 under all six loop orders."""
    return ExperimentConfig(
        sizes=list(DEFAULT_SIZES),
        orders=list(LOOP_ORDERS),
        batch=True,
    )


def load_sweep_config(config_path: Path | str) -> ExperimentConfig:
    """Load a sweep configuration from YAML.

    Example file::

        sizes: [64, 128, 256]
        orders: [ijk, ikj, kji]
        trials: 3
        seed: 42
        dtype: int64

    Missing keys fall back to the default sweep.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Batch-mode ExperimentConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, malformed or has unknown keys.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Sweep configuration not found: {path}")

    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    unknown = set(data) - SWEEP_KEYS
    if unknown:
        raise ConfigError(f"{path}: unknown keys: {', '.join(sorted(unknown))}")

    config = default_sweep()
    if "sizes" in data:
        sizes = data["sizes"]
        config.sizes = list(sizes) if isinstance(sizes, list) else [sizes]
    if "orders" in data:
        orders = data["orders"]
        if not isinstance(orders, (str, list)):
            raise ConfigError(f"{path}: 'orders' must be a list or string")
        config.orders = parse_orders(orders)
    config.trials = data.get("trials", config.trials)
    config.seed = data.get("seed", config.seed)
    config.dtype = str(data.get("dtype", config.dtype))
    config.spread = bool(data.get("spread", config.spread))

    config.validate()
    return config
