"""Unit tests for loopbench.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from loopbench.config import (
    DEFAULT_SEED,
    DEFAULT_TRIALS,
    ConfigError,
    ExperimentConfig,
    default_sweep,
    load_sweep_config,
)
from loopbench.orders import LOOP_ORDERS


class TestExperimentConfig:
    """Tests for ExperimentConfig validation."""

    def test_defaults(self) -> None:
        config = ExperimentConfig()
        assert config.trials == DEFAULT_TRIALS == 5
        assert config.seed == DEFAULT_SEED == 0
        assert config.dtype == "int32"
        assert config.batch is False

    def test_valid(self) -> None:
        ExperimentConfig(sizes=[0, 1, 64], orders=["ijk"]).validate()

    def test_orders_checked_at_dispatch(self) -> None:
        """Unknown labels are not a configuration-time error."""
        ExperimentConfig(sizes=[2], orders=["xyz"]).validate()

    @pytest.mark.parametrize("trials", [0, -1])
    def test_trials_must_be_positive(self, trials: int) -> None:
        with pytest.raises(ConfigError, match="at least 1"):
            ExperimentConfig(trials=trials).validate()

    @pytest.mark.parametrize("size", [-1, 2.5, "10", True])
    def test_bad_sizes(self, size: object) -> None:
        with pytest.raises(ConfigError, match="Invalid matrix size"):
            ExperimentConfig(sizes=[4, size]).validate()  # type: ignore[list-item]

    def test_bad_seed(self) -> None:
        with pytest.raises(ConfigError, match="seed"):
            ExperimentConfig(seed=-3).validate()

    def test_bad_dtype(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported scalar type"):
            ExperimentConfig(dtype="int8").validate()

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)


class TestDefaultSweep:
    """Tests for default_sweep function."""

    def test_sweep(self) -> None:
        config = default_sweep()
        assert config.sizes == [100, 200, 300, 400, 500]
        assert config.orders == list(LOOP_ORDERS)
        assert config.batch is True
        assert config.trials == 5


class TestLoadSweepConfig:
    """Tests for load_sweep_config function."""

    def test_full_file(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text(
            "sizes: [8, 16]\n"
            "orders: [kji, ijk]\n"
            "trials: 2\n"
            "seed: 42\n"
            "dtype: int64\n"
            "spread: true\n"
        )

        config = load_sweep_config(path)

        assert config.sizes == [8, 16]
        assert config.orders == ["kji", "ijk"]
        assert config.trials == 2
        assert config.seed == 42
        assert config.dtype == "int64"
        assert config.spread is True
        assert config.batch is True

    def test_missing_keys_use_default_sweep(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text("trials: 1\n")

        config = load_sweep_config(path)

        assert config.sizes == [100, 200, 300, 400, 500]
        assert config.orders == list(LOOP_ORDERS)
        assert config.trials == 1

    def test_orders_as_string(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text("sizes: 4\norders: ikj jik\n")

        config = load_sweep_config(path)

        assert config.sizes == [4]
        assert config.orders == ["ikj", "jik"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text("")
        assert load_sweep_config(path).sizes == [100, 200, 300, 400, 500]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_sweep_config(tmp_path / "nope.yaml")

    def test_unknown_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text("sizes: [4]\nthreads: 8\n")

        with pytest.raises(ConfigError, match="threads"):
            load_sweep_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_sweep_config(path)

    def test_malformed(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text("sizes: [1, 2\n")

        with pytest.raises(ConfigError, match="Cannot parse"):
            load_sweep_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "sweep.yaml"
        path.write_text("trials: 0\n")

        with pytest.raises(ConfigError):
            load_sweep_config(path)

    @pytest.mark.parametrize("value", ["orders:\n", "orders: 5\n", "orders: {a: 1}\n"])
    def test_orders_must_be_list_or_string(self, tmp_path: Path, value: str) -> None:
        """An empty or scalar orders entry is a configuration error."""
        path = tmp_path / "sweep.yaml"
        path.write_text("sizes: [4]\n" + value)

        with pytest.raises(ConfigError, match="'orders' must be a list or string"):
            load_sweep_config(path)

    def test_directory_is_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_sweep_config(tmp_path)
