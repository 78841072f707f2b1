"""Square matrix allocation and seeded random generation."""

from __future__ import annotations

import numpy as np

# Inclusive range of the random input values
VALUE_LOW = 0
VALUE_HIGH = 4

DEFAULT_DTYPE = "int32"

SCALAR_TYPES: dict[str, type[np.generic]] = {
    "int32": np.int32,
    "int64": np.int64,
    "float32": np.float32,
    "float64": np.float64,
}


def resolve_dtype(name: str) -> np.dtype:
    """Map a scalar type name to a numpy dtype.

    Raises:
        ValueError: If the name is not a supported scalar type.
    """
    try:
        return np.dtype(SCALAR_TYPES[name])
    except KeyError:
        supported = ", ".join(SCALAR_TYPES)
        raise ValueError(
            f"Unsupported scalar type '{name}' (expected one of: {supported})"
        ) from None


def zeros(n: int, dtype: str = DEFAULT_DTYPE) -> np.ndarray:
    """Allocate a zeroed ``n x n`` accumulator."""
    return np.zeros((n, n), dtype=resolve_dtype(dtype))


def reset(c: np.ndarray) -> None:
    """Zero an accumulator in place."""
    c.fill(0)


class MatrixGenerator:
    """Deterministic source of random input matrices.

    One generator is drawn from sequentially for a whole run, so a given seed
    and size list always produce the same inputs.
    """

    def __init__(self, seed: int = 0, dtype: str = DEFAULT_DTYPE) -> None:
        self.dtype = resolve_dtype(dtype)
        self._rng = np.random.Generator(np.random.MT19937(seed))

    def random_matrix(self, n: int) -> np.ndarray:
        """Draw an ``n x n`` matrix of integers in ``[VALUE_LOW, VALUE_HIGH]``."""
        values = self._rng.integers(
            VALUE_LOW, VALUE_HIGH, size=(n, n), endpoint=True, dtype=np.int64
        )
        return np.ascontiguousarray(values, dtype=self.dtype)

    def inputs(self, n: int) -> tuple[np.ndarray, np.ndarray]:
        """Draw the A and B inputs for one size, A first."""
        a = self.random_matrix(n)
        b = self.random_matrix(n)
        return a, b
