"""Triple-loop matrix multiplication in a chosen loop order."""

from __future__ import annotations

import time
from collections.abc import Callable
from functools import partial

import numpy as np

from loopbench.orders import LOOP_ORDERS, resolve_order

# (a, b, c, n) -> elapsed microseconds
Kernel = Callable[[np.ndarray, np.ndarray, np.ndarray, int], int]


def multiply(a: np.ndarray, b: np.ndarray, c: np.ndarray, n: int, order: str) -> int:
    """Accumulate ``a @ b`` into ``c`` using the given loop order.

    The caller zeroes ``c`` beforehand. Arithmetic happens in the matrices'
    scalar type, so integer accumulation wraps on overflow.

    Args:
        a: Left operand, ``n x n``, read only.
        b: Right operand, ``n x n``, read only.
        c: Accumulator, ``n x n``, updated in place.
        n: Matrix size.
        order: Loop order label, e.g. ``"ikj"``.

    Returns:
        Wall-clock time of the loop nest in whole microseconds.

    Raises:
        InvalidOrderError: If ``order`` is not a permutation of ``ijk``.
    """
    binding = resolve_order(order)
    row, col, red = binding.positions

    with np.errstate(over="ignore"):
        start = time.perf_counter_ns()
        for outer in range(n):
            for middle in range(n):
                for inner in range(n):
                    counters = (outer, middle, inner)
                    i, j, k = counters[row], counters[col], counters[red]
                    c[i, j] += a[i, k] * b[k, j]
        stop = time.perf_counter_ns()

    return (stop - start) // 1000


KERNELS: dict[str, Kernel] = {
    order: partial(multiply, order=order) for order in LOOP_ORDERS
}


def get_kernel(order: str) -> Kernel:
    """Return the kernel bound to ``order``.

    Raises:
        InvalidOrderError: If ``order`` is not a permutation of ``ijk``.
    """
    resolve_order(order)
    return KERNELS[order]
