"""Loop order labels and their axis bindings.

A loop order is a permutation of the letters ``i``, ``j`` and ``k``. Each
letter names a logical role:

- ``i``: row index into A and C
- ``j``: column index into B and C
- ``k``: reduction index (column of A, row of B)

The letter at position ``p`` of the label is the role played by the loop
counter at nesting depth ``p`` (0 = outermost). ``"kij"`` therefore runs the
reduction in the outer loop, rows in the middle loop and columns innermost.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import permutations

ROW = "i"
COLUMN = "j"
REDUCTION = "k"

# Lexicographic, which is also the order used by the default sweep
LOOP_ORDERS: tuple[str, ...] = tuple(
    "".join(p) for p in permutations((ROW, COLUMN, REDUCTION))
)


class InvalidOrderError(ValueError):
    """Raised when a label is not a permutation of ``ijk``."""

    def __init__(self, order: object) -> None:
        self.order = order
        super().__init__(f"invalid traversal provided: {order}")


@dataclass(frozen=True)
class AxisBinding:
    """Resolved mapping between loop positions and logical roles.

    Attributes:
        order: The loop order label.
        roles: Role letter for each loop position, outer to inner.
        positions: Loop position of the (row, column, reduction) roles.
    """

    order: str
    roles: tuple[str, str, str]
    positions: tuple[int, int, int]

    @property
    def row(self) -> int:
        return self.positions[0]

    @property
    def column(self) -> int:
        return self.positions[1]

    @property
    def reduction(self) -> int:
        return self.positions[2]


def _bind(order: str) -> AxisBinding:
    roles = (order[0], order[1], order[2])
    positions = (roles.index(ROW), roles.index(COLUMN), roles.index(REDUCTION))
    return AxisBinding(order=order, roles=roles, positions=positions)


_BINDINGS: dict[str, AxisBinding] = {order: _bind(order) for order in LOOP_ORDERS}


def is_valid_order(order: object) -> bool:
    """Return True if ``order`` is one of the six loop order labels."""
    return isinstance(order, str) and order in _BINDINGS


def resolve_order(order: object) -> AxisBinding:
    """Resolve a loop order label to its axis binding.

    Args:
        order: Candidate label, e.g. ``"ikj"``.

    Returns:
        The binding for that label.

    Raises:
        InvalidOrderError: If the label is not a permutation of ``ijk``.
    """
    if not is_valid_order(order):
        raise InvalidOrderError(order)
    return _BINDINGS[order]  # type: ignore[index]


def parse_orders(value: str | Iterable[str]) -> list[str]:
    """Split a comma or space separated list of labels.

    Labels are kept in the given order and are not validated: unknown labels
    are reported when they are dispatched.
    """
    if isinstance(value, str):
        return value.replace(",", " ").split()
    return [str(v).strip() for v in value]
