"""In-memory store of trial results keyed by (size, order)."""

from __future__ import annotations

from collections.abc import Iterator

from loopbench.trials import TrialResult

ResultKey = tuple[int, str]


class ResultStore:
    """Mapping from (size, order) to the TrialResult computed for it."""

    def __init__(self) -> None:
        self._results: dict[ResultKey, TrialResult] = {}

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[ResultKey]:
        return iter(self._results)

    def __contains__(self, key: object) -> bool:
        return key in self._results

    def insert(self, size: int, order: str, result: TrialResult) -> None:
        """Record a result. Re-inserting a pair replaces the earlier result."""
        self._results[(size, order)] = result

    def lookup(self, size: int, order: str) -> TrialResult:
        """Return the result for a pair.

        Raises:
            KeyError: If the pair was never computed.
        """
        try:
            return self._results[(size, order)]
        except KeyError:
            raise KeyError(
                f"No result for size {size} with order '{order}'"
            ) from None

    def time(self, size: int, order: str) -> float:
        return self.lookup(size, order).avg_us

    def checksum(self, size: int, order: str) -> int | float:
        return self.lookup(size, order).checksum

    def cv_percent(self, size: int, order: str) -> float:
        return self.lookup(size, order).stats.cv * 100

    def checksums_agree(self, size: int) -> bool:
        """Check that every order recorded at ``size`` gave the same checksum."""
        sums = {
            result.checksum
            for (n, _), result in self._results.items()
            if n == size
        }
        return len(sums) <= 1
