"""
Lookup engine over a sorted, immutable integer sequence.

A lookup runs in two phases:

1. Exact phase: closed-interval binary search. A hit is returned at once.
2. Approximate phase: only when the threshold is positive. The two values
   either side of the insertion point are checked against
   ``|target| * threshold_percentage``, right neighbour first.

The engine holds no mutable state after construction, so one instance can
be shared by any number of concurrent callers without locking. It never
logs and never raises for a miss; misses come back as ``LookupMiss``.

Usage:
    from number_finder.search import build_engine

    engine = build_engine("data/input.txt")
    outcome = engine.find(8, 0.2)
"""

from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from number_finder.core import (
    LookupMiss,
    LookupOutcome,
    LookupQuery,
    LookupResult,
    MissKind,
)
from number_finder.search.loader import load_numbers


class NumberLookup(Protocol):
    """Anything that can answer a lookup.

    The HTTP and CLI layers depend on this rather than on ``SearchEngine``
    so tests can hand them a stub.
    """

    def find(self, target: int, threshold_percentage: float = 0.0) -> LookupOutcome:
        """Locate ``target`` exactly, or within the relative threshold."""
        ...


class SearchEngine:
    """
    Read-only oracle over a fixed, ascending sequence of integers.

    The input order is trusted, not checked. Indices are stable for the
    lifetime of the instance; to pick up a new dataset build a new engine.

    Example:
        >>> engine = SearchEngine([1, 3, 5, 7, 9, 11, 13, 15])
        >>> engine.find(7, 0.1)
        LookupResult(index=3, value=7, is_approximate=False)
        >>> engine.find(8, 0.2)
        LookupResult(index=4, value=9, is_approximate=True)
    """

    __slots__ = ("_numbers",)

    def __init__(self, numbers: Iterable[int]) -> None:
        self._numbers: tuple[int, ...] = tuple(numbers)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SearchEngine":
        """
        Build an engine from a whitespace-delimited integer file.

        Raises:
            LoadError: If the file cannot be opened, read or parsed. No
                engine is constructed in that case.
        """
        return cls(load_numbers(path))

    @property
    def numbers(self) -> tuple[int, ...]:
        """The loaded sequence."""
        return self._numbers

    def __len__(self) -> int:
        return len(self._numbers)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._numbers)})"

    def find(self, target: int, threshold_percentage: float = 0.0) -> LookupOutcome:
        """
        Locate ``target`` in the sequence.

        Args:
            target: Value to look up.
            threshold_percentage: Relative tolerance as a fraction of
                ``|target|``. Zero (the default) means exact match only.

        Returns:
            ``LookupResult`` for an exact or approximate hit, otherwise a
            ``LookupMiss`` tagged ``NOT_FOUND`` (zero threshold) or
            ``OUT_OF_THRESHOLD`` (no neighbour close enough).

        Raises:
            ValueError: If ``threshold_percentage`` is negative or NaN.
        """
        return self.lookup(LookupQuery(target, threshold_percentage))

    def lookup(self, query: LookupQuery) -> LookupOutcome:
        """Run both phases for a prepared query."""
        exact, left, right = self._find_exact(query.target)
        if exact is not None:
            return exact

        if query.threshold_percentage == 0:
            return LookupMiss(
                kind=MissKind.NOT_FOUND,
                target=query.target,
                threshold_percentage=query.threshold_percentage,
            )

        approximate = self._find_adjacent_within_threshold(query, left, right)
        if approximate is not None:
            return approximate

        return LookupMiss(
            kind=MissKind.OUT_OF_THRESHOLD,
            target=query.target,
            threshold_percentage=query.threshold_percentage,
        )

    def _find_exact(self, target: int) -> tuple[Optional[LookupResult], int, int]:
        """
        Binary search for ``target``.

        Returns the hit (or None) together with the final ``left`` and
        ``right`` bounds. On a miss ``left`` is the insertion point and
        ``right == left - 1``.
        """
        numbers = self._numbers
        left, right = 0, len(numbers) - 1

        while left <= right:
            # Floor division; on an even-length range this picks the lower middle.
            mid = (left + right) // 2
            value = numbers[mid]
            if value == target:
                return LookupResult(index=mid, value=target, is_approximate=False), left, right
            if value < target:
                left = mid + 1
            else:
                right = mid - 1

        return None, left, right

    def _find_adjacent_within_threshold(
        self,
        query: LookupQuery,
        left: int,
        right: int,
    ) -> Optional[LookupResult]:
        """Check the insertion-point neighbours, right first; strict ``<``."""
        numbers = self._numbers
        threshold = query.threshold

        # Order matters: when both qualify the right neighbour wins.
        for index in (left, right):
            if 0 <= index < len(numbers):
                candidate = numbers[index]
                if abs(candidate - query.target) < threshold:
                    return LookupResult(index=index, value=candidate, is_approximate=True)

        return None


def build_engine(source_path: Union[str, Path]) -> SearchEngine:
    """
    Load ``source_path`` and wrap it in a ``SearchEngine``.

    Called once at process startup.

    Raises:
        LoadError: If the dataset cannot be loaded.
    """
    return SearchEngine.from_file(source_path)
