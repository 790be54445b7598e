"""Core data types for number-finder.

This module defines the domain objects passed between the engine and its
callers:
    - LookupQuery: A single target plus its approximate-match tolerance
    - LookupResult: A successful lookup (exact or approximate)
    - LookupMiss: A lookup that found nothing under the current policy
    - MissKind: Why a lookup missed

Design notes:
    - Every type is a frozen dataclass; an answer is a snapshot and is
      never mutated after construction
    - Misses are values, not exceptions, because "not there" is a routine
      answer for a read-only oracle
"""

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Union


class MissKind(Enum):
    """Reasons a lookup can come back empty.

    Values:
        NOT_FOUND: No exact match and the threshold was zero
        OUT_OF_THRESHOLD: No exact match and neither neighbour was close enough
    """

    NOT_FOUND = "not_found"
    OUT_OF_THRESHOLD = "out_of_threshold"


@dataclass(frozen=True)
class LookupQuery:
    """A request to locate ``target`` in the loaded sequence.

    Attributes:
        target: The integer being looked up
        threshold_percentage: Relative tolerance as a fraction of
            ``|target|`` (0.2 means 20%). Zero means exact match only.

    Example:
        >>> query = LookupQuery(target=8, threshold_percentage=0.2)
        >>> query.threshold
        1.6
    """

    target: int
    threshold_percentage: float = 0.0

    def __post_init__(self) -> None:
        """Reject tolerances that cannot describe a distance."""
        if math.isnan(self.threshold_percentage) or self.threshold_percentage < 0:
            raise ValueError(
                f"threshold_percentage must be a non-negative number, "
                f"got {self.threshold_percentage!r}"
            )

    @property
    def threshold(self) -> Union[float, Fraction]:
        """Absolute deviation bound, scaled from the target's magnitude.

        Targets too large for a float get an exact ``Fraction`` bound.
        """
        try:
            return abs(self.target) * self.threshold_percentage
        except OverflowError:
            return abs(self.target) * Fraction(self.threshold_percentage)


@dataclass(frozen=True)
class LookupResult:
    """A successful lookup.

    Attributes:
        index: Zero-based position of ``value`` in the sequence
        value: The value stored at ``index``
        is_approximate: False for an exact hit, True for a neighbour
            accepted within the threshold
    """

    index: int
    value: int
    is_approximate: bool


@dataclass(frozen=True)
class LookupMiss:
    """A lookup that produced no result.

    Attributes:
        kind: Why the lookup missed
        target: The value that was looked up
        threshold_percentage: The tolerance the lookup used
    """

    kind: MissKind
    target: int
    threshold_percentage: float

    @property
    def message(self) -> str:
        """Human-readable description of the miss."""
        if self.kind is MissKind.NOT_FOUND:
            return "number not found"
        return "number not found within acceptable threshold"


LookupOutcome = Union[LookupResult, LookupMiss]
