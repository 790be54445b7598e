"""
Lookup endpoint: exact or approximate position of a number.

Provides a single route:
    - ``GET /api/number/{number}?thresholdPercentage=<float>``

Input parsing lives here; the engine only ever sees a valid integer and a
finite, non-negative threshold.
"""

import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from number_finder.api.dependencies import get_finder
from number_finder.api.schemas import ErrorResponse, LookupResponse
from number_finder.config import DEFAULT_THRESHOLD_PERCENTAGE
from number_finder.core import LookupMiss, MissKind, get_logger
from number_finder.search import NumberLookup, parse_integer

logger = get_logger(__name__)

router = APIRouter()

_MISS_HINTS = {
    MissKind.NOT_FOUND: "Pass thresholdPercentage > 0 to accept a nearby value.",
    MissKind.OUT_OF_THRESHOLD: "Increase thresholdPercentage to widen the match.",
}


def _bad_request(message: str, details: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "error": "validation_error",
            "message": message,
            "details": details,
            "hint": None,
        },
    )


def parse_target(raw: str) -> int:
    """
    Parse the path segment as a base-10 integer.

    Raises:
        HTTPException: 400 if the segment is not an integer.
    """
    try:
        return parse_integer(raw)
    except ValueError:
        raise _bad_request(
            "Invalid number parameter", f"Expected an integer, got {raw!r}"
        ) from None


def parse_threshold(raw: Optional[str]) -> float:
    """
    Parse ``thresholdPercentage``; absent or blank means zero.

    Raises:
        HTTPException: 400 unless the value is a finite number >= 0.
    """
    if raw is None or not raw.strip():
        return DEFAULT_THRESHOLD_PERCENTAGE

    try:
        value = float(raw)
    except ValueError:
        value = math.nan

    if not math.isfinite(value) or value < 0:
        raise _bad_request(
            "Invalid thresholdPercentage parameter",
            f"Expected a non-negative number, got {raw!r}",
        )
    return value


@router.get(
    "/{number}",
    response_model=LookupResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Find a number exactly or approximately",
)
async def find_number(
    number: str,
    threshold: Optional[str] = Query(
        None,
        alias="thresholdPercentage",
        description="Relative tolerance as a fraction of |number| (0.1 = 10%)",
    ),
    finder: NumberLookup = Depends(get_finder),
) -> LookupResponse:
    """
    Return the index of ``number`` in the dataset.

    With no threshold only an exact match counts. With a positive
    threshold the values either side of where ``number`` would sit are
    accepted if they lie within ``|number| * thresholdPercentage``.
    """
    target = parse_target(number)
    threshold_percentage = parse_threshold(threshold)

    logger.debug(
        "Find request: target=%d, thresholdPercentage=%s",
        target,
        threshold_percentage,
    )

    outcome = finder.find(target, threshold_percentage)

    if isinstance(outcome, LookupMiss):
        logger.debug(
            "Find miss: target=%d, thresholdPercentage=%s, kind=%s",
            target,
            threshold_percentage,
            outcome.kind.value,
        )
        raise HTTPException(
            status_code=404,
            detail={
                "error": outcome.kind.value,
                "message": outcome.message,
                "details": (
                    f"target={target}, thresholdPercentage={threshold_percentage}"
                ),
                "hint": _MISS_HINTS[outcome.kind],
            },
        )

    logger.debug(
        "Find hit: target=%d, index=%d, value=%d, approximate=%s",
        target,
        outcome.index,
        outcome.value,
        outcome.is_approximate,
    )
    return LookupResponse.from_result(outcome)
