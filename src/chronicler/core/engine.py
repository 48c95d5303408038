"""Manhattan-style distance between two independently sorted integer lists."""

from __future__ import annotations

import logging
import math
import time
import tracemalloc
from collections.abc import Sequence

from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.models import CalculationMetadata, CalculationResult, DistancePair, ParsedLists

logger = logging.getLogger(__name__)

ALGORITHM_COMPLEXITY = "O(n log n) time, O(n) space"


def _validate_inputs(list1: Sequence[int], list2: Sequence[int]) -> None:
    if len(list1) != len(list2):
        raise ChroniclerError(
            ErrorKind.LENGTH_MISMATCH,
            f"Input lists must have equal length (got {len(list1)} and {len(list2)})",
            {"list1_length": len(list1), "list2_length": len(list2)},
        )
    if not list1:
        raise ChroniclerError(ErrorKind.EMPTY_INPUT, "Input lists must not be empty")
    for name, values in (("list1", list1), ("list2", list2)):
        for index, value in enumerate(values):
            # bool is an int subclass; floats (including NaN/inf) are rejected outright
            if isinstance(value, bool) or not isinstance(value, int):
                shown = "NaN" if isinstance(value, float) and math.isnan(value) else repr(value)
                raise ChroniclerError(
                    ErrorKind.INVALID_FORMAT,
                    f"Invalid number in {name} at position {index}: {shown}",
                    {"list": name, "position": index},
                )


def _create_pairs(sorted1: Sequence[int], sorted2: Sequence[int]) -> list[DistancePair]:
    return [
        DistancePair(position=i, value1=a, value2=b, distance=abs(a - b))
        for i, (a, b) in enumerate(zip(sorted1, sorted2, strict=True))
    ]


def calculate_distance(list1: Sequence[int], list2: Sequence[int]) -> CalculationResult:
    """Sort both lists, pair them by index and sum the absolute differences.

    The input sequences are not modified. Only the sort/pair/sum steps are
    timed; validation happens before the clock starts.

    Raises ``ChroniclerError`` (``LENGTH_MISMATCH``, ``EMPTY_INPUT`` or
    ``INVALID_FORMAT``) for unusable input.
    """
    _validate_inputs(list1, list2)

    traced_before = tracemalloc.get_traced_memory()[0] if tracemalloc.is_tracing() else None
    start = time.perf_counter()
    sorted1 = sorted(list1)
    sorted2 = sorted(list2)
    pairs = _create_pairs(sorted1, sorted2)
    total = sum(pair.distance for pair in pairs)
    elapsed_ms = round((time.perf_counter() - start) * 1000, 3)
    memory_mb = None
    if traced_before is not None and tracemalloc.is_tracing():
        memory_mb = round(max(tracemalloc.get_traced_memory()[0] - traced_before, 0) / (1024 * 1024), 3)

    logger.debug("Calculated total distance %d over %d pairs in %.3f ms", total, len(pairs), elapsed_ms)
    return CalculationResult(
        total_distance=total,
        pairs=pairs,
        metadata=CalculationMetadata(
            original_list1_length=len(list1),
            original_list2_length=len(list2),
            processing_time_ms=elapsed_ms,
            memory_used_mb=memory_mb,
            algorithm_complexity=ALGORITHM_COMPLEXITY,
        ),
    )


def calculate(parsed: ParsedLists) -> CalculationResult:
    return calculate_distance(parsed.list1, parsed.list2)
