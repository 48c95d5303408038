"""Tests for the distance engine."""

from __future__ import annotations

import random
import tracemalloc

import pytest

from chronicler.core.engine import ALGORITHM_COMPLEXITY, calculate, calculate_distance
from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.core.parser import parse_lists


class TestCalculateDistance:
    def test_sample(self) -> None:
        result = calculate_distance([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])
        assert result.total_distance == 11
        assert [p.distance for p in result.pairs] == [2, 1, 0, 1, 2, 5]
        assert [(p.value1, p.value2) for p in result.pairs] == [(1, 3), (2, 3), (3, 3), (3, 4), (3, 5), (4, 9)]
        assert [p.position for p in result.pairs] == [0, 1, 2, 3, 4, 5]

    def test_metadata(self) -> None:
        result = calculate_distance([1, 2], [3, 4])
        assert result.metadata.original_list1_length == 2
        assert result.metadata.original_list2_length == 2
        assert result.metadata.processing_time_ms >= 0

    def test_identical_lists_give_zero(self) -> None:
        assert calculate_distance([5, 1, 3], [3, 5, 1]).total_distance == 0

    def test_single_pair(self) -> None:
        result = calculate_distance([10], [-10])
        assert result.total_distance == 20
        assert result.pair_count == 1

    def test_large_values_do_not_overflow(self) -> None:
        big = 2**63
        result = calculate_distance([big, -big], [-big, big])
        assert result.total_distance == 0
        assert calculate_distance([big], [-big]).total_distance == 2 * big

    def test_inputs_not_mutated(self) -> None:
        list1 = [3, 1, 2]
        list2 = [9, 7, 8]
        calculate_distance(list1, list2)
        assert list1 == [3, 1, 2]
        assert list2 == [9, 7, 8]

    def test_symmetric_and_order_independent(self) -> None:
        rng = random.Random(42)
        list1 = [rng.randint(-1000, 1000) for _ in range(200)]
        list2 = [rng.randint(-1000, 1000) for _ in range(200)]
        total = calculate_distance(list1, list2).total_distance
        assert calculate_distance(list2, list1).total_distance == total
        shuffled = list1[:]
        rng.shuffle(shuffled)
        assert calculate_distance(shuffled, list2).total_distance == total

    def test_total_is_sum_of_pair_distances(self) -> None:
        result = calculate_distance([7, -3, 12, 0], [1, 1, 5, -8])
        assert result.total_distance == sum(p.distance for p in result.pairs)
        assert all(p.distance == abs(p.value1 - p.value2) for p in result.pairs)

    def test_wire_shape(self) -> None:
        wire = calculate_distance([1], [2]).to_wire()
        assert wire["totalDistance"] == 1
        assert wire["pairs"] == [{"position": 0, "list1Value": 1, "list2Value": 2, "distance": 1}]
        metadata = wire["metadata"]
        assert isinstance(metadata, dict)
        assert set(metadata) == {
            "originalList1Length",
            "originalList2Length",
            "processingTimeMs",
            "algorithmComplexity",
        }
        assert metadata["algorithmComplexity"] == ALGORITHM_COMPLEXITY

    def test_memory_measured_only_while_tracing(self) -> None:
        if not tracemalloc.is_tracing():
            assert calculate_distance([1], [2]).metadata.memory_used_mb is None
        tracemalloc.start()
        try:
            result = calculate_distance(list(range(1000)), list(range(1000, 0, -1)))
        finally:
            tracemalloc.stop()
        assert result.metadata.memory_used_mb is not None
        assert result.metadata.memory_used_mb >= 0
        assert "memoryUsedMB" in result.to_wire()["metadata"]


class TestValidation:
    def test_length_mismatch(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            calculate_distance([1, 2], [1])
        assert exc_info.value.kind is ErrorKind.LENGTH_MISMATCH
        assert exc_info.value.details == {"list1_length": 2, "list2_length": 1}

    def test_empty(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            calculate_distance([], [])
        assert exc_info.value.kind is ErrorKind.EMPTY_INPUT

    def test_mismatch_checked_before_empty(self) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            calculate_distance([], [1])
        assert exc_info.value.kind is ErrorKind.LENGTH_MISMATCH

    @pytest.mark.parametrize("bad", [1.5, float("nan"), float("inf"), "3", None, True])
    def test_non_integer_values_rejected(self, bad: object) -> None:
        with pytest.raises(ChroniclerError) as exc_info:
            calculate_distance([1, bad], [1, 2])  # type: ignore[list-item]
        err = exc_info.value
        assert err.kind is ErrorKind.INVALID_FORMAT
        assert err.details == {"list": "list1", "position": 1}

    def test_nan_named_in_message(self) -> None:
        with pytest.raises(ChroniclerError, match="NaN"):
            calculate_distance([1], [float("nan")])  # type: ignore[list-item]


def test_calculate_from_parsed(sample_content: str) -> None:
    assert calculate(parse_lists(sample_content)).total_distance == 11


def test_calculate_is_deterministic(sample_content: str) -> None:
    parsed = parse_lists(sample_content)
    first = calculate(parsed)
    second = calculate(parsed)
    assert first.pairs == second.pairs
    assert first.total_distance == second.total_distance == 11
    assert parsed.list1 == (3, 4, 2, 1, 3, 3)


@pytest.mark.parametrize(
    ("list1", "list2", "total"),
    [
        ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3], 11),
        ([1, 2, 3, 4, 5], [5, 4, 3, 2, 1], 0),
        ([42], [13], 29),
    ],
)
def test_known_totals(list1: list[int], list2: list[int], total: int) -> None:
    assert calculate_distance(list1, list2).total_distance == total
