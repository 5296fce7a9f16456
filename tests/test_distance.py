from __future__ import annotations

import pytest

from trigramid._utils import MAX_TOTAL_DISTANCE, MAX_TRIGRAM_DISTANCE
from trigramid.pipeline.distance import calculate_distance, distance_to_score

_RANKING = {"abc": 0, "bca": 1, "cab": 2}


def test_identical_order_has_zero_distance():
    assert calculate_distance(("abc", "bca", "cab"), _RANKING) == 0


def test_rank_differences_are_summed():
    # "cab": |2 - 0|, "abc": |0 - 1|
    assert calculate_distance(("cab", "abc"), _RANKING) == 3


def test_missing_trigram_costs_max_trigram_distance():
    assert calculate_distance(("zzz",), _RANKING) == MAX_TRIGRAM_DISTANCE
    assert calculate_distance(("abc", "zzz"), _RANKING) == MAX_TRIGRAM_DISTANCE


def test_empty_profile():
    assert calculate_distance((), _RANKING) == 0


def test_total_is_clamped():
    profile = tuple(f"{i:03d}" for i in range(MAX_TOTAL_DISTANCE // MAX_TRIGRAM_DISTANCE + 1))
    assert calculate_distance(profile, {}) == MAX_TOTAL_DISTANCE


def test_distance_is_bounded():
    profile = tuple(f"{i:03d}" for i in range(50))
    ranking = {f"{i:03d}": 49 - i for i in range(0, 50, 2)}
    distance = calculate_distance(profile, ranking)
    assert 0 <= distance <= MAX_TOTAL_DISTANCE


def test_score_of_zero_distance_is_maximal():
    assert distance_to_score(0) == MAX_TOTAL_DISTANCE / MAX_TRIGRAM_DISTANCE


def test_score_at_ceiling_is_zero():
    assert distance_to_score(MAX_TOTAL_DISTANCE) == 0.0


@pytest.mark.parametrize("distance", [0, 1, 150, 4_500, 89_999])
def test_score_strictly_decreasing(distance: int):
    assert distance_to_score(distance) > distance_to_score(distance + 1)


def test_score_value():
    assert distance_to_score(150) == 299.5
