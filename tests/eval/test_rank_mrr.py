# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from itertools import permutations

import numpy as np

import hypothesis.strategies as st
from hypothesis import given
from pytest import approx, mark, raises

from rankeval.data import RankedList
from rankeval.metrics.ranking import recip_rank
from rankeval.testing import scored_rows


def _ranking(rows):
    return RankedList((None, s, t) for (s, t) in rows).rank()


def _brute_rr(rows):
    """
    Expected reciprocal rank over all orderings consistent with the scores.
    """
    total = 0.0
    count = 0
    for perm in permutations(rows):
        scores = [s for (s, _t) in perm]
        if any(a < b for (a, b) in zip(scores, scores[1:])):
            continue
        count += 1
        for i, (_s, t) in enumerate(perm):
            if t > 0:
                total += 1.0 / (i + 1)
                break
    return total / count


def test_mrr_empty_zero():
    assert recip_rank(_ranking([])) == 0.0


def test_mrr_norel_zero():
    "no positive targets -> zero"
    assert recip_rank(_ranking([(3, 0), (2, 0), (1, 0)])) == 0.0


def test_mrr_first_one():
    "first positive -> one"
    assert recip_rank(_ranking([(3, 1), (2, 0), (1, 1)])) == approx(1.0)


def test_mrr_second_one_half():
    "second positive -> 0.5"
    assert recip_rank(_ranking([(3, 0), (2, 1), (1, 1)])) == approx(0.5)


def test_mrr_negative_target_not_positive():
    assert recip_rank(_ranking([(3, -1), (2, 0), (1, 2)])) == approx(1 / 3)


def test_mrr_unsorted_input():
    "scores sort descending: 5, 4, 3, 2, 1 puts the positive item at rank 4"
    rows = [(1.0, 0), (2.0, 1), (3.0, 0), (4.0, 0), (5.0, 0)]
    assert recip_rank(_ranking(rows)) == approx(0.25)


def test_mrr_deep():
    "deep -> 0.1"
    rows = [(float(20 - i), 1.0 if i == 9 else 0.0) for i in range(20)]
    assert recip_rank(_ranking(rows)) == approx(0.1)


def test_mrr_tie_block():
    "3 tied items at ranks 2-4, 2 of them positive"
    rows = [(5.0, 0), (3.0, 0), (4.0, 0), (2.0, 1), (4.0, 1), (1.0, 0), (4.0, 1)]
    assert recip_rank(_ranking(rows)) == approx(4 / 9)


def test_mrr_tie_above_positive():
    "two tied negatives above a single positive"
    rows = [(5.0, 0), (3.0, 0), (4.0, 1), (2.0, 1), (5.0, 0), (1.0, 0), (2.0, 0)]
    assert recip_rank(_ranking(rows)) == approx(1 / 3)


def test_mrr_all_tied():
    rows = [(4.0, 0), (4.0, 0), (4.0, 1), (4.0, 0), (4.0, 1)]
    assert recip_rank(_ranking(rows)) == approx(0.6416666666666667)


def test_mrr_all_tied_all_positive():
    rows = [(1.0, 1)] * 4
    assert recip_rank(_ranking(rows)) == approx(1.0)


def test_mrr_cutoff_excludes():
    rows = [(3.0, 0), (2.0, 0), (1.0, 1)]
    assert recip_rank(_ranking(rows), 2) == 0.0
    assert recip_rank(_ranking(rows), 3) == approx(1 / 3)


def test_mrr_cutoff_straddling_tie():
    "a tie block that straddles the cutoff is considered in full"
    rows = [(2.0, 1), (2.0, 0)]
    assert recip_rank(_ranking(rows), 1) == approx(0.5 * 1.0 + 0.5 * 0.5)


def test_mrr_cutoff_inside_negative_block():
    "negative block straddling the cutoff stops the scan at the cutoff"
    rows = [(2.0, 0), (2.0, 0), (1.0, 1)]
    assert recip_rank(_ranking(rows), 1) == 0.0


def test_mrr_bad_cutoff():
    with raises(ValueError, match="cutoff"):
        recip_rank(_ranking([(1.0, 1)]), 0)


def test_mrr_method():
    rl = _ranking([(3.0, 0), (2.0, 1)])
    assert rl.mrr() == recip_rank(rl)


@given(
    st.lists(
        st.tuples(st.floats(-100, 100, allow_nan=False), st.sampled_from([0.0, 1.0])),
        min_size=1,
        max_size=30,
        unique_by=lambda r: r[0],
    )
)
def test_mrr_no_ties(rows):
    rl = RankedList((None, s, t) for (s, t) in rows).rank()

    (pos,) = np.nonzero(rl.targets() > 0)
    if len(pos):
        assert recip_rank(rl) == approx(1.0 / (pos[0] + 1))
    else:
        assert recip_rank(rl) == 0.0


@mark.parametrize("n", range(1, 7))
@mark.parametrize("k", range(0, 7))
def test_mrr_all_tied_brute_force(n, k):
    if k > n:
        return
    rows = [(1.0, 1.0)] * k + [(1.0, 0.0)] * (n - k)
    assert recip_rank(_ranking(rows)) == approx(_brute_rr(rows))


@given(scored_rows(max_size=6, max_score=2, max_target=1))
def test_mrr_brute_force(rows):
    assert recip_rank(_ranking(rows)) == approx(_brute_rr(rows) if rows else 0.0)


@given(scored_rows(max_size=30))
def test_mrr_bounds(rows):
    rr = recip_rank(_ranking(rows))
    assert 0.0 <= rr <= 1.0
