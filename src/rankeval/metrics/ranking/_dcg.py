# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from rankeval.logging import get_logger, get_tracer

from .._base import effective_cutoff
from ._weighting import LogRankWeight, RankWeight

if TYPE_CHECKING:
    from rankeval.data import RankedList

_log = get_logger(__name__)
_default_weight = LogRankWeight()


def dcg(
    ranking: RankedList,
    cutoff: int | None = None,
    *,
    normalize: bool = False,
    weight: RankWeight = _default_weight,
) -> float:
    """
    Compute the discounted cumulative gain :cite:p:`ndcg` of a ranked list,
    using the item targets as gains:

    .. math::
        \\mathrm{DCG}(L) = \\sum_{i=1}^{|L|} \\frac{t_i}{\\operatorname{lg}(i + 1)}

    Items with tied scores are treated as unordered, and the expected DCG over
    all orderings of each tie block is computed: every member of a block gets
    the mean target of the block, weighted by the summed discounts of the
    block's positions.  Only positions within the cutoff contribute discounts,
    but the targets of *all* members of a block that starts within the cutoff
    enter its mean.

    Args:
        ranking:
            The ranked list.
        cutoff:
            The maximum rank to consider, or ``None`` for the whole list.
        normalize:
            If ``True``, divide by the total discount applied, yielding the
            rank-weighted average of the targets.  This is undefined (NaN) for
            an empty list.
        weight:
            The rank weighting model.

    Returns:
        The (expected) DCG or rank-weighted average.
    """
    scores = ranking.scores().tolist()
    targets = ranking.targets().tolist()
    n = len(scores)
    limit = effective_cutoff(n, cutoff)
    weights = weight.weight(np.arange(1, limit + 1)).tolist()
    tracer = get_tracer(_log, metric="dcg")

    total = 0.0
    total_weight = 0.0

    tied_count = 0
    tied_weight = 0.0
    tied_sum = 0.0
    last_score = None

    for i in range(n):
        score = scores[i]
        if tied_count and score != last_score:
            # expected DCG of a tie block is (mean target) x (sum of discounts)
            total_weight += tied_weight
            total += tied_weight * tied_sum / tied_count
            if tied_count > 1:
                tracer.trace("tie block", end=i, size=tied_count, weight=tied_weight)

            tied_count = 0
            tied_weight = 0.0
            tied_sum = 0.0
            if i >= limit:
                break

        if not tied_count:
            last_score = score
        tied_count += 1
        if i < limit:
            tied_weight += weights[i]
        tied_sum += targets[i]

    if tied_count:
        total_weight += tied_weight
        total += tied_weight * tied_sum / tied_count

    if normalize:
        if total_weight == 0.0:
            return np.nan
        return total / total_weight
    else:
        return total


def max_dcg(
    ranking: RankedList, cutoff: int | None = None, *, weight: RankWeight = _default_weight
) -> float:
    """
    Compute the ideal DCG of a ranked list: the DCG of its targets sorted in
    decreasing order, regardless of score.  Ties among targets do not matter
    for this upper bound, so no expectation is taken.

    Args:
        ranking:
            The ranked list.
        cutoff:
            The maximum rank to consider, or ``None`` for the whole list.
        weight:
            The rank weighting model.
    """
    targets = ranking.targets()
    limit = effective_cutoff(len(targets), cutoff)
    ideal = -np.sort(-targets)[:limit]
    return np.dot(ideal, weight.weight(np.arange(1, limit + 1))).item()


def ndcg(
    ranking: RankedList, cutoff: int | None = None, *, weight: RankWeight = _default_weight
) -> float:
    """
    Compute the normalized discounted cumulative gain: the tie-aware
    :func:`dcg` divided by the :func:`max_dcg`.  If the ideal DCG is zero, so
    is the NDCG.

    Args:
        ranking:
            The ranked list.
        cutoff:
            The maximum rank to consider, or ``None`` for the whole list.
        weight:
            The rank weighting model.
    """
    ideal = max_dcg(ranking, cutoff, weight=weight)
    if ideal == 0.0:
        return 0.0
    return dcg(ranking, cutoff, weight=weight) / ideal
