# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

from typing import TYPE_CHECKING

from rankeval.logging import get_logger, get_tracer

from .._base import effective_cutoff

if TYPE_CHECKING:
    from rankeval.data import RankedList

_log = get_logger(__name__)


def recip_rank(ranking: RankedList, cutoff: int | None = None) -> float:
    """
    Compute the reciprocal rank of the first item with a positive target,
    treating ties in the ranking score as unordered.  Averaging this value over
    groups yields the MRR (mean reciprocal rank).

    Let :math:`\\kappa` denote the 1-based rank of the first item with a
    positive target; then the reciprocal rank is :math:`1 / \\kappa`, or 0 if
    no item in the first ``cutoff`` ranks is positive.  If that item is part of
    a block of :math:`m` tied items starting at rank :math:`r + 1`, :math:`k`
    of which are positive, each of the :math:`m!` orderings of the block is
    equally likely, and the result is the expectation

    .. math::
        \\sum_{j=0}^{m-k} P(\\text{no positive in the first } j) \\,
            P(\\text{positive at } j) \\frac{1}{r + j + 1}

    A tie block that straddles the cutoff is examined in full.

    Args:
        ranking:
            The ranked list.
        cutoff:
            The maximum rank to consider, or ``None`` for the whole list.

    Returns:
        The (expected) reciprocal rank.
    """
    scores = ranking.scores().tolist()
    targets = ranking.targets().tolist()
    n = len(scores)
    max_iter = effective_cutoff(n, cutoff)

    tied_top = 0
    tied_count = 0
    tied_pos = 0
    last_score = None

    i = 0
    while i < max_iter or (i < n and tied_pos > 0):
        score = scores[i]
        if score != last_score:
            if tied_pos > 0:
                # positive block complete, later blocks cannot hold the first positive
                break

            tied_top = i
            tied_count = 1
            tied_pos = 1 if targets[i] > 0.0 else 0
            last_score = score
        else:
            tied_count += 1
            if targets[i] > 0.0:
                tied_pos += 1
        i += 1

    if tied_pos == 0:
        return 0.0

    tracer = get_tracer(_log, metric="recip_rank")
    tracer.trace("decisive tie block", top=tied_top, size=tied_count, positive=tied_pos)

    expected = 0.0
    # probability that no positive item has been placed yet
    p_nopos = 1.0
    for j in range(tied_count - tied_pos + 1):
        p_pos = tied_pos / (tied_count - j)
        expected += p_nopos * p_pos / (tied_top + j + 1)
        p_nopos *= 1.0 - p_pos

    return expected
