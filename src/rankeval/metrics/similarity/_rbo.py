# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..ranking import GeometricRankWeight
from ._common import distinct_ids, shorter_first

if TYPE_CHECKING:
    from rankeval.data import RankedList


def rank_biased_overlap(a: RankedList, b: RankedList, p: float = 0.9) -> float:
    """
    Compute the extrapolated rank-biased overlap :cite:p:`rbo` of two
    rankings, which may have different lengths.  This is equation 32 of:

        Webber, William, Alistair Moffat, and Justin Zobel. "A similarity
        measure for indefinite rankings." ACM Transactions on Information
        Systems (TOIS) 28.4 (2010): 20.
        https://dl.acm.org/doi/10.1145/1852102.1852106

    Let :math:`s` and :math:`l` be the lengths of the shorter and longer
    rankings, and :math:`X_d` the size of the overlap of their prefixes of
    length :math:`d` (beyond :math:`s`, only the longer list contributes new
    items).  Then

    .. math::
        \\mathrm{RBO} = \\frac{1-p}{p} \\left(
            \\sum_{d=1}^{l} \\frac{X_d}{d} p^d
            + \\sum_{d=s+1}^{l} \\frac{X_s (d - s)}{s d} p^d
        \\right) + \\left(\\frac{X_l - X_s}{l} + \\frac{X_s}{s}\\right) p^l

    where the second sum extrapolates the unseen tail of the shorter list.
    Depths count distinct identifiers (see :func:`distinct_ids`): a repeated
    item only counts at its first rank, so :math:`\\mathrm{RBO}(A, A) = 1`.

    Args:
        a:
            The first ranked list.
        b:
            The second ranked list.
        p:
            The persistence, the probability that a user scanning the lists
            continues to the next rank.  Must be in the open interval (0, 1).
            Typical values are 0.9 and 0.98, which give the first 10 and 50
            ranks (respectively) about 86% of the weight.

    Returns:
        The RBO score in [0, 1], or 0 if either list is empty.
    """
    weight = GeometricRankWeight(p)

    ids1, ids2 = shorter_first(distinct_ids(a), distinct_ids(b))
    s1 = len(ids1)
    s2 = len(ids2)
    if s1 == 0 or s2 == 0:
        return 0.0

    # items seen so far in each list
    seen1 = set()
    seen2 = set()

    overlap = np.zeros(s2 + 1)
    for i in range(s1):
        id1 = ids1[i]
        id2 = ids2[i]
        x = overlap[i]
        if id1 == id2:
            x += 1
        else:
            if id1 in seen2:
                x += 1
            if id2 in seen1:
                x += 1
        seen1.add(id1)
        seen2.add(id2)
        overlap[i + 1] = x

    # only the longer list reveals new items past the shorter one's end
    for i in range(s1, s2):
        id2 = ids2[i]
        x = overlap[i]
        if id2 in seen1:
            x += 1
        overlap[i + 1] = x

    depths = np.arange(1, s2 + 1, dtype=np.float64)
    # p^d is the geometric weight of rank d + 1
    pd = weight.weight(depths + 1)

    sum1 = np.sum(overlap[1:] / depths * pd)
    tail = depths[s1:]
    sum2 = np.sum(overlap[s1] * (tail - s1) / (tail * s1) * pd[s1:])
    sum3 = ((overlap[s2] - overlap[s1]) / s2 + overlap[s1] / s1) * pd[s2 - 1]

    return float((1.0 - p) / p * (sum1 + sum2) + sum3)
