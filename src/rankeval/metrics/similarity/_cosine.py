# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .._base import effective_cutoff
from ._common import distinct_ids, shorter_first

if TYPE_CHECKING:
    from rankeval.data import RankedList


def cosine_similarity(a: RankedList, b: RankedList, cutoff: int | None = None) -> float:
    """
    Compute the cosine similarity of two rankings.  Each ranking, truncated to
    ``cutoff`` items, is a sparse vector over item identifiers whose value for
    the item at 1-based rank :math:`k` is :math:`1/k` (and 0 for absent items).
    The vector norms are taken over each full truncated list.  Ranks count
    distinct identifiers only (see :func:`distinct_ids`), so a repeated item
    keeps the weight of its first appearance.

    Args:
        a:
            The first ranked list.
        b:
            The second ranked list.
        cutoff:
            The number of leading items to compare, or ``None`` for all.

    Returns:
        The cosine similarity, or 0 if either truncated list is empty.
    """
    short, long = shorter_first(distinct_ids(a), distinct_ids(b))
    s1 = effective_cutoff(len(short), cutoff)
    s2 = effective_cutoff(len(long), cutoff)
    if s1 == 0 or s2 == 0:
        return 0.0

    weights = {}
    sq_short = 0.0
    for i, iid in enumerate(short[:s1]):
        wt = 1.0 / (i + 1.0)
        sq_short += wt * wt
        weights[iid] = wt

    dot = 0.0
    for i, iid in enumerate(long[:s2]):
        if iid in weights:
            dot += weights[iid] / (i + 1.0)

    # the longer vector shares the leading weights and adds its tail
    sq_long = sq_short
    for i in range(s1, s2):
        sq_long += 1.0 / ((i + 1.0) * (i + 1.0))

    return dot / math.sqrt(sq_short * sq_long)
