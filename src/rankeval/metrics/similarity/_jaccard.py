# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

from typing import TYPE_CHECKING

from .._base import effective_cutoff
from ._common import distinct_ids

if TYPE_CHECKING:
    from rankeval.data import RankedList


def jaccard_similarity(a: RankedList, b: RankedList, cutoff: int | None = None) -> float:
    """
    Compute the Jaccard coefficient of the sets of items in the top ``cutoff``
    positions of two rankings: the size of their intersection over the size of
    their union.  Two empty rankings have similarity 0.  Repeated and missing
    identifiers are handled as in :func:`distinct_ids`, so the top positions
    hold distinct items.

    Args:
        a:
            The first ranked list.
        b:
            The second ranked list.
        cutoff:
            The number of leading items to compare, or ``None`` for all.
    """
    ids_a = distinct_ids(a)
    ids_b = distinct_ids(b)
    ids_a = set(ids_a[: effective_cutoff(len(ids_a), cutoff)])
    ids_b = set(ids_b[: effective_cutoff(len(ids_b), cutoff)])

    union = len(ids_a | ids_b)
    if union == 0:
        return 0.0

    return len(ids_a & ids_b) / union
