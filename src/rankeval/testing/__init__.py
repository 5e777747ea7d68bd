# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
rankeval test harnesses and utilities.

This package contains Hypothesis strategies for generating ranked lists.  It
relies on PyTest and Hypothesis.
"""

import os
from contextlib import contextmanager

import numpy as np

import hypothesis.strategies as st

from rankeval.data import RankedList

__all__ = ["item_ids", "id_lists", "scored_rows", "ranked_lists", "set_env_var"]


@contextmanager
def set_env_var(var, val):
    "Set an environment variable & restore it."
    old_val = os.environ.get(var, None)
    try:
        if val is None:
            if old_val is not None:
                del os.environ[var]
        else:
            os.environ[var] = val
        yield
    finally:
        if old_val is not None:
            os.environ[var] = old_val
        elif var in os.environ:
            del os.environ[var]


def item_ids():
    """
    Hypothesis strategy to generate item IDs (as strings, like the rank
    functions produce).
    """
    return st.integers(1, np.iinfo("i8").max).map(str)


@st.composite
def id_lists(
    draw, min_size: int = 0, max_size: int = 50, unique: bool = True
) -> RankedList:
    """
    Hypothesis strategy to generate ranked lists of item IDs, with strictly
    decreasing scores (so the generated order is the rank order).

    Args:
        unique:
            If ``False``, IDs are drawn from a small pool so the same item
            often appears at more than one rank.
    """
    if unique:
        ids = draw(st.lists(item_ids(), min_size=min_size, max_size=max_size, unique=True))
    else:
        pool = st.integers(1, 12).map(str)
        ids = draw(st.lists(pool, min_size=min_size, max_size=max_size))
    return RankedList.from_arrays(ids=ids, scores=np.arange(len(ids), 0, -1, dtype=np.float64))


@st.composite
def scored_rows(
    draw,
    min_size: int = 0,
    max_size: int = 20,
    max_score: int = 5,
    max_target: int = 3,
) -> list[tuple[float, float]]:
    """
    Hypothesis strategy to generate ``(score, target)`` rows with small
    integer scores, so that ties are common.  Targets are non-negative.
    """
    return draw(
        st.lists(
            st.tuples(
                st.integers(0, max_score).map(float),
                st.integers(0, max_target).map(float),
            ),
            min_size=min_size,
            max_size=max_size,
        )
    )


@st.composite
def ranked_lists(draw, min_size: int = 0, max_size: int = 20) -> RankedList:
    """
    Hypothesis strategy to generate ranked lists of scored rows with targets
    (and no IDs).
    """
    rows = draw(scored_rows(min_size=min_size, max_size=max_size))
    return RankedList((None, s, t) for (s, t) in rows).rank()
