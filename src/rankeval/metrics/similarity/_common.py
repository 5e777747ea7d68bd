# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

from typing import TYPE_CHECKING, Sized, TypeVar

if TYPE_CHECKING:
    from rankeval.data import RankedList

L = TypeVar("L", bound=Sized)


def shorter_first(a: L, b: L) -> tuple[L, L]:
    """
    Order two rankings so the shorter one comes first.  Neither list is
    modified; ties in length keep the argument order.
    """
    if len(a) > len(b):
        return b, a
    else:
        return a, b


def distinct_ids(ranking: RankedList) -> list[str]:
    """
    Get the item identifiers of a ranked list, in rank order, as compared by
    the similarity measures.  An identifier that appears more than once is
    kept only at its first (best) rank, and items without identifiers are
    skipped; rank positions are assigned after this filtering.
    """
    return list(dict.fromkeys(i for i in ranking.ids().tolist() if i is not None))
