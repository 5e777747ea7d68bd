# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT


def effective_cutoff(n: int, cutoff: int | None) -> int:
    """
    Resolve a rank cutoff against a list length.

    Args:
        n:
            The list length.
        cutoff:
            The requested cutoff, or ``None`` for no cutoff.

    Returns:
        The number of leading positions to consider.
    """
    if cutoff is None:
        return n
    if cutoff < 1:
        raise ValueError("cutoff must be positive or None")
    return min(n, cutoff)
