# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Tie-aware ranking quality metrics.
"""

from ._dcg import dcg, max_dcg, ndcg
from ._recip import recip_rank
from ._weighting import GeometricRankWeight, LogRankWeight, RankWeight

__all__ = [
    "RankWeight",
    "GeometricRankWeight",
    "LogRankWeight",
    "recip_rank",
    "dcg",
    "max_dcg",
    "ndcg",
]
