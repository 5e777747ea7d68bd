# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Ranking quality and ranking similarity measures.
"""

from .ranking import (
    GeometricRankWeight,
    LogRankWeight,
    RankWeight,
    dcg,
    max_dcg,
    ndcg,
    recip_rank,
)
from .similarity import cosine_similarity, jaccard_similarity, rank_biased_overlap

__all__ = [
    "RankWeight",
    "GeometricRankWeight",
    "LogRankWeight",
    "recip_rank",
    "dcg",
    "max_dcg",
    "ndcg",
    "jaccard_similarity",
    "cosine_similarity",
    "rank_biased_overlap",
]
