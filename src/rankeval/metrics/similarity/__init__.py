# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Similarity measures between two rankings.
"""

from ._common import distinct_ids, shorter_first
from ._cosine import cosine_similarity
from ._jaccard import jaccard_similarity
from ._rbo import rank_biased_overlap

__all__ = [
    "shorter_first",
    "distinct_ids",
    "jaccard_similarity",
    "cosine_similarity",
    "rank_biased_overlap",
]
