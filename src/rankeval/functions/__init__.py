# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Rank functions: configured, per-group evaluators for use by batch engines.

Each function is configured once (from strings or numbers, so it can be
declared directly from a job definition) and then called once per group of
rows, returning a float or ``None`` to skip the group.
"""

from ._base import RankFunction
from .dcg import DCG, DCGConfig
from .mrr import MRR, MRRConfig
from .similarity import Similarity, SimilarityConfig

__all__ = [
    "RankFunction",
    "MRR",
    "MRRConfig",
    "DCG",
    "DCGConfig",
    "Similarity",
    "SimilarityConfig",
]
