# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Tie-aware ranking quality and ranking similarity measures.
"""

import lazy_loader as lazy

from ._version import rankeval_version

__version__ = rankeval_version()


# lazy-load internal imports
# IMPORTANT: this must be kept in sync with __init__.pyi
__getattr__, __dir__, __all__ = lazy.attach(
    __name__,
    submodules=[
        "config",
        "data",
        "diagnostics",
        "functions",
        "logging",
        "metrics",
    ],
    submod_attrs={
        "config": ["configure", "rankeval_config"],
        "data": ["RankItem", "RankedList"],
        "functions": ["MRR", "DCG", "Similarity"],
    },
)
