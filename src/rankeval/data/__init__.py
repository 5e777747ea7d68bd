# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Data structures for ranked lists.
"""

from .ranked import RankedList, RankItem

__all__ = ["RankItem", "RankedList"]
