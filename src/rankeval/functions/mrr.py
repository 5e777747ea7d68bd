# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Mean reciprocal rank of a group.
"""

from __future__ import annotations

from pydantic import BaseModel, NonNegativeInt
from typing_extensions import override

from rankeval.config import RankevalSettings

from ._base import RankFunction
from ._rows import Bag, read_ranking


class MRRConfig(BaseModel, extra="forbid"):
    "Configuration for :class:`MRR`."

    predictor_column: NonNegativeInt
    "Zero-based column index of the ranking score."
    target_column: NonNegativeInt
    "Zero-based column index of the target value."


class MRR(RankFunction[MRRConfig]):
    """
    Compute the reciprocal rank of the first row with a positive target, when
    the rows of a group are sorted by decreasing predictor value.  Ties in the
    predictor are resolved by expectation (see
    :func:`~rankeval.metrics.ranking.recip_rank`).  The whole group is
    considered (no cutoff).

    Example::

        mrr = MRR("1", "2")
        mrr([("q1", 1.0, 0), ("q1", 2.0, 1), ("q1", 3.0, 0)])  # 0.5

    Args:
        predictor_column:
            Zero-based column index of the ranking score.
        target_column:
            Zero-based column index of the target.
        settings:
            Settings to use instead of the global configuration.
    """

    def __init__(
        self,
        predictor_column: int | str,
        target_column: int | str,
        *,
        settings: RankevalSettings | None = None,
    ):
        config = self._validate_config(
            MRRConfig, predictor_column=predictor_column, target_column=target_column
        )
        super().__init__(config, settings)

    @property
    def label(self):
        return "MRR"

    @property
    def min_columns(self) -> int:
        "The minimum number of columns in each row."
        return 1 + max(self.config.predictor_column, self.config.target_column)

    def output_name(self, predictor: str, target: str) -> str:
        """
        Get the name of the output column, given the names of the predictor
        and target columns.
        """
        return f"mrr_{target}_by_{predictor}"

    @override
    def evaluate(self, bag: Bag | None) -> float | None:
        if bag is None:
            return None

        ranking = read_ranking(
            bag,
            function=self.label,
            score_column=self.config.predictor_column,
            target_column=self.config.target_column,
            max_size=self.settings.max_group_size,
        )
        return ranking.mrr()
