# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Discounted cumulative gain and its normalized forms.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, NonNegativeInt, field_validator
from typing_extensions import override

from rankeval.config import RankevalSettings

from ._base import RankFunction
from ._rows import Bag, read_ranking

DCGMode = Literal["normalized", "weighted_average", "unnormalized"]


class DCGConfig(BaseModel, extra="forbid"):
    "Configuration for :class:`DCG`."

    mode: DCGMode
    """
    The normalization mode: ``normalized`` divides by the ideal DCG (nDCG),
    ``weighted_average`` divides by the total discount, and ``unnormalized``
    is the plain DCG.
    """
    cutoff: int | None = None
    "The maximum rank to consider (``None`` for no cutoff)."
    predictor_column: NonNegativeInt
    "Zero-based column index of the ranking score."
    target_column: NonNegativeInt
    "Zero-based column index of the target value."

    @field_validator("mode", mode="before")
    @staticmethod
    def lower_mode(mode):
        if isinstance(mode, str):
            return mode.lower()
        return mode

    @field_validator("cutoff", mode="after")
    @staticmethod
    def unbounded_cutoff(cutoff: int | None) -> int | None:
        if cutoff is not None and cutoff <= 0:
            return None
        return cutoff


class DCG(RankFunction[DCGConfig]):
    """
    Compute the (normalized) discounted cumulative gain or the rank-weighted
    average of the target values of a group, when its rows are sorted by
    decreasing predictor value.  Ties in the predictor are resolved by
    expectation (see :func:`~rankeval.metrics.ranking.dcg`).

    Example::

        ndcg = DCG("normalized", "-1", "1", "2")

    Args:
        mode:
            One of ``"normalized"``, ``"weighted_average"``, or
            ``"unnormalized"`` (case-insensitive).
        cutoff:
            The maximum rank to consider; values of zero or less mean no
            cutoff.
        predictor_column:
            Zero-based column index of the ranking score.
        target_column:
            Zero-based column index of the target.
        settings:
            Settings to use instead of the global configuration.
    """

    def __init__(
        self,
        mode: DCGMode | str,
        cutoff: int | str,
        predictor_column: int | str,
        target_column: int | str,
        *,
        settings: RankevalSettings | None = None,
    ):
        config = self._validate_config(
            DCGConfig,
            mode=mode,
            cutoff=cutoff,
            predictor_column=predictor_column,
            target_column=target_column,
        )
        super().__init__(config, settings)

    @property
    def label(self):
        match self.config.mode:
            case "normalized":
                name = "NDCG"
            case "weighted_average":
                name = "RankWtdAvg"
            case _:
                name = "DCG"
        if self.config.cutoff is not None:
            return f"{name}@{self.config.cutoff}"
        else:
            return name

    @property
    def min_columns(self) -> int:
        "The minimum number of columns in each row."
        return 1 + max(self.config.predictor_column, self.config.target_column)

    def output_name(self, predictor: str, target: str) -> str:
        """
        Get the name of the output column, given the names of the predictor
        and target columns.
        """
        match self.config.mode:
            case "normalized":
                name = "ndcg"
            case "weighted_average":
                name = "rank_wtd_avg"
            case _:
                name = "dcg"
        if self.config.cutoff is not None:
            name += f"_{self.config.cutoff}"
        return f"{name}_{target}_by_{predictor}"

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

        match self.config.mode:
            case "normalized":
                return ranking.ndcg(self.config.cutoff)
            case "weighted_average":
                return ranking.dcg(self.config.cutoff, normalize=True)
            case _:
                return ranking.dcg(self.config.cutoff)
