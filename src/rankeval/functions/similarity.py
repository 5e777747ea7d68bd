# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Similarity of two rankings.
"""

from __future__ import annotations

from typing import Annotated, Literal

from annotated_types import Gt, Lt
from pydantic import BaseModel, NonNegativeInt, field_validator, model_validator
from typing_extensions import override

from rankeval.config import RankevalSettings

from ._base import RankFunction
from ._rows import Bag, read_ranking

SimilarityKind = Literal["jaccard", "cosine", "rbo"]


class SimilarityConfig(BaseModel, extra="forbid"):
    """
    Configuration for :class:`Similarity`.

    The single similarity parameter can be supplied as ``param``; it is
    interpreted as the ``cutoff`` for Jaccard and cosine similarity and as
    the ``persistence`` for RBO.
    """

    kind: SimilarityKind
    "The similarity function."
    cutoff: int | None = None
    "The number of leading items to compare (Jaccard and cosine)."
    persistence: Annotated[float, Gt(0.0), Lt(1.0)] | None = None
    "The RBO persistence probability."
    id_column1: NonNegativeInt
    score_column1: NonNegativeInt
    id_column2: NonNegativeInt
    score_column2: NonNegativeInt

    @model_validator(mode="before")
    @classmethod
    def split_param(cls, data):
        match data:
            case {"param": param, "kind": str(kind)}:
                data = {k: v for k, v in data.items() if k != "param"}
                if kind.lower() == "rbo":
                    data["persistence"] = param
                else:
                    data["cutoff"] = param
                return data
            case _:
                return data

    @field_validator("kind", mode="before")
    @staticmethod
    def lower_kind(kind):
        if isinstance(kind, str):
            return kind.lower()
        return kind

    @field_validator("cutoff", mode="after")
    @staticmethod
    def unbounded_cutoff(cutoff: int | None) -> int | None:
        if cutoff is not None and cutoff <= 0:
            return None
        return cutoff

    @model_validator(mode="after")
    def check_persistence(self):
        if self.kind == "rbo" and self.persistence is None:
            raise ValueError("rbo similarity requires a persistence")
        return self


class Similarity(RankFunction[SimilarityConfig]):
    """
    Compute the similarity of two groups of rows, each ranked by decreasing
    score, with one of three similarity functions:

    ``jaccard``
        Size of the intersection of the top items over the size of their
        union (:func:`~rankeval.metrics.similarity.jaccard_similarity`).
    ``cosine``
        Cosine between vectors over the items, with inverse ranks as values
        (:func:`~rankeval.metrics.similarity.cosine_similarity`).
    ``rbo``
        Rank-biased overlap, which accounts for lists of uneven length
        (:func:`~rankeval.metrics.similarity.rank_biased_overlap`).

    Example::

        rbo = Similarity("rbo", "0.9", "2", "3", "2", "3")
        rbo(rows_treatment1, rows_treatment2)

    Args:
        kind:
            The similarity function (case-insensitive).
        param:
            For ``jaccard`` and ``cosine``, the integer rank cutoff, with
            values less than 1 meaning no cutoff.  For ``rbo``, the
            persistence probability in (0, 1).
        id_column1:
            Zero-based column index of the item id in the first group.
        score_column1:
            Zero-based column index of the score in the first group.
        id_column2:
            Zero-based column index of the item id in the second group.
        score_column2:
            Zero-based column index of the score in the second group.
        settings:
            Settings to use instead of the global configuration.
    """

    def __init__(
        self,
        kind: SimilarityKind | str,
        param: int | float | str,
        id_column1: int | str,
        score_column1: int | str,
        id_column2: int | str,
        score_column2: int | str,
        *,
        settings: RankevalSettings | None = None,
    ):
        config = self._validate_config(
            SimilarityConfig,
            kind=kind,
            param=param,
            id_column1=id_column1,
            score_column1=score_column1,
            id_column2=id_column2,
            score_column2=score_column2,
        )
        super().__init__(config, settings)

    @property
    def label(self):
        cfg = self.config
        if cfg.kind == "rbo":
            return f"RBO({cfg.persistence})"

        name = "Jaccard" if cfg.kind == "jaccard" else "Cosine"
        if cfg.cutoff is not None:
            return f"{name}@{cfg.cutoff}"
        else:
            return name

    @property
    def min_columns(self) -> tuple[int, int]:
        "The minimum number of columns in the rows of each group."
        cfg = self.config
        return (
            1 + max(cfg.id_column1, cfg.score_column1),
            1 + max(cfg.id_column2, cfg.score_column2),
        )

    def output_name(self, score1: str, score2: str) -> str:
        """
        Get the name of the output column, given the names of the score
        columns of the two groups.
        """
        cfg = self.config
        name = f"{cfg.kind}_sim"
        if cfg.kind == "rbo":
            name += f"_{cfg.persistence}"
        elif cfg.cutoff is not None:
            name += f"_{cfg.cutoff}"

        if score1 != score2:
            name += f"_{score1}_{score2}"
        return name

    @override
    def evaluate(self, bag1: Bag | None, bag2: Bag | None) -> float | None:
        if bag1 is None or bag2 is None:
            return None

        cfg = self.config
        r1 = read_ranking(
            bag1,
            function=self.label,
            score_column=cfg.score_column1,
            id_column=cfg.id_column1,
            max_size=self.settings.max_group_size,
        )
        r2 = read_ranking(
            bag2,
            function=self.label,
            score_column=cfg.score_column2,
            id_column=cfg.id_column2,
            max_size=self.settings.max_group_size,
        )

        match cfg.kind:
            case "jaccard":
                return r1.jaccard_similarity(r2, cfg.cutoff)
            case "cosine":
                return r1.cosine_similarity(r2, cfg.cutoff)
            case _:
                assert cfg.persistence is not None
                return r1.rbo_similarity(r2, cfg.persistence)
