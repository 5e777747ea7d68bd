# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Ranked lists of scored items.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from rankeval.diagnostics import DataError
from rankeval.metrics.ranking import dcg, max_dcg, ndcg, recip_rank
from rankeval.metrics.similarity import cosine_similarity, jaccard_similarity, rank_biased_overlap


@dataclass(frozen=True)
class RankItem:
    """
    A single row of a ranked list.
    """

    id: str | None
    "Identifier used to match items across rankings (similarity measures only)."
    score: float
    "The ranking score; higher scores rank first."
    target: float = 0.0
    "The ground-truth target value (quality measures only)."


class RankedList:
    """
    A list of scored items, ranked by decreasing score.

    Usage is in two phases: first, :meth:`add` each row of a group; then
    :meth:`rank` the list once, which freezes it and sorts it in decreasing
    order of score.  Metrics (:meth:`mrr`, :meth:`dcg`, :meth:`ndcg`) and
    similarities to another ranked list (:meth:`jaccard_similarity`, ...) can
    only be computed on a ranked list.

    The order of items with identical scores is arbitrary; all metrics treat a
    block of tied items as unordered and compute the expected value of the
    measure over all orderings of the block.  As a consequence, when a tie
    block straddles a rank cutoff, items past the cutoff can still affect the
    result.

    Scores and targets must be finite; :meth:`add` rejects ``NaN`` and
    infinite values with :class:`~rankeval.diagnostics.DataError`, so a ranked
    list always has a total order.

    Args:
        items:
            Initial items to add, as :class:`RankItem` objects or
            ``(id, score, target)`` tuples.
    """

    _ids: list[str | None]
    _scores: list[float]
    _targets: list[float]
    _id_arr: NDArray[np.object_] | None = None
    _score_arr: NDArray[np.float64] | None = None
    _target_arr: NDArray[np.float64] | None = None

    def __init__(self, items: Iterable[RankItem | tuple[str | None, float, float]] = ()):
        self._ids = []
        self._scores = []
        self._targets = []
        for item in items:
            if isinstance(item, RankItem):
                self.add(item.id, item.score, item.target)
            else:
                self.add(*item)

    @classmethod
    def from_arrays(
        cls,
        *,
        scores: ArrayLike,
        ids: ArrayLike | None = None,
        targets: ArrayLike | None = None,
        rank: bool = True,
    ) -> RankedList:
        """
        Create a ranked list from parallel arrays of scores, identifiers, and
        targets.

        Args:
            scores:
                The ranking scores.
            ids:
                The item identifiers (converted to strings, except that
                ``None`` entries stay ``None``), or ``None``.
            targets:
                The target values, or ``None`` for all-zero targets.
            rank:
                Whether to rank the list before returning it.
        """
        scores = np.asarray(scores, dtype=np.float64)
        n = len(scores)
        if ids is None:
            id_list = [None] * n
        else:
            id_list = [None if i is None else str(i) for i in np.asarray(ids).tolist()]
        if targets is None:
            targets = np.zeros(n)
        targets = np.asarray(targets, dtype=np.float64)
        if len(id_list) != n or len(targets) != n:
            raise ValueError("ids, scores, and targets must have the same length")

        rl = cls()
        for i, s, t in zip(id_list, scores.tolist(), targets.tolist()):
            rl.add(i, s, t)
        if rank:
            rl.rank()
        return rl

    @property
    def is_ranked(self) -> bool:
        "Whether :meth:`rank` has been called."
        return self._score_arr is not None

    def add(self, id: str | None, score: float, target: float = 0.0) -> None:
        """
        Append an item to the (unranked) list.

        Raises:
            TypeError: if the list has already been ranked.
            DataError: if the score or target is not finite.
        """
        if self.is_ranked:
            raise TypeError("cannot add items to a ranked list")
        score = float(score)
        target = float(target)
        if not math.isfinite(score):
            raise DataError(f"non-finite score {score} for item {id}")
        if not math.isfinite(target):
            raise DataError(f"non-finite target {target} for item {id}")

        self._ids.append(id)
        self._scores.append(score)
        self._targets.append(target)

    def rank(self) -> RankedList:
        """
        Sort the items in decreasing order of score and freeze the list.
        Ranking an already-ranked list does nothing.

        Returns:
            The list itself, for chaining.
        """
        if self.is_ranked:
            return self

        scores = np.array(self._scores, dtype=np.float64)
        order = np.argsort(-scores, kind="stable")
        ids = np.empty(len(self._ids), dtype=np.object_)
        ids[:] = self._ids

        self._id_arr = ids[order]
        self._score_arr = scores[order]
        self._target_arr = np.array(self._targets, dtype=np.float64)[order]
        self._ids = self._id_arr.tolist()
        self._scores = self._score_arr.tolist()
        self._targets = self._target_arr.tolist()
        return self

    def _require_ranked(self):
        if not self.is_ranked:
            raise TypeError("list is not ranked")

    def ids(self) -> NDArray[np.object_]:
        "Get the item identifiers in rank order."
        self._require_ranked()
        assert self._id_arr is not None
        return self._id_arr

    def scores(self) -> NDArray[np.float64]:
        "Get the scores in rank (decreasing) order."
        self._require_ranked()
        assert self._score_arr is not None
        return self._score_arr

    def targets(self) -> NDArray[np.float64]:
        "Get the target values in rank order."
        self._require_ranked()
        assert self._target_arr is not None
        return self._target_arr

    def mrr(self, cutoff: int | None = None) -> float:
        "Tie-aware reciprocal rank, see :func:`~rankeval.metrics.ranking.recip_rank`."
        return recip_rank(self, cutoff)

    def dcg(self, cutoff: int | None = None, *, normalize: bool = False) -> float:
        "Tie-aware DCG, see :func:`~rankeval.metrics.ranking.dcg`."
        return dcg(self, cutoff, normalize=normalize)

    def max_dcg(self, cutoff: int | None = None) -> float:
        "Ideal DCG, see :func:`~rankeval.metrics.ranking.max_dcg`."
        return max_dcg(self, cutoff)

    def ndcg(self, cutoff: int | None = None) -> float:
        "Tie-aware NDCG, see :func:`~rankeval.metrics.ranking.ndcg`."
        return ndcg(self, cutoff)

    def jaccard_similarity(self, other: RankedList, cutoff: int | None = None) -> float:
        return jaccard_similarity(self, other, cutoff)

    def cosine_similarity(self, other: RankedList, cutoff: int | None = None) -> float:
        return cosine_similarity(self, other, cutoff)

    def rbo_similarity(self, other: RankedList, p: float) -> float:
        return rank_biased_overlap(self, other, p)

    def __len__(self):
        return len(self._scores)

    @overload
    def __getitem__(self, pos: int) -> RankItem: ...
    @overload
    def __getitem__(self, pos: slice) -> list[RankItem]: ...
    def __getitem__(self, pos: int | slice) -> RankItem | list[RankItem]:
        if isinstance(pos, slice):
            return [self[i] for i in range(*pos.indices(len(self)))]
        return RankItem(self._ids[pos], self._scores[pos], self._targets[pos])

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __str__(self) -> str:
        return "\n".join(
            f"{i}\t{iid}\t{s}\t{t}"
            for i, (iid, s, t) in enumerate(zip(self._ids, self._scores, self._targets))
        )

    def __repr__(self) -> str:
        state = "ranked" if self.is_ranked else "unranked"
        return f"<RankedList ({state}) of {len(self)} items>"
