# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Rank discounting models.
"""

from abc import ABC, abstractmethod
from typing import Annotated

import numpy as np
from annotated_types import Gt, Lt
from numpy.typing import NDArray
from pydantic import NonNegativeInt, PositiveFloat, validate_call


class RankWeight(ABC):
    """
    Interface for rank weighting models.  This returns *multiplicative* weights,
    so that target values should be multiplied by the weights in order to
    produce weighted gains.
    """

    @abstractmethod
    def weight(self, ranks: NDArray[np.integer]) -> NDArray[np.float64]:
        """
        Compute the discount for the specified ranks.

        Ranks must start with 1.
        """

    def series_sum(self) -> float | None:
        """
        Get the sum of the infinite series of this discount function, if known.
        """
        return None


class GeometricRankWeight(RankWeight):
    r"""
    Geometric cascade weighting for result ranks.  This is the user model
    behind rank-biased overlap :cite:p:`rbo`: a user looks at the next item
    with probability :math:`p`.

    For persistence :math:`p`, the weight of rank :math:`k` is given by
    :math:`p^{k-1}`.  The sum of this infinite series is :math:`1 / (1 - p)`.

    Args:
        persistence:
            The persistence parameter :math:`p`.
    """

    persistence: float

    @validate_call
    def __init__(self, persistence: Annotated[float, Gt(0.0), Lt(1.0)] = 0.9):
        self.persistence = persistence

    def weight(self, ranks) -> NDArray[np.float64]:
        return np.power(self.persistence, np.asarray(ranks, dtype=np.float64) - 1)

    def series_sum(self) -> float:
        return 1 / (1 - self.persistence)


class LogRankWeight(RankWeight):
    r"""
    Logarithmic weighting for result ranks.  This is the ranking model used
    for DCG and NDCG.

    Since :math:`\operatorname{lg} 1 = 0`, simply taking the log will result in
    division by 0 when weights are applied.  The classic correction is to clip
    the ranks, so that both of the first two positions have discount
    :math:`\operatorname{lg} 2`; the other common one is to compute
    :math:`\operatorname{lg} (k+1)`, which gives the first item weight 1 and
    item :math:`k` weight :math:`\ln 2 / \ln(k+1)`.  This discount supports
    both; the default is the offset of 1 used by the DCG functions in this
    package, and an offset of 0 clips.

    Args:
        base:
            The log base to use.
        offset:
            An offset to add to ranks before computing logs.
    """

    base: float
    offset: int

    @validate_call
    def __init__(self, *, base: PositiveFloat = 2, offset: NonNegativeInt = 1):
        self.base = base
        self.offset = offset

    def weight(self, ranks):
        ranks = np.asarray(ranks, dtype=np.float64)
        if self.offset > 0:
            return np.log(self.base) / np.log(ranks + self.offset)
        else:
            return np.log(self.base) / np.log(np.maximum(ranks, 2))
