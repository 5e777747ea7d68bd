# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import numpy as np
from pydantic import ValidationError

from pytest import approx, mark, raises

from rankeval.metrics.ranking import GeometricRankWeight, LogRankWeight


def test_log_weight_default():
    wt = LogRankWeight()
    w = wt.weight(np.arange(1, 5))
    assert w[0] == approx(1.0)
    assert w[1] == approx(1.0 / np.log2(3))
    assert w[3] == approx(np.log(2) / np.log(5))
    assert np.all(np.diff(w) < 0)
    assert wt.series_sum() is None


def test_log_weight_clipped():
    w = LogRankWeight(offset=0).weight(np.arange(1, 4))
    assert w.tolist() == approx([1.0, 1.0, 1.0 / np.log2(3)])


def test_log_weight_base():
    w = LogRankWeight(base=10).weight(np.array([1, 9]))
    assert w.tolist() == approx([np.log(10) / np.log(2), 1.0])


def test_log_weight_bad_base():
    with raises(ValidationError):
        LogRankWeight(base=-1)


def test_geometric_weight():
    wt = GeometricRankWeight(0.5)
    assert wt.weight(np.arange(1, 4)).tolist() == approx([1.0, 0.5, 0.25])
    assert wt.series_sum() == approx(2.0)


def test_geometric_default():
    assert GeometricRankWeight().persistence == 0.9


@mark.parametrize("p", [0.0, 1.0, 2.0, -0.1])
def test_geometric_bad_persistence(p):
    with raises(ValidationError):
        GeometricRankWeight(p)
