# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import numpy as np
import pandas as pd
import pyarrow as pa

from pytest import approx, mark, raises

from rankeval.config import RankevalSettings
from rankeval.diagnostics import ConfigError, EvaluationError
from rankeval.functions import MRR


def _rows(query, *pairs):
    return [(query, p, t) for (p, t) in pairs]


Q1 = _rows("q1", (1, 0), (2, 1), (3, 0), (4, 0), (5, 0))
Q2 = _rows("q2", (2.1, 0), (2.0, 0))
Q3 = _rows("q3", (5, 10))
Q4 = _rows("q4", (5, 0), (3, 0), (4, 0), (2, 1), (4, 1), (1, 0), (4, 1))
Q5 = _rows("q5", (5, 0), (3, 0), (4, 1), (2, 1), (5, 0), (1, 0), (2, 0))
Q6 = _rows("q6", (4, 0), (4, 0), (4, 1), (4, 0), (4, 1))


@mark.parametrize(
    "rows,expected",
    [
        (Q1, 0.25),
        (Q2, 0.0),
        (Q3, 1.0),
        (Q4, 0.4444444444444444),
        (Q5, 0.3333333333333333),
        (Q6, 0.6416666666666667),
    ],
)
def test_mrr_groups(rows, expected):
    mrr = MRR("1", "2")
    assert mrr(rows) == approx(expected)


def test_mrr_config():
    mrr = MRR("1", 2)
    assert mrr.config.predictor_column == 1
    assert mrr.config.target_column == 2
    assert mrr.label == "MRR"
    assert str(mrr) == "RankFunction MRR"
    assert mrr.min_columns == 3
    assert mrr.output_name("pred", "clicked") == "mrr_clicked_by_pred"


@mark.parametrize("cols", [("x", "2"), ("1", "-1"), ("1.5", "2")])
def test_mrr_bad_config(cols):
    with raises(ConfigError):
        MRR(*cols)


def test_mrr_none_bag():
    assert MRR("1", "2")(None) is None


def test_mrr_empty_bag():
    assert MRR("1", "2")([]) == 0.0


def test_mrr_null_row_skips(caplog):
    mrr = MRR("1", "2")
    assert mrr([("q", 1.0, 1.0), None]) is None
    assert "bad data" in caplog.text


def test_mrr_short_row_skips(caplog):
    mrr = MRR("1", "2")
    assert mrr([("q", 1.0, 1.0), ("q", 2.0)]) is None
    assert "bad data" in caplog.text


def test_mrr_string_row_skips(caplog):
    assert MRR("1", "2")(["abc"]) is None
    assert "bad data" in caplog.text


def test_mrr_bad_number_skips(caplog):
    mrr = MRR("1", "2")
    assert mrr([("q", 1.0, 1.0), ("q", "wombat", 0.0)]) is None
    assert "bad data" in caplog.text


def test_mrr_infinite_skips(caplog):
    mrr = MRR("1", "2")
    assert mrr([("q", np.inf, 1.0)]) is None
    assert "bad data" in caplog.text


def test_mrr_missing_dropped():
    "rows with missing values are dropped, but the group is evaluated"
    mrr = MRR("1", "2")
    rows = [("q", 3.0, None), ("q", np.nan, 1.0), ("q", 2.0, 0.0), ("q", 1.0, 1.0)]
    assert mrr(rows) == approx(0.5)


def test_mrr_string_numbers():
    mrr = MRR("1", "2")
    assert mrr([("q", "2", "0"), ("q", "1", "1")]) == approx(0.5)


def test_mrr_data_frame():
    df = pd.DataFrame.from_records(Q4, columns=["query", "score", "clicked"])
    assert MRR(1, 2)(df) == approx(4 / 9)


def test_mrr_arrow_table():
    tbl = pa.table(
        {
            "query": [q for (q, _p, _t) in Q1],
            "score": [float(p) for (_q, p, _t) in Q1],
            "clicked": [t for (_q, _p, t) in Q1],
        }
    )
    assert MRR(1, 2)(tbl) == approx(0.25)


def test_mrr_generator():
    assert MRR(1, 2)(row for row in Q5) == approx(1 / 3)


def test_mrr_group_too_large(caplog):
    mrr = MRR("1", "2", settings=RankevalSettings(max_group_size=2))
    assert mrr(Q3) == approx(1.0)
    assert mrr(Q1) is None
    assert "bad data" in caplog.text


def test_mrr_generator_too_large():
    mrr = MRR("1", "2", settings=RankevalSettings(max_group_size=2))
    assert mrr(row for row in Q1) is None


def test_mrr_unexpected_error():
    mrr = MRR("1", "2")
    with raises(EvaluationError, match="row 1") as exc:
        mrr([("q", 1.0, 1.0), 42])
    assert exc.value.function == "MRR"
    assert exc.value.row == 1
    assert isinstance(exc.value.__cause__, TypeError)


def test_mrr_summarize():
    mrr = MRR("1", "2")
    results = [mrr(Q1), mrr(Q3), mrr(None)]
    summary = mrr.summarize(results)
    assert summary["count"] == 2
    assert summary["mean"] == approx(0.625)


def test_mrr_summarize_arrow():
    mrr = MRR("1", "2")
    summary = mrr.summarize(pa.array([0.5, None, 1.0]))
    assert summary == {"mean": approx(0.75), "count": 2}


def test_mrr_summarize_empty():
    assert MRR("1", "2").summarize([]) == {"mean": 0.0, "count": 0}
