# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Reading groups of rows into ranked lists.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence, TypeAlias

import numpy as np
import pandas as pd
import pyarrow as pa

from rankeval.data import RankedList
from rankeval.diagnostics import DataError, EvaluationError

Row: TypeAlias = Sequence[Any]
Bag: TypeAlias = Iterable[Row | None] | pd.DataFrame | pa.Table
"""
A group of rows.  Rows are positional: a sequence of values, a row of a
data frame, or a row of an Arrow table.
"""


def iter_rows(bag: Bag) -> Iterable[Row | None]:
    """
    Iterate over the rows of a bag as positional sequences.
    """
    if isinstance(bag, pd.DataFrame):
        return bag.itertuples(index=False, name=None)
    elif isinstance(bag, pa.Table):
        return zip(*[col.to_pylist() for col in bag.columns])
    else:
        return bag


def bag_size(bag: Bag) -> int | None:
    "Get the size of a bag, if it is known without iterating."
    if isinstance(bag, pa.Table):
        return bag.num_rows
    try:
        return len(bag)  # type: ignore
    except TypeError:
        return None


def is_missing(value: Any) -> bool:
    "Query whether a row value is missing (``None`` or a pandas NA value)."
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    return value is pd.NA or value is pd.NaT


def to_float(value: Any, what: str) -> float:
    """
    Coerce a row value to a finite float.

    Raises:
        DataError: if the value is not numeric or not finite.
    """
    try:
        x = float(value)
    except (TypeError, ValueError) as e:
        raise DataError(f"cannot convert {what} {value!r} to a number") from e
    if not math.isfinite(x):
        raise DataError(f"non-finite {what} {value!r}")
    return x


def read_ranking(
    bag: Bag,
    *,
    function: str,
    score_column: int,
    target_column: int | None = None,
    id_column: int | None = None,
    max_size: int,
) -> RankedList:
    """
    Read the rows of a bag into a ranked list.

    Rows missing the score, target, or id are dropped.  Other problems with the
    data raise :class:`DataError`; unexpected failures are wrapped in
    :class:`EvaluationError` with the index of the row.

    Args:
        bag:
            The rows to read.
        function:
            The label of the calling function, for error context.
        score_column:
            The column index of the ranking score.
        target_column:
            The column index of the target, or ``None`` for zero targets.
        id_column:
            The column index of the item identifier, or ``None`` for no ids.
        max_size:
            The maximum allowed number of rows.
    """
    cols = [c for c in (score_column, target_column, id_column) if c is not None]
    min_cols = 1 + max(cols)

    size = bag_size(bag)
    if size is not None and size > max_size:
        raise DataError(f"group has {size} rows, limit is {max_size}")

    ranking = RankedList()
    for i, row in enumerate(iter_rows(bag)):
        try:
            if i >= max_size:
                raise DataError(f"group has more than {max_size} rows")
            if isinstance(row, (str, bytes)):
                raise DataError(f"expected a row of values, got {type(row).__name__}")
            if row is None or len(row) < min_cols:
                raise DataError(f"expected row with at least {min_cols} columns, got {row!r}")

            required = [row[c] for c in cols]
            if any(is_missing(v) for v in required):
                continue

            score = to_float(row[score_column], "score")
            target = 0.0 if target_column is None else to_float(row[target_column], "target")
            iid = None if id_column is None else str(row[id_column])
            ranking.add(iid, score, target)
        except DataError as e:
            if e.row is None:
                e.row = i
            raise e
        except Exception as e:
            raise EvaluationError(function, i) from e

    return ranking.rank()
