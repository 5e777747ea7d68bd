# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

import numpy as np
import pyarrow as pa
from pydantic import BaseModel, ValidationError

from rankeval.config import RankevalSettings, rankeval_config
from rankeval.diagnostics import ConfigError, DataError, EvaluationError
from rankeval.logging import get_logger

from ._rows import Bag

C = TypeVar("C", bound=BaseModel)
_log = get_logger(__name__)


class RankFunction(ABC, Generic[C]):
    """
    Base class for rank functions: callable objects that evaluate one group of
    rows at a time and return a single measurement.

    Configuration is supplied at construction time, as strings or numbers, and
    validated immediately; invalid configuration raises
    :class:`~rankeval.diagnostics.ConfigError`.  Each call returns either a
    float or ``None``, which means that the group could not be evaluated and
    should be skipped.  Groups with bad data (malformed rows, non-numeric
    values) are logged and skipped; any other failure is raised as an
    :class:`~rankeval.diagnostics.EvaluationError`.

    Rank functions keep no state between calls, so a single instance can be
    used concurrently.
    """

    config: C
    "The validated function configuration."
    settings: RankevalSettings
    "The package settings in effect when the function was created."

    def __init__(self, config: C, settings: RankevalSettings | None = None):
        self.config = config
        self.settings = settings if settings is not None else rankeval_config()

    @staticmethod
    def _validate_config(model: type[C], **kwargs: Any) -> C:
        try:
            return model.model_validate(kwargs)
        except ValidationError as e:
            raise ConfigError(f"invalid {model.__name__}: {e}") from e

    @property
    def label(self) -> str:
        """
        The function's default label in output.
        """
        return self.__class__.__name__

    def __str__(self):
        return f"RankFunction {self.label}"

    def __call__(self, *bags: Bag | None) -> float | None:
        try:
            result = self.evaluate(*bags)
        except DataError as e:
            _log.warning(
                "bad data in group, skipping", function=self.label, row=e.row, error=str(e)
            )
            return None
        except EvaluationError:
            raise
        except Exception as e:
            raise EvaluationError(self.label) from e

        if result is None or math.isnan(result):
            _log.debug("group has no defined result", function=self.label)
            return None
        return result

    @abstractmethod
    def evaluate(self, *bags: Bag | None) -> float | None:
        """
        Evaluate a group.  Implementations return ``None`` for groups that
        should be skipped and raise :class:`~rankeval.diagnostics.DataError`
        for bad data.
        """
        raise NotImplementedError()

    def summarize(
        self, values: list[float | None] | pa.Array | pa.ChunkedArray
    ) -> dict[str, float]:
        """
        Summarize per-group results by their mean, ignoring skipped groups.

        Returns:
            A dictionary with the ``mean`` and the ``count`` of evaluated
            groups.
        """
        if isinstance(values, (pa.Array, pa.ChunkedArray)):
            values = values.to_pylist()

        numeric = [float(v) for v in values if v is not None and not math.isnan(v)]
        if not numeric:
            return {"mean": 0.0, "count": 0}

        return {"mean": float(np.mean(numeric)), "count": len(numeric)}
