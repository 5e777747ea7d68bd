# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import logging
import re
from typing import Any

import structlog
from structlog._config import BoundLoggerLazyProxy

_fallback_wrapper = structlog.make_filtering_bound_logger(logging.WARNING)


def get_logger(
    name: str, *, remove_private: bool = True, **init_vals: Any
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger.  This works like :func:`structlog.stdlib.get_logger`, except
    the returned proxy logger is quiet (only WARN and higher messages) if
    structlog has not been configured.  rankeval code should use this instead
    of obtaining loggers from Structlog directly.

    It also suppresses private module name components of the logger name, so
    e.g. ``rankeval.metrics.ranking._dcg`` becomes ``rankeval.metrics.ranking``.

    Params:
        name:
            The logger name.
        remove_private:
            Set to ``False`` to keep private module components of the logger
            name instead of removing them.
        init_vals:
            Initial values to bind into the logger when created.
    Returns:
        A lazy proxy logger, type-compatible with
        :class:`structlog.stdlib.BoundLogger`.
    """
    if remove_private:
        name = re.sub(r"\._.*", "", name)
    return RankevalProxyLogger(None, logger_factory_args=[name], initial_values=init_vals)  # type: ignore


class RankevalProxyLogger(BoundLoggerLazyProxy):
    """
    Lazy proxy logger for rankeval.  This is based on Structlog's lazy proxy,
    using a filtering logger by default when structlog is not configured.
    """

    def bind(self, **new_values: Any):
        if structlog.is_configured():
            self._wrapper_class = None
        else:
            self._wrapper_class = _fallback_wrapper

        return super().bind(**new_values)
