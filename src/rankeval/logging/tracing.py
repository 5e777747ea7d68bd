# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Extended logger providing TRACE support.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Literal

import structlog
from structlog.stdlib import BoundLogger

from ._proxy import get_logger

__trace_debug = os.environ.get("RANKEVAL_TRACE", "no").lower() == "debug"
# RANKEVAL_TRACE=debug enables tracing without a logging configuration
_tracing_active: bool | Literal["debug"] = __trace_debug


def tracing_active() -> bool:
    """
    Query whether tracing is active.
    """
    return bool(_tracing_active)


def activate_tracing(active: bool | Literal["debug"] = True) -> None:
    """
    Mark tracing as active (or inactive).

    Global tracing state is just used to short-cut tracing.  This method should
    only be called from :class:`~rankeval.logging.LoggingConfig` (and tests).

    Args:
        active:
            The global tracing state.  If ``"debug"``, trace messages are
            emitted at DEBUG level.
    """
    global _tracing_active
    _tracing_active = active


def trace(logger: BoundLogger, *args: Any, **kwargs: Any):
    """
    Emit a trace-level message, if rankeval tracing is enabled.  Trace-level
    messages are more fine-grained than debug-level messages, and you usually
    don't want them.

    This function does not work on the lazy proxies returned by
    :func:`get_logger` and similar; it only works on bound loggers.
    """
    if _tracing_active == "debug":
        logger.debug(*args, **kwargs)
    elif _tracing_active:
        meth = getattr(logger, "trace", None)
        if meth is not None:
            meth(*args, **kwargs)


def get_tracer(logger: str | BoundLogger, **initial_values: Any) -> Tracer:
    """
    Get a tracer for efficient low-level tracing of computations.  When
    tracing is inactive, the returned tracer discards all events without
    binding anything.
    """
    if not _tracing_active:
        return Tracer()

    if isinstance(logger, str):
        logger = get_logger(logger)
    return ActiveTracer(logger.bind(**initial_values))


class Tracer:
    """
    Logger-like thing that is only for TRACE-level events.  The base class is
    the inactive tracer, and ignores everything.

    .. note::

        Don't create instances of this class directly; use
        :func:`~rankeval.logging.get_tracer` to create a tracer.
    """

    def add_bindings(self, **new_values: Any) -> None:
        """
        Bind new data in the keys.

        .. note::

            Unlike :meth:`structlog.Logger.bind`, this method is **imperative**:
            it updates the tracer in-place instead of returning a new tracer.
        """
        pass

    def trace(self, event, *args, **bindings):
        """
        Emit a TRACE-level event.
        """
        pass


class ActiveTracer(Tracer):
    """
    Active tracer that actually sends trace messages.
    """

    _logger: BoundLogger

    def __init__(self, logger: BoundLogger):
        self._logger = logger

    def add_bindings(self, **new_values: Any) -> None:
        self._logger = self._logger.bind(**new_values)

    def trace(self, event, *args, **bindings):
        trace(self._logger, event, *args, **bindings)


class TracingLogger(structlog.stdlib.BoundLogger):
    """
    Class for rankeval loggers with trace-level logging support.

    Code should not directly use the tracing logger; it should use the
    :func:`trace` function that intelligently checks the logger.
    """

    def bind(self, **new_values: Any) -> TracingLogger:
        return super().bind(**new_values)  # type: ignore[return-value]

    def new(self, **new_values: Any) -> TracingLogger:
        return super().new(**new_values)  # type: ignore[return-value]

    def trace(self, event: str | None, *args: Any, **kw: Any):
        if args:
            kw["positional_args"] = args
        try:
            args, kwargs = self._process_event("trace", event, kw)  # type: ignore
        except structlog.DropEvent:
            return None
        self._logger.debug(*args, **kwargs)


def filtering_logger(level: int):
    """
    Get a wrapper class that filters below ``level``, with a no-op ``trace``
    method unless the level admits TRACE events.
    """

    if level < logging.DEBUG:
        return TracingLogger

    def trace(self, event: str | None, *args: Any, **kw: Any):
        pass

    base = structlog.make_filtering_bound_logger(level)
    return type(f"RankevalLoggerFilter{level}", (base,), {"trace": trace})
