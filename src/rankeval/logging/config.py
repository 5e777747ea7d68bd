# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Logging pipeline configuration for applications that evaluate with rankeval.
"""

from __future__ import annotations

import logging
import os
import re
import sys
import warnings
from pathlib import Path
from typing import Literal, TypeAlias

import structlog

from ._console import ConsoleHandler
from .processors import format_timestamp, log_warning, remove_internal
from .tracing import activate_tracing, filtering_logger

LVL_TRACE = 5
"Numeric level of TRACE events (below DEBUG)."

StreamMode: TypeAlias = Literal["simple", "json"]
FileFormat: TypeAlias = Literal["json", "logfmt", "kv"]

_PRE_CHAIN = [
    structlog.processors.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.MaybeTimeStamper(),
]


def basic_logging(level: int = logging.INFO) -> LoggingConfig:
    """
    Send rankeval (and other) log messages to standard error at ``level``.
    Batch jobs that just need to see skipped groups should call this once at
    startup.
    """
    cfg = LoggingConfig()
    cfg.level = level
    cfg.apply()
    return cfg


class LoggingConfig:
    """
    Configuration for rankeval logging.

    rankeval only emits messages through :mod:`structlog` and :mod:`logging`,
    so applications are free to configure those however they like; this class
    is a convenience for the common setup of a terminal stream (console text
    or JSON lines) plus an optional log file.

    The initial state is read from ``RANKEVAL_LOG_LEVEL``,
    ``RANKEVAL_LOG_FILE``, and ``RANKEVAL_LOG_FILE_LEVEL``.
    """

    level: int = logging.INFO
    stream: StreamMode = "simple"
    file: Path | None = None
    file_level: int | None = None
    file_format: FileFormat = "json"

    def __init__(self):
        if level := _env_level("RANKEVAL_LOG_LEVEL"):
            self.level = level
        if path := os.environ.get("RANKEVAL_LOG_FILE", None):
            self.file = Path(path)
        if level := _env_level("RANKEVAL_LOG_FILE_LEVEL"):
            self.file_level = level

    @property
    def effective_level(self) -> int:
        "The lowest level any destination accepts."
        if self.file is not None and self.file_level is not None:
            return min(self.level, self.file_level)
        return self.level

    def set_stream_mode(self, mode: StreamMode):
        """
        Choose how log messages are rendered on standard error: ``simple``
        console text, or one JSON object per line.
        """
        if mode not in ("simple", "json"):
            raise ValueError(f"unknown stream mode {mode!r}")
        self.stream = mode

    def set_verbose(self, verbose: bool | int = True):
        """
        Enable verbose logging.

        Args:
            verbose:
                ``True`` or ``1`` logs at ``DEBUG``; ``2`` or greater also
                logs TRACE events (tie-block details from the metrics).
        """
        if not isinstance(verbose, bool) and verbose > 1:
            self.level = LVL_TRACE
        elif verbose:
            self.level = logging.DEBUG
        else:
            self.level = logging.INFO

    def set_log_file(
        self, path: os.PathLike[str] | str, level: int | None = None, format: FileFormat = "json"
    ):
        """
        Also write log messages to a file (overwritten when applied).
        """
        self.file = Path(path)
        self.file_level = level
        self.file_format = format

    def apply(self):
        """
        Install this configuration in :mod:`structlog` and the root logger.
        """
        root = logging.getLogger()
        eff_level = self.effective_level

        structlog.configure(
            processors=_PRE_CHAIN + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            wrapper_class=filtering_logger(eff_level),
            logger_factory=structlog.stdlib.LoggerFactory(),
        )

        if self.stream == "json":
            term = logging.StreamHandler(sys.stderr)
            renderer = structlog.processors.JSONRenderer()
        else:
            term = ConsoleHandler()
            renderer = structlog.dev.ConsoleRenderer(colors=term.supports_color)
        term.setLevel(self.level)
        term.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[remove_internal, format_timestamp, renderer],
                foreign_pre_chain=_PRE_CHAIN,
            )
        )
        root.addHandler(term)

        if self.file is not None:
            root.addHandler(self._file_handler())

        root.setLevel(eff_level)
        if eff_level <= LVL_TRACE:
            activate_tracing(True)
        warnings.showwarning = log_warning

    def _file_handler(self) -> logging.Handler:
        assert self.file is not None
        match self.file_format:
            case "json":
                renderer = structlog.processors.JSONRenderer()
            case "logfmt":
                renderer = structlog.processors.LogfmtRenderer(key_order=["event", "timestamp"])
            case _:
                renderer = structlog.processors.KeyValueRenderer(key_order=["event", "timestamp"])

        handler = logging.FileHandler(self.file, mode="w")
        handler.setLevel(self.file_level if self.file_level is not None else self.level)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[remove_internal, structlog.processors.format_exc_info, renderer],
                foreign_pre_chain=_PRE_CHAIN,
            )
        )
        return handler


def _env_level(name: str) -> int | None:
    value = os.environ.get(name, None)
    if not value:
        return None

    value = value.strip().upper()
    if re.match(r"^\d+$", value):
        return int(value)
    elif value == "TRACE":
        return LVL_TRACE

    level = logging.getLevelNamesMapping().get(value, None)
    if level is None:
        warnings.warn(f"{name} set to invalid value {value}")
    return level
