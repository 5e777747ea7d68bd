# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Logging and tracing support.
"""

from ._console import console
from ._proxy import get_logger
from .config import LoggingConfig, basic_logging
from .tracing import Tracer, get_tracer, trace

__all__ = [
    "LoggingConfig",
    "basic_logging",
    "get_logger",
    "get_tracer",
    "trace",
    "Tracer",
    "console",
]
