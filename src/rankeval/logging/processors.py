# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
rankeval logging processors and converters.
"""

from datetime import datetime
from typing import Any

import structlog
from structlog.typing import EventDict


def remove_internal(logger: Any, method: str, event_dict: EventDict) -> EventDict:
    """
    Filter out “internal” attrs (beginning with ``_``) for console logging.
    """

    to_del = [k for k in event_dict.keys() if k.startswith("_")]
    for k in to_del:
        del event_dict[k]

    return event_dict


def format_timestamp(logger: Any, method: str, event_dict: EventDict) -> EventDict:
    """
    Reformat UNIX timestamps.
    """

    if "timestamp" in event_dict:
        stamp = datetime.fromtimestamp(event_dict["timestamp"])
        event_dict = dict(event_dict)
        event_dict["timestamp"] = stamp.isoformat(timespec="seconds")
        return event_dict
    else:
        return event_dict


def log_warning(message, category, filename, lineno, file=None, line=None):
    """
    Show a Python warning as a structured WARNING event on the
    ``rankeval.warnings`` logger (installed by
    :meth:`~rankeval.logging.LoggingConfig.apply`).
    """
    log = structlog.stdlib.get_logger("rankeval.warnings")
    log.warning(str(message), category=category.__name__, source=f"{filename}:{lineno}")
