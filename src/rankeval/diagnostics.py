# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Warning and error classes for rankeval.
"""

from __future__ import annotations


class DataError(Exception):
    """
    Error raised for detectable problems with input data, such as malformed
    rows or non-finite scores.  The rank functions catch this error and skip
    the offending group.

    Args:
        message:
            The error message.
        row:
            The index of the offending row within its group, if known.
    """

    row: int | None

    def __init__(self, message: str, *, row: int | None = None):
        super().__init__(message)
        self.row = row


class ConfigError(ValueError):
    """
    Invalid configuration for a rank function (unknown mode, unparsable
    numeric parameter, bad column index).
    """

    pass


class ConfigWarning(UserWarning):
    """
    Warning raised for detectable problems with configurations.
    """

    pass


class EvaluationError(RuntimeError):
    """
    Unexpected failure while evaluating a group.  This indicates a logic or
    environment problem rather than bad data, and is always raised from the
    underlying exception.

    Args:
        function:
            The label of the rank function that failed.
        row:
            The index of the row being processed, or ``None`` if the failure
            happened after the rows were read.
    """

    function: str
    row: int | None

    def __init__(self, function: str, row: int | None = None):
        self.function = function
        self.row = row
        if row is None:
            super().__init__(f"error in {function} while computing result")
        else:
            super().__init__(f"error in {function} while processing input row {row}")
