# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


def rankeval_version() -> str:
    try:
        return version("rankeval")
    except PackageNotFoundError:  # pragma: nocover
        return "UNKNOWN"
