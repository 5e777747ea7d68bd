# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
rankeval general configuration
"""

from __future__ import annotations

import warnings
from pathlib import Path

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

from rankeval.diagnostics import ConfigWarning
from rankeval.logging import get_logger

__all__ = [
    "rankeval_config",
    "configure",
    "RankevalSettings",
    "DEFAULT_MAX_GROUP_SIZE",
]

DEFAULT_MAX_GROUP_SIZE = 10_000_000
"Default limit on the number of rows in a single evaluated group."

_log = get_logger(__name__)
_settings: RankevalSettings | None = None


def rankeval_config() -> RankevalSettings:
    """
    Get the rankeval configuration.

    If no configuration has been specified, returns a default settings object
    (which still honors environment variables).
    """
    if _settings is None:
        return RankevalSettings()
    else:
        return _settings


class RankevalSettings(BaseSettings, extra="allow"):
    """
    Definition of rankeval settings.

    Settings are loaded from the environment (``RANKEVAL_`` prefix) and, when
    :func:`configure` is called, from ``rankeval.toml`` and
    ``rankeval.local.toml``.
    """

    model_config = SettingsConfigDict(
        nested_model_default_partial_update=True,
        env_prefix="RANKEVAL_",
        env_nested_delimiter="__",
    )

    max_group_size: PositiveInt = DEFAULT_MAX_GROUP_SIZE
    """
    The maximum number of rows in a single group.  The rank functions buffer
    every row of a group before sorting; larger groups are treated as bad data
    and skipped.
    """

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


def configure(cfg_dir: Path | None = None, *, _set_global: bool = True) -> RankevalSettings:
    """
    Initialize rankeval configuration.

    rankeval does **not** automatically read configuration files; if this
    function is never called, then configuration will entirely be done through
    defaults and environment variables.

    Args:
        cfg_dir:
            The directory in which to look for configuration files.  If not
            provided, uses the current directory.

    Returns:
        The configured settings.
    """
    global _settings

    if _settings is not None and _set_global:
        warnings.warn("rankeval already configured, overwriting configuration", ConfigWarning)

    local_file = cfg_dir / "rankeval.local.toml" if cfg_dir is not None else "rankeval.local.toml"
    main_file = cfg_dir / "rankeval.toml" if cfg_dir is not None else "rankeval.toml"

    # subclass so we can specify the configuration location
    class RankevalFileSettings(RankevalSettings):
        @classmethod
        def settings_customise_sources(
            cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
        ):
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                file_secret_settings,
                TomlConfigSettingsSource(settings_cls, local_file),
                TomlConfigSettingsSource(settings_cls, main_file),
            )

    _log.debug("loading configuration", dir=str(cfg_dir) if cfg_dir else ".")
    settings = RankevalFileSettings()
    if _set_global:
        _settings = settings

    return settings


def reset_config() -> None:
    """
    Forget the global configuration, returning to defaults.  Mostly useful
    for tests.
    """
    global _settings
    _settings = None
