# This file is part of rankeval.
# Copyright (C) 2024-2025 rankeval contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import structlog
from numpy.random import Generator, default_rng

from hypothesis import settings
from pytest import fixture

from rankeval.config import reset_config

_log = structlog.stdlib.get_logger("rankeval.tests")
RNG_SEED = 42

structlog.configure(
    [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.MaybeTimeStamper(fmt="iso"),
        structlog.processors.KeyValueRenderer(key_order=["timestamp", "event"]),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


@fixture
def rng() -> Generator:
    return default_rng(RNG_SEED)


@fixture(autouse=True)
def clean_config():
    reset_config()
    yield
    reset_config()


@fixture(autouse=True)
def log_test(request):
    try:
        modname = request.module.__name__ if request.module else "<unknown>"
    except Exception:
        modname = "<unknown>"
    funcname = request.function.__name__ if request.function else "<unknown>"
    _log.info("running test %s:%s", modname, funcname)


settings.register_profile("default", deadline=1000)
settings.load_profile("default")
