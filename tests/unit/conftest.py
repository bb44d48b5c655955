#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import os
from collections.abc import Iterator

import pytest

from bind9_graphing import log


@pytest.fixture(autouse=True, scope="session")
def fixture_umask() -> Iterator[None]:
    """Ensure the unit tests always use the same umask"""
    old_mask = os.umask(0o0007)
    try:
        yield
    finally:
        os.umask(old_mask)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Tests must not leak log handlers or levels into each other"""
    level = log.logger.level
    yield
    log.clear_console_logging()
    log.logger.setLevel(level)
