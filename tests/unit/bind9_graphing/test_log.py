#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import logging

from bind9_graphing import log


def test_verbose_level_name() -> None:
    assert logging.getLevelName(log.VERBOSE) == "VERBOSE"
    assert logging.DEBUG < log.VERBOSE < logging.INFO


def test_package_logger_defaults() -> None:
    assert log.logger.name == "bind9_graphing"
    assert [type(h) for h in log.logger.handlers] == [logging.NullHandler]
    assert log.logger.level == logging.INFO


def test_clear_console_logging() -> None:
    log.logger.addHandler(logging.StreamHandler())
    log.logger.setLevel(logging.DEBUG)

    log.clear_console_logging()

    assert [type(h) for h in log.logger.handlers] == [logging.NullHandler]
    assert log.logger.level == logging.INFO


def test_module_loggers_are_children() -> None:
    assert logging.getLogger("bind9_graphing.rendering").parent is log.logger
