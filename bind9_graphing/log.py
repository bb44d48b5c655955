#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Logging of the graphing package

The package only emits records. Attaching handlers is up to the tool that
renders the graphs; until then everything goes to a NullHandler.
"""

import logging

# Resolved graphs are reported on this level, the individual RRD and
# directive details on DEBUG.
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

logger = logging.getLogger("bind9_graphing")


def clear_console_logging() -> None:
    logger.handlers[:] = []
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.INFO)


clear_console_logging()
