#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Graph descriptor tables for BIND 9 and DNS checks

Maps the data sources of a check's PNP4Nagios RRD to rrdtool graph
definitions, lines and legend statistics. The tables are static; the only
runtime step is the expansion of host, service and unit placeholders done
by resolve_panels().
"""

__version__ = "1.0.0"

from bind9_graphing.exceptions import ConfigurationError
from bind9_graphing.graphing import CheckType
from bind9_graphing.rendering import (
    GraphContext,
    RenderedPanel,
    resolve_panels,
    rrdtool_arguments,
)

__all__ = [
    "CheckType",
    "ConfigurationError",
    "GraphContext",
    "RenderedPanel",
    "resolve_panels",
    "rrdtool_arguments",
]
