#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Data model of the graph descriptor tables

A check type owns a set of graphs (panels). Each panel binds data sources of
the check's RRD, addressed by their 1-based position, to a line with a color,
a legend label and the statistics printed below the graph.
"""

from ._model import (
    CheckGraphSet,
    CheckType,
    Consolidation,
    DrawStyle,
    GraphPanel,
    SeriesBinding,
    Statistic,
    ValueFormat,
)
from ._registry import graph_set_registry, GraphSetRegistry

__all__ = [
    "CheckGraphSet",
    "CheckType",
    "Consolidation",
    "DrawStyle",
    "graph_set_registry",
    "GraphPanel",
    "GraphSetRegistry",
    "SeriesBinding",
    "Statistic",
    "ValueFormat",
]
