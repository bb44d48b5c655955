#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Registers the graph descriptor tables of all supported check types"""

from bind9_graphing.graphing import graph_set_registry

from .bind9 import graph_set_bind9
from .dns import graph_set_dns

graph_set_registry.register(graph_set_bind9)
graph_set_registry.register(graph_set_dns)

__all__ = ["graph_set_bind9", "graph_set_dns"]
