#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Graphs of the BIND 9 statistics check (PNP4Nagios template check_bind9)

The data source positions follow the performance data order of the check:

     1-8   query results (success ... dropped), rates
     9-12  server status (cpus, workers, zones, debug level)
    13-16  zone transfers, SOA queries and UDP clients running
    17-18  UDP client soft and hard limit
    19     TCP clients running
    20     TCP client hard limit
"""

from bind9_graphing.graphing import (
    CheckGraphSet,
    CheckType,
    GraphPanel,
    SeriesBinding,
    ValueFormat,
)

# fmt: off
_QUERY_RATE = ValueFormat(precision=1, magnitude_suffix=True, unit="q/s")
_COUNT = ValueFormat(precision=0, magnitude_suffix=True)
_COUNT_PLAIN = ValueFormat(precision=0)
_CONNECTIONS = ValueFormat(precision=1, magnitude_suffix=True)

graph_bind_statistics = GraphPanel(
    title="BIND Statistics for $hostname / $servicedesc",
    vertical_label="Queries/s",
    series=[
        SeriesBinding(name="success", index=1, color="#00ff00", label="Successful", value_format=_QUERY_RATE),
        SeriesBinding(name="recursion", index=5, color="#00ffff", label="Recursion ", value_format=_QUERY_RATE),
        SeriesBinding(name="referral", index=2, color="#0000ff", label="Referral  ", value_format=_QUERY_RATE),
        SeriesBinding(name="nxdomain", index=4, color="#ff6f00", label="No Domain ", value_format=_QUERY_RATE),
        SeriesBinding(name="nxrrset", index=3, color="#ffff00", label="No Record ", value_format=_QUERY_RATE),
        SeriesBinding(name="failure", index=6, color="#ff0000", label="Failure   ", value_format=_QUERY_RATE),
        SeriesBinding(name="duplicate", index=7, color="#aa0000", label="Duplicate ", value_format=_QUERY_RATE),
        SeriesBinding(name="dropped", index=8, color="#440000", label="Dropped   ", value_format=_QUERY_RATE),
    ],
)

# The debug level is a plain number, no k/M prefix for it.
graph_bind_status = GraphPanel(
    title="BIND Status for $hostname / $servicedesc",
    series=[
        SeriesBinding(name="cpus", index=9, color="#000088", label="CPUs   ", value_format=_COUNT),
        SeriesBinding(name="workers", index=10, color="#0000ff", label="Workers", value_format=_COUNT),
        SeriesBinding(name="zones", index=11, color="#00ff00", label="Zones  ", value_format=_COUNT),
        SeriesBinding(name="debug", index=12, color="#ff0000", label="Debug  ", value_format=_COUNT_PLAIN),
    ],
)

graph_bind_connections = GraphPanel(
    title="BIND Connections for $hostname / $servicedesc",
    vertical_label="Connections",
    series=[
        SeriesBinding(name="xfers_running", index=13, color="#ff0000", label="Xfers Running ", value_format=_CONNECTIONS),
        SeriesBinding(name="xfers_deferred", index=14, color="#880000", label="Xfers Deferred", value_format=_CONNECTIONS),
        SeriesBinding(name="soa_running", index=15, color="#ffff00", label="SOA Running   ", value_format=_CONNECTIONS),
        SeriesBinding(name="udp_running", index=16, color="#00ff00", label="UDP Running   ", value_format=_CONNECTIONS),
        SeriesBinding(name="tcp_running", index=19, color="#0000ff", label="TCP Running   ", value_format=_CONNECTIONS),
    ],
)

graph_bind_limits = GraphPanel(
    title="BIND Limits for $hostname / $servicedesc",
    vertical_label="Connections",
    series=[
        SeriesBinding(name="udp_soft_limit", index=17, color="#446600", label="UDP Soft Limit", value_format=_COUNT),
        SeriesBinding(name="udp_hard_limit", index=18, color="#44aa00", label="UDP Hard Limit", value_format=_COUNT),
        SeriesBinding(name="tcp_hard_limit", index=20, color="#4400aa", label="TCP Hard Limit", value_format=_COUNT),
    ],
)
# fmt: on

graph_set_bind9 = CheckGraphSet(
    check_type=CheckType.STATISTICS,
    template_name="check_bind9",
    panels=[
        graph_bind_statistics,
        graph_bind_status,
        graph_bind_connections,
        graph_bind_limits,
    ],
)
