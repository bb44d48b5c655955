#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Graphs of the DNS response check (PNP4Nagios template check_dns)"""

from bind9_graphing.graphing import (
    CheckGraphSet,
    CheckType,
    GraphPanel,
    SeriesBinding,
    ValueFormat,
)

# fmt: off
_PACKETS = ValueFormat(precision=0)
_BYTES = ValueFormat(precision=1, magnitude_suffix=True, unit_from_context=True)

graph_dns_response_time = GraphPanel(
    title="Response Time for $hostname / $servicedesc",
    vertical_label="Time",
    series=[
        SeriesBinding(
            name="time",
            index=1,
            color="#ff00ff",
            label="Time",
            value_format=ValueFormat(precision=3, unit_from_context=True),
        ),
    ],
)

graph_dns_packets = GraphPanel(
    title="DNS Packets for $hostname / $servicedesc",
    vertical_label="Packets",
    series=[
        SeriesBinding(name="udp_queries", index=2, color="#008800", label="UDP Queries  ", value_format=_PACKETS),
        SeriesBinding(name="udp_responses", index=3, color="#00ff00", label="UDP Responses", value_format=_PACKETS),
        SeriesBinding(name="tcp_queries", index=4, color="#000088", label="TCP Queries  ", value_format=_PACKETS),
        SeriesBinding(name="tcp_responses", index=5, color="#0000ff", label="TCP Responses", value_format=_PACKETS),
    ],
)

graph_dns_bytes = GraphPanel(
    title="DNS Bytes for $hostname / $servicedesc",
    vertical_label="Bytes",
    series=[
        SeriesBinding(name="udp_sent", index=6, color="#008800", label="UDP Sent", value_format=_BYTES),
        SeriesBinding(name="udp_recv", index=7, color="#00ff00", label="UDP Recv", value_format=_BYTES),
        SeriesBinding(name="tcp_sent", index=8, color="#000088", label="TCP Sent", value_format=_BYTES),
        SeriesBinding(name="tcp_recv", index=9, color="#0000ff", label="TCP Recv", value_format=_BYTES),
    ],
)
# fmt: on

graph_set_dns = CheckGraphSet(
    check_type=CheckType.DNS_RESPONSE,
    template_name="check_dns",
    panels=[
        graph_dns_response_time,
        graph_dns_packets,
        graph_dns_bytes,
    ],
)
