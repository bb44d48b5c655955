#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Small helpers for PNP4Nagios style perfdata paths"""

from pathlib import Path


def pnp_cleanup(s: str) -> str:
    """Quote a string (host name or service name) in PNP4Nagios format

    >>> pnp_cleanup("DNS Server: ns1/int")
    'DNS_Server__ns1_int'
    """
    return s.replace(" ", "_").replace(":", "_").replace("/", "_").replace("\\", "_")


def pnp_rrd_path(perfdata_dir: Path, hostname: str, service_description: str) -> Path:
    return perfdata_dir / pnp_cleanup(hostname) / f"{pnp_cleanup(service_description)}.rrd"
