#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from bind9_graphing.i18n import _

RGBColor = tuple[int, int, int]


def rgb_color_to_hex_color(red: int, green: int, blue: int) -> str:
    return f"#{red:02x}{green:02x}{blue:02x}"


def hex_color_to_rgb_color(color: str) -> RGBColor:
    """Convert '#112233' or '#123' to (17, 34, 51)"""
    full_color = color
    if len(full_color) == 4:
        # 3-digit hex codes means that both the values (RR, GG, BB) are the same for each component
        # for instance '#ff00cc' can also be written like '#f0c'
        full_color = "#" + full_color[1] * 2 + full_color[2] * 2 + full_color[3] * 2
    if len(full_color) != 7 or full_color[0] != "#":
        raise ValueError(_("Invalid color specification '%s'") % color)
    try:
        return int(full_color[1:3], 16), int(full_color[3:5], 16), int(full_color[5:7], 16)
    except ValueError:
        raise ValueError(_("Invalid color specification '%s'") % color)


def normalize_color(color: str) -> str:
    """Bring a color into the '#rrggbb' form rrdtool expects

    >>> normalize_color("#FF6F00")
    '#ff6f00'
    >>> normalize_color("#0f0")
    '#00ff00'
    """
    return rgb_color_to_hex_color(*hex_color_to_rgb_color(color))
