#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import pytest

from bind9_graphing.color import hex_color_to_rgb_color, normalize_color, rgb_color_to_hex_color


@pytest.mark.parametrize(
    "color, expected",
    [
        ("#112233", (17, 34, 51)),
        ("#123", (17, 34, 51)),
        ("#FF6F00", (255, 111, 0)),
    ],
)
def test_hex_color_to_rgb_color(color: str, expected: tuple[int, int, int]) -> None:
    assert hex_color_to_rgb_color(color) == expected


@pytest.mark.parametrize("color", ["", "#", "00ff00", "#00ff0", "#00ff000", "#gg0000", "red"])
def test_invalid_colors(color: str) -> None:
    with pytest.raises(ValueError, match="Invalid color specification"):
        hex_color_to_rgb_color(color)


def test_rgb_color_to_hex_color() -> None:
    assert rgb_color_to_hex_color(68, 0, 170) == "#4400aa"


def test_normalize_color() -> None:
    assert normalize_color("#AA0000") == "#aa0000"
    assert normalize_color("#f0c") == "#ff00cc"
