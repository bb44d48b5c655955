#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Stub for future i18n code on package level"""


# TODO: Switch to gettext once locale files are shipped with the package.
def _(string: str, /) -> str:
    """
    Positional-only argument to simplify additional linting of localized strings.
    """
    return string
