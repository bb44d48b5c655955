#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from bind9_graphing.i18n import _


# never used directly in the code. Just some wrapper to make all of our
# exceptions handleable with one call
class GraphingException(Exception):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

    def __str__(self) -> str:
        return self.reason

    def plain_title(self) -> str:
        return _("General error")

    def title(self) -> str:
        return _("Error")


# Raised for an unknown check type, a malformed graph context or an
# unreadable configuration file. No partial output is produced.
class ConfigurationError(GraphingException):
    def plain_title(self) -> str:
        return _("Configuration error")

    def title(self) -> str:
        return _("Invalid graph configuration")
