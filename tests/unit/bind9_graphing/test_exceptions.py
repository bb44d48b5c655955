#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import pytest

from bind9_graphing.exceptions import ConfigurationError, GraphingException


def test_configuration_error() -> None:
    with pytest.raises(GraphingException) as e:
        raise ConfigurationError("Unknown check type 'foo'")

    assert str(e.value) == "Unknown check type 'foo'"
    assert e.value.reason == "Unknown check type 'foo'"
    assert e.value.title() == "Invalid graph configuration"
    assert e.value.plain_title() == "Configuration error"


def test_general_exception_titles() -> None:
    exc = GraphingException("boom")
    assert (exc.title(), exc.plain_title()) == ("Error", "General error")
