#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from pathlib import Path

import pytest

from bind9_graphing.config import (
    DEFAULT_PERFDATA_DIR,
    GraphingConfig,
    load_config,
    save_config,
)
from bind9_graphing.exceptions import ConfigurationError
from bind9_graphing.graphing import CheckType


def test_defaults() -> None:
    config = GraphingConfig()
    assert config.perfdata_dir == DEFAULT_PERFDATA_DIR
    assert config.check_command_aliases == {
        "check_bind9": CheckType.STATISTICS,
        "check_dns": CheckType.DNS_RESPONSE,
    }
    assert not config.default_units


@pytest.mark.parametrize(
    "name, expected",
    [
        ("check_bind9", CheckType.STATISTICS),
        ("check_dns", CheckType.DNS_RESPONSE),
        ("statistics", "statistics"),
        ("check_unknown", "check_unknown"),
    ],
)
def test_resolve_check_type(name: str, expected: str) -> None:
    assert GraphingConfig().resolve_check_type(name) == expected


def test_load_missing_config(tmp_path: Path) -> None:
    assert load_config(tmp_path / "graphing.json") == GraphingConfig()


def test_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "etc" / "graphing.json"
    config = GraphingConfig(
        perfdata_dir=Path("/omd/sites/heute/var/pnp4nagios/perfdata"),
        check_command_aliases={"check_nrpe_bind": CheckType.STATISTICS},
        default_units={1: "s", 6: "B"},
    )

    save_config(path, config)

    assert not path.with_suffix(".new").exists()
    assert load_config(path) == config


def test_load_partial_config(tmp_path: Path) -> None:
    path = tmp_path / "graphing.json"
    path.write_text('{"default_units": {"1": "ms"}}')

    config = load_config(path)

    assert config.default_units == {1: "ms"}
    assert config.perfdata_dir == DEFAULT_PERFDATA_DIR


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"check_command_aliases": {"check_bind9": "bind"}}',
        '{"default_units": {"one": "s"}}',
    ],
)
def test_load_invalid_config(tmp_path: Path, content: str) -> None:
    path = tmp_path / "graphing.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError, match="Invalid configuration file"):
        load_config(path)


def test_load_unreadable_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read configuration file"):
        load_config(tmp_path)
