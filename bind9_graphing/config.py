#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ValidationError

from bind9_graphing.exceptions import ConfigurationError
from bind9_graphing.graphing import CheckType
from bind9_graphing.i18n import _

logger = logging.getLogger("bind9_graphing.config")

DEFAULT_PERFDATA_DIR = Path("/usr/local/pnp4nagios/var/perfdata")


class GraphingConfig(BaseModel, frozen=True):
    perfdata_dir: Path = DEFAULT_PERFDATA_DIR
    # check command names as they appear in the monitoring core
    check_command_aliases: Mapping[str, CheckType] = {
        "check_bind9": CheckType.STATISTICS,
        "check_dns": CheckType.DNS_RESPONSE,
    }
    default_units: Mapping[int, str] = {}

    def resolve_check_type(self, name: str) -> CheckType | str:
        """Translate a check command alias, leave everything else untouched"""
        return self.check_command_aliases.get(name, name)


def save_config(path: Path, config: GraphingConfig) -> None:
    path.parent.mkdir(mode=0o770, exist_ok=True, parents=True)
    tmp_path = path.with_suffix(".new")
    tmp_path.write_text(config.model_dump_json())
    tmp_path.rename(path)


def load_config(path: Path) -> GraphingConfig:
    try:
        config = GraphingConfig.model_validate_json(path.read_text())
    except FileNotFoundError:
        logger.debug("No configuration at %s, using defaults", path)
        return GraphingConfig()
    except ValidationError as e:
        raise ConfigurationError(_("Invalid configuration file %s: %s") % (path, e)) from e
    except OSError as e:
        raise ConfigurationError(_("Cannot read configuration file %s: %s") % (path, e)) from e
    logger.debug("Loaded configuration from %s", path)
    return config
