#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Expand graph descriptor tables into rrdtool graph arguments

The tables in bind9_graphing.templates only describe *what* is drawn. This
module fills in the per service details the graphing add-on knows at request
time (host name, service description, RRD file, unit hints) and produces
the strings PNP4Nagios passes on to rrdtool:

    options:     --vertical-label 'Queries/s' -l0 --title "BIND Statistics for h1 / svc1"
    directives:  DEF:success=/path/svc1.rrd:1:AVERAGE
                 ...
                 LINE:success#00ff00:"Successful"
                 GPRINT:success:LAST:"<TAB>Cur %5.1lf%sq/s "
                 ...

The expansion is pure: the same context always yields the same output.
"""

import logging
import re
import shlex
import string
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Final, NamedTuple

from pydantic import BaseModel, field_validator, ValidationError

import bind9_graphing.templates  # noqa: F401 # registers the graph sets
from bind9_graphing.config import GraphingConfig
from bind9_graphing.exceptions import ConfigurationError
from bind9_graphing.graphing import CheckType, graph_set_registry, GraphPanel, SeriesBinding
from bind9_graphing.i18n import _
from bind9_graphing.log import VERBOSE
from bind9_graphing.misc import pnp_rrd_path

logger = logging.getLogger("bind9_graphing.rendering")

# rrdtool limits DS names to 19 characters
_DS_NAME_RE: Final = re.compile(r"[A-Za-z0-9_]{1,19}")


def usable_as_rrd_file(path: str) -> bool:
    """The path goes unquoted into a DEF directive

    >>> usable_as_rrd_file("/perf/ns1/BIND_9.rrd")
    True
    >>> usable_as_rrd_file("/my perf/ns1/BIND_9.rrd")
    False
    """
    return bool(path) and not any(c.isspace() or c in ":\"'\\" for c in path)


class GraphContext(BaseModel, frozen=True):
    hostname: str
    service_description: str
    rrd_file: str | None = None
    # unit hints and DS names are keyed by the 1-based data source position
    units: Mapping[int, str] = {}
    data_sources: Mapping[int, str] = {}

    @field_validator("hostname", "service_description")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("rrd_file")
    @classmethod
    def validate_rrd_file(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not usable_as_rrd_file(v):
            raise ValueError(f"not usable as RRD file name: {v!r}")
        return v

    @field_validator("units")
    @classmethod
    def validate_units(cls, v: Mapping[int, str]) -> Mapping[int, str]:
        if any('"' in unit for unit in v.values()):
            raise ValueError("unit hints must not contain double quotes")
        return v

    @field_validator("data_sources")
    @classmethod
    def validate_data_sources(cls, v: Mapping[int, str]) -> Mapping[int, str]:
        if invalid := sorted(name for name in v.values() if not _DS_NAME_RE.fullmatch(name)):
            raise ValueError(f"invalid data source names: {invalid}")
        return v


class RenderedPanel(NamedTuple):
    options: str
    directives: Sequence[str]


def _quote_title_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def render_options(panel: GraphPanel, context: GraphContext) -> str:
    title = string.Template(panel.title).substitute(
        hostname=_quote_title_value(context.hostname),
        servicedesc=_quote_title_value(context.service_description),
    )
    options = []
    if panel.vertical_label is not None:
        options.append(f"--vertical-label '{panel.vertical_label}'")
    if panel.lower_limit_zero:
        options.append("-l0")
    options.append(f'--title "{title}"')
    return " ".join(options)


def render_definition(series: SeriesBinding, rrd_file: str, data_source: str) -> str:
    return f"DEF:{series.name}={rrd_file}:{data_source}:{series.consolidation}"


def render_draw(series: SeriesBinding) -> str:
    return f'{series.draw_style}:{series.name}{series.color}:"{series.label}"'


def render_prints(series: SeriesBinding, unit_hint: str = "") -> list[str]:
    fmt = series.value_format.printf(unit_hint)
    prints = []
    for nr, statistic in enumerate(series.statistics, start=1):
        # The last statistic closes the legend line
        end = "\\n" if nr == len(series.statistics) else ""
        prints.append(
            f'GPRINT:{series.name}:{statistic.function}:"\t{statistic.caption} {fmt} {end}"'
        )
    return prints


def _check_data_sources(indices: Iterable[int], context: GraphContext) -> None:
    # Without explicit DS names every position is assumed to exist
    if not context.data_sources:
        return
    if missing := sorted(i for i in indices if i not in context.data_sources):
        raise ConfigurationError(
            _("The RRD of %s / %s has no data source at position %s")
            % (
                context.hostname,
                context.service_description,
                ", ".join(str(i) for i in missing),
            )
        )


def render_panel(panel: GraphPanel, context: GraphContext, rrd_file: str) -> RenderedPanel:
    if not usable_as_rrd_file(rrd_file):
        raise ConfigurationError(
            _("Cannot use '%s' as RRD file in a graph definition") % rrd_file
        )
    _check_data_sources((s.index for s in panel.series), context)

    directives = [
        render_definition(s, rrd_file, context.data_sources.get(s.index, str(s.index)))
        for s in panel.definition_order
    ]
    for series in panel.series:
        directives.append(render_draw(series))
        directives.extend(render_prints(series, context.units.get(series.index, "")))

    return RenderedPanel(render_options(panel, context), directives)


def parse_context(context: GraphContext | Mapping[str, Any]) -> GraphContext:
    if isinstance(context, GraphContext):
        return context
    try:
        return GraphContext.model_validate(context)
    except ValidationError as e:
        raise ConfigurationError(_("Invalid graph context: %s") % e) from e


def resolve_panels(
    check_type: CheckType | str,
    context: GraphContext | Mapping[str, Any],
    config: GraphingConfig | None = None,
) -> Sequence[RenderedPanel]:
    """Compute the options and directives of all graphs of a check

    check_type is either a CheckType, its value, or a check command alias
    known to the configuration (e.g. "check_bind9"). Raises
    ConfigurationError for an unknown check type or an invalid context.
    """
    if config is None:
        config = GraphingConfig()

    graph_set = graph_set_registry.lookup(config.resolve_check_type(str(check_type)))
    graph_context = parse_context(context)
    if config.default_units:
        graph_context = parse_context(
            {
                **graph_context.model_dump(),
                "units": {**config.default_units, **graph_context.units},
            }
        )

    rrd_file = graph_context.rrd_file or str(
        pnp_rrd_path(
            config.perfdata_dir, graph_context.hostname, graph_context.service_description
        )
    )
    logger.debug("Using RRD %s for %s", rrd_file, graph_set.template_name)

    panels = [render_panel(panel, graph_context, rrd_file) for panel in graph_set.panels]
    logger.log(
        VERBOSE,
        "Resolved %d graphs of %s for %s / %s",
        len(panels),
        graph_set.check_type,
        graph_context.hostname,
        graph_context.service_description,
    )
    return panels


def rrdtool_arguments(panel: RenderedPanel) -> list[str]:
    """Split a rendered panel into the argument list of "rrdtool graph"

    This is what a shell does with the concatenated template string."""
    return shlex.split(panel.options) + [
        arg for directive in panel.directives for arg in shlex.split(directive)
    ]
