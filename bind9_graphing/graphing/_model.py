#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import re
import string
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Final

from bind9_graphing.color import normalize_color

_VNAME_RE: Final = re.compile(r"[A-Za-z0-9_-]{1,255}")
_TITLE_PLACEHOLDERS: Final = frozenset({"hostname", "servicedesc"})
_PRINTF_WIDTH: Final = 5


class CheckType(StrEnum):
    STATISTICS = "statistics"
    DNS_RESPONSE = "dns-response"


class Consolidation(StrEnum):
    AVERAGE = "AVERAGE"
    MIN = "MIN"
    MAX = "MAX"
    LAST = "LAST"


class DrawStyle(StrEnum):
    LINE = "LINE"
    LINE1 = "LINE1"
    LINE2 = "LINE2"
    LINE3 = "LINE3"
    AREA = "AREA"


class Statistic(Enum):
    """The summary values printed below the graph, in legend order"""

    LAST = ("LAST", "Cur")
    AVERAGE = ("AVERAGE", "Avg")
    MAX = ("MAX", "Max")

    def __init__(self, function: str, caption: str) -> None:
        self.function = function
        self.caption = caption


@dataclass(frozen=True, kw_only=True)
class ValueFormat:
    """How a statistic of one series is printed

    precision:          Number of decimal places
    magnitude_suffix:   Let rrdtool append an SI prefix (k, M, ...) via %s
    unit:               Static unit text appended to the number
    unit_from_context:  Append the unit hint the caller supplies for the series
    """

    precision: int
    magnitude_suffix: bool = False
    unit: str = ""
    unit_from_context: bool = False

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError(f"precision must not be negative: {self.precision}")
        if '"' in self.unit:
            raise ValueError(f"unit must not contain double quotes: {self.unit!r}")

    def printf(self, unit_hint: str = "") -> str:
        return "%%%d.%dlf%s%s%s" % (
            _PRINTF_WIDTH,
            self.precision,
            "%s" if self.magnitude_suffix else "",
            self.unit,
            unit_hint if self.unit_from_context else "",
        )


@dataclass(frozen=True, kw_only=True)
class SeriesBinding:
    name: str
    index: int
    color: str
    label: str
    value_format: ValueFormat
    consolidation: Consolidation = Consolidation.AVERAGE
    draw_style: DrawStyle = DrawStyle.LINE
    statistics: Sequence[Statistic] = field(
        default=(Statistic.LAST, Statistic.AVERAGE, Statistic.MAX)
    )

    def __post_init__(self) -> None:
        if not _VNAME_RE.fullmatch(self.name):
            raise ValueError(f"Invalid series name: {self.name!r}")
        if self.index < 1:
            raise ValueError(f"Data source index of {self.name!r} must be >= 1: {self.index}")
        if '"' in self.label:
            raise ValueError(f"Label of {self.name!r} must not contain double quotes")
        if not self.statistics:
            raise ValueError(f"{self.name!r} prints no statistics")
        object.__setattr__(self, "color", normalize_color(self.color))
        object.__setattr__(self, "statistics", tuple(self.statistics))


@dataclass(frozen=True, kw_only=True)
class GraphPanel:
    title: str
    series: Sequence[SeriesBinding]
    vertical_label: str | None = None
    lower_limit_zero: bool = True

    def __post_init__(self) -> None:
        if not self.series:
            raise ValueError(f"Graph {self.title!r} has no series")

        indices = [s.index for s in self.series]
        if len(set(indices)) != len(indices):
            raise ValueError(f"Data source indices in {self.title!r} are not unique: {indices}")

        names = [s.name for s in self.series]
        if len(set(names)) != len(names):
            raise ValueError(f"Series names in {self.title!r} are not unique: {names}")

        placeholders = list(string.Template.pattern.finditer(self.title))
        if any(m.group("invalid") is not None for m in placeholders):
            raise ValueError(f"Invalid placeholder in {self.title!r}")
        if unknown := {
            m.group("named") or m.group("braced")
            for m in placeholders
            if m.group("named") or m.group("braced")
        } - _TITLE_PLACEHOLDERS:
            raise ValueError(f"Unknown placeholders in {self.title!r}: {sorted(unknown)}")

        if self.vertical_label is not None and "'" in self.vertical_label:
            raise ValueError(
                f"Vertical label must not contain single quotes: {self.vertical_label!r}"
            )

        object.__setattr__(self, "series", tuple(self.series))

    @property
    def definition_order(self) -> Sequence[SeriesBinding]:
        """The series sorted by their position in the data store"""
        return sorted(self.series, key=lambda s: s.index)


@dataclass(frozen=True, kw_only=True)
class CheckGraphSet:
    check_type: CheckType
    template_name: str
    panels: Sequence[GraphPanel]

    def __post_init__(self) -> None:
        if not self.panels:
            raise ValueError(f"{self.check_type} defines no graphs")
        object.__setattr__(self, "panels", tuple(self.panels))

    @property
    def data_source_indices(self) -> Sequence[int]:
        return sorted({s.index for p in self.panels for s in p.series})
