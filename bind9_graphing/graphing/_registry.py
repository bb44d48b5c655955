#!/usr/bin/env python3
# Copyright (C) 2025 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterator, Mapping

from bind9_graphing.exceptions import ConfigurationError
from bind9_graphing.i18n import _

from ._model import CheckGraphSet, CheckType


class GraphSetRegistry(Mapping[str, CheckGraphSet]):
    """Stores the graph descriptor table of each supported check type

    Lookups are done with the check type value, e.g. "statistics". Objects
    can be retrieved from the registry with a dictionary like syntax.
    """

    def __init__(self) -> None:
        super().__init__()
        self._entries: dict[str, CheckGraphSet] = {}

    def register(self, graph_set: CheckGraphSet) -> CheckGraphSet:
        if (name := str(graph_set.check_type)) in self._entries:
            raise ValueError(f"Graphs for {name!r} are already registered")
        self._entries[name] = graph_set
        return graph_set

    def unregister(self, check_type: CheckType | str) -> None:
        del self._entries[str(check_type)]

    def lookup(self, check_type: CheckType | str) -> CheckGraphSet:
        try:
            return self._entries[str(check_type)]
        except KeyError:
            raise ConfigurationError(
                _("Unknown check type '%s'. Available: %s")
                % (check_type, ", ".join(sorted(self._entries)))
            ) from None

    def __getitem__(self, key: str) -> CheckGraphSet:
        return self._entries.__getitem__(key)

    def __len__(self) -> int:
        return self._entries.__len__()

    def __iter__(self) -> Iterator[str]:
        return self._entries.__iter__()


graph_set_registry = GraphSetRegistry()
