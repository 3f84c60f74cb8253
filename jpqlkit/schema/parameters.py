"""Pydantic models for named query parameters.

A parameter is recorded as a :class:`ParameterEntry` when a builder's
``set_parameter`` is called and applied to a compiled query at bind time.
Date and time values may carry a :class:`TemporalType` telling the
execution handle how to bind them.
"""
from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class TemporalType(str, Enum):
    """How a date/time parameter value is bound."""

    DATE = "DATE"
    TIMESTAMP = "TIMESTAMP"
    TIME = "TIME"


class ParameterEntry(BaseModel):
    """A single named parameter declared on a builder.

    Attributes:
        name: Placeholder name, without the leading colon.
        value: Value to bind; any object the execution handle accepts.
        temporal_type: Binding kind for date/time values, or ``None`` for
            a plain binding.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    value: Any = None
    temporal_type: TemporalType | None = None

    @property
    def is_temporal(self) -> bool:
        return self.temporal_type is not None


class ParameterStore:
    """Ordered, append-only collection of parameter entries.

    A top-level builder owns one store and hands the same instance to every
    sub-query builder it spawns, so a parameter declared on any of them is
    applied whichever builder binds.  Names are not required to be unique.
    """

    def __init__(self) -> None:
        self._entries: list[ParameterEntry] = []

    def add(
        self,
        name: str,
        value: Any,
        temporal_type: TemporalType | None = None,
    ) -> ParameterEntry:
        entry = ParameterEntry(name=name, value=value, temporal_type=temporal_type)
        self._entries.append(entry)
        return entry

    def names(self) -> list[str]:
        return [e.name for e in self._entries]

    def __iter__(self) -> Iterator[ParameterEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ParameterStore({self.names()!r})"
