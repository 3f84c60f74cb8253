"""Test fixtures: recording fakes for the execution handle boundary."""

from __future__ import annotations

from typing import Any


class RecordingQuery:
    """Compiled-query fake that records every ``set_parameter`` call.

    Each call is stored as the tuple of its positional arguments, so plain
    bindings record ``(name, value)`` and temporal ones
    ``(name, value, temporal_type)``.
    """

    def __init__(self, text: str, create_args: tuple[Any, ...] = ()) -> None:
        self.text = text
        self.create_args = create_args
        self.calls: list[tuple[Any, ...]] = []

    def set_parameter(self, *args: Any) -> RecordingQuery:
        self.calls.append(args)
        return self


class RecordingHandle:
    """Execution-handle fake returning a fresh :class:`RecordingQuery` per call."""

    def __init__(self) -> None:
        self.created: list[RecordingQuery] = []

    def create_query(self, query: str, *args: Any) -> RecordingQuery:
        compiled = RecordingQuery(query, args)
        self.created.append(compiled)
        return compiled


class FailingQuery:
    """Compiled-query fake rejecting one parameter name."""

    def __init__(self, bad_name: str) -> None:
        self.bad_name = bad_name

    def set_parameter(self, name: str, value: Any, *args: Any) -> None:
        if name == self.bad_name:
            raise KeyError(name)
