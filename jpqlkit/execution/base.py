"""Protocol interfaces for the query execution boundary.

jpqlkit only renders text and feeds parameters; compiling and running the
query belongs to an execution handle supplied by the caller (an ORM
session, a DB-API wrapper, a test fake).  Any object with the methods below
will do.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from jpqlkit.schema.parameters import TemporalType


@runtime_checkable
class CompiledQuery(Protocol):
    """An executable query produced by an :class:`ExecutionHandle`.

    Two binding forms are used: ``set_parameter(name, value)`` for plain
    values and ``set_parameter(name, value, temporal_type)`` for date/time
    values that need an explicit binding kind.
    """

    def set_parameter(
        self,
        name: str,
        value: Any,
        temporal_type: TemporalType = ...,
    ) -> Any:
        """Bind ``value`` to the named placeholder ``name``."""
        ...


@runtime_checkable
class ExecutionHandle(Protocol):
    """Compiles rendered query text into a :class:`CompiledQuery`."""

    def create_query(self, query: str, result_type: type = ...) -> CompiledQuery:
        """Compile ``query``, optionally typed to ``result_type`` rows.

        Args:
            query: The rendered query text.
            result_type: Expected element type of the results.  Omitted
                when the caller did not ask for a typed query.

        Returns:
            A compiled query ready for parameter binding.
        """
        ...
