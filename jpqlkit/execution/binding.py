"""Two-step bind: compile rendered text, then apply stored parameters."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from jpqlkit.execution.base import CompiledQuery, ExecutionHandle
from jpqlkit.schema.parameters import ParameterEntry

logger = logging.getLogger(__name__)


def compile_query(
    handle: ExecutionHandle,
    text: str,
    result_type: type | None = None,
) -> Any:
    """Ask ``handle`` for a compiled query.

    The single-argument form of ``create_query`` is used when no
    ``result_type`` is given so handles with distinct typed/untyped entry
    points see the call they expect.
    """
    if result_type is None:
        return handle.create_query(text)
    return handle.create_query(text, result_type)


def bind_parameters(query: CompiledQuery, entries: Iterable[ParameterEntry]) -> CompiledQuery:
    """Apply ``entries`` to ``query`` in declaration order.

    Temporal entries go through the three-argument ``set_parameter`` form;
    all others through the plain form.  Errors raised by ``query``
    propagate unchanged.

    Returns:
        ``query`` itself.
    """
    for entry in entries:
        if entry.is_temporal:
            query.set_parameter(entry.name, entry.value, entry.temporal_type)
        else:
            query.set_parameter(entry.name, entry.value)
    return query


def compile_and_bind(
    handle: ExecutionHandle,
    text: str,
    entries: Iterable[ParameterEntry],
    result_type: type | None = None,
) -> Any:
    """Compile ``text`` with ``handle`` and bind ``entries`` onto the result."""
    entries = list(entries)
    logger.debug("Compiling query with %d parameter(s): %s", len(entries), text)
    query = compile_query(handle, text, result_type)
    bind_parameters(query, entries)
    return query
