"""Per-builder clause state.

A :class:`ClauseAccumulator` holds the ordered fragment lists for every
clause plus the parameter store.  Top-level and sub-query builders each own
one accumulator; a sub-query's accumulator is created around its parent's
:class:`~jpqlkit.schema.parameters.ParameterStore` so both see the same
parameters.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from jpqlkit.schema.parameters import ParameterStore


@dataclass
class ClauseAccumulator:
    """Mutable fragment lists for a single query.

    Attributes:
        params: Parameter store; possibly shared with a parent builder.
        select: SELECT fragments, rendered comma-separated.
        from_: FROM fragments (roots and join clauses), space-separated.
        where: WHERE fragments, and-ed together.
        group_by: GROUP BY fragments, comma-separated.
        having: HAVING fragments, and-ed together.
        order_by: ORDER BY fragments, comma-separated.
    """

    params: ParameterStore = field(default_factory=ParameterStore)
    select: list[str] = field(default_factory=list)
    from_: list[str] = field(default_factory=list)
    where: list[str] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)
    having: list[str] = field(default_factory=list)
    order_by: list[str] = field(default_factory=list)

    def fragments(self, clause: str) -> list[str]:
        return getattr(self, clause)

    def add(self, clause: str, fragment: str) -> None:
        self.fragments(clause).append(fragment)
