"""Fluent JPQL query builders.

``QueryBuilder`` is the top-level builder.  Every fluent method appends one
fragment to a :class:`~jpqlkit.compile.accumulator.ClauseAccumulator` and
returns the builder, so a query reads as a single chain::

    qb = (
        QueryBuilder.start()
        .select("cat.name")
        .from_("Cat cat")
        .from_("inner join cat.owner owner")
        .where("owner.lastName = :lastName")
        .set_parameter("lastName", "Smith")
        .order_by("cat.name")
    )
    qb.render()
    # select cat.name from Cat cat inner join cat.owner owner
    #   where owner.lastName = :lastName order by cat.name
    query = qb.bind(session)

Fragments are opaque text; nothing is parsed or validated.

Sub-queries
-----------
``sub_query_builder()`` returns a :class:`SubQueryBuilder` limited to
SELECT / FROM / WHERE.  It shares the parent's
:class:`~jpqlkit.schema.parameters.ParameterStore` by reference: parameters
set on the sub-query are bound when the parent binds, and binding the
sub-query also binds the parent's parameters.  Its wrapped form
``" (...) "`` can be spliced straight into a parent predicate::

    sub = qb.sub_query_builder().select("toy.id").from_("Toy toy")
    qb.where("cat.toy.id in" + sub.to_wrapped())

Builders are never frozen: rendering is side-effect free and binding may be
repeated after further changes.  Instances are not thread-safe.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from jpqlkit.compile import composer
from jpqlkit.compile.accumulator import ClauseAccumulator
from jpqlkit.compile.clause_builders import QUERY_CLAUSES, SUBQUERY_CLAUSES, render_clauses
from jpqlkit.execution.base import ExecutionHandle
from jpqlkit.execution.binding import compile_and_bind
from jpqlkit.schema.options import DEFAULT_OPTIONS, RenderOptions
from jpqlkit.schema.parameters import ParameterStore, TemporalType


class _BooleanComposition:
    """``conjunction`` / ``disjunction`` exposed as builder methods."""

    @staticmethod
    def conjunction(*predicates: str | Iterable[str]) -> str:
        """Return ``(p1 and p2 and ...)``; see :func:`~jpqlkit.compile.composer.conjunction`."""
        return composer.conjunction(*predicates)

    @staticmethod
    def disjunction(*predicates: str | Iterable[str]) -> str:
        """Return ``(p1 or p2 or ...)``; see :func:`~jpqlkit.compile.composer.disjunction`."""
        return composer.disjunction(*predicates)


class QueryBuilder(_BooleanComposition):
    """Assembles a complete query and binds its parameters.

    Args:
        distinct: Render ``select distinct`` instead of ``select``.
        options: Rendering options, inherited by spawned sub-queries.
    """

    def __init__(
        self,
        distinct: bool = False,
        options: RenderOptions | None = None,
    ) -> None:
        self._distinct = distinct
        self._options = options or DEFAULT_OPTIONS
        self._acc = ClauseAccumulator()

    @classmethod
    def start(cls, options: RenderOptions | None = None) -> QueryBuilder:
        """Return a new builder rendering ``select``."""
        return cls(distinct=False, options=options)

    @classmethod
    def start_distinct(cls, options: RenderOptions | None = None) -> QueryBuilder:
        """Return a new builder rendering ``select distinct``."""
        return cls(distinct=True, options=options)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def distinct(self) -> bool:
        return self._distinct

    @property
    def options(self) -> RenderOptions:
        return self._options

    @property
    def parameters(self) -> ParameterStore:
        return self._acc.params

    # ------------------------------------------------------------------
    # Fluent clause API
    # ------------------------------------------------------------------

    def select(self, fragment: str) -> QueryBuilder:
        self._acc.add("select", fragment)
        return self

    def from_(self, fragment: str) -> QueryBuilder:
        """Append a FROM fragment: a root (``Cat cat``) or a join clause."""
        self._acc.add("from_", fragment)
        return self

    def where(self, fragment: str) -> QueryBuilder:
        """Append a WHERE predicate; predicates are and-ed together."""
        self._acc.add("where", fragment)
        return self

    def group_by(self, fragment: str) -> QueryBuilder:
        self._acc.add("group_by", fragment)
        return self

    def having(self, fragment: str) -> QueryBuilder:
        """Append a HAVING predicate; predicates are and-ed together."""
        self._acc.add("having", fragment)
        return self

    def order_by(self, fragment: str) -> QueryBuilder:
        self._acc.add("order_by", fragment)
        return self

    def set_parameter(
        self,
        name: str,
        value: Any,
        temporal_type: TemporalType | None = None,
    ) -> QueryBuilder:
        """Record a named parameter to apply at bind time.

        Args:
            name: Placeholder name, without the leading colon.
            value: Value to bind.
            temporal_type: Binding kind for date/time values.
        """
        self._acc.params.add(name, value, temporal_type)
        return self

    # ------------------------------------------------------------------
    # Rendering and binding
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Return the query text built so far."""
        return render_clauses(self._acc, QUERY_CLAUSES, self._options, distinct=self._distinct)

    create_jpql = render

    def bind(self, handle: ExecutionHandle, result_type: type | None = None) -> Any:
        """Compile the rendered query with ``handle`` and apply all parameters.

        Args:
            handle: Execution handle providing ``create_query``.
            result_type: Optional result element type passed to the handle.

        Returns:
            The compiled query object returned by ``handle``, unchanged.
        """
        return compile_and_bind(handle, self.render(), self._acc.params, result_type)

    create_query = bind

    # ------------------------------------------------------------------
    # Sub-queries
    # ------------------------------------------------------------------

    def sub_query_builder(self) -> SubQueryBuilder:
        """Return a sub-query builder sharing this builder's parameters."""
        return SubQueryBuilder(self._acc.params, distinct=False, options=self._options)

    def distinct_sub_query_builder(self) -> SubQueryBuilder:
        """Return a ``select distinct`` sub-query builder sharing this builder's parameters."""
        return SubQueryBuilder(self._acc.params, distinct=True, options=self._options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"


class SubQueryBuilder(_BooleanComposition):
    """Builds a sub-query to be inlined in a parent predicate.

    Normally obtained from :meth:`QueryBuilder.sub_query_builder`.  Only
    SELECT, FROM and WHERE are available and distinctness is fixed at
    creation.

    Args:
        params: Parameter store shared with the parent builder.
        distinct: Render ``select distinct``.
        options: Rendering options, normally the parent's.
    """

    def __init__(
        self,
        params: ParameterStore,
        distinct: bool = False,
        options: RenderOptions | None = None,
    ) -> None:
        self._distinct = distinct
        self._options = options or DEFAULT_OPTIONS
        self._acc = ClauseAccumulator(params=params)

    @property
    def distinct(self) -> bool:
        return self._distinct

    @property
    def parameters(self) -> ParameterStore:
        return self._acc.params

    def select(self, fragment: str) -> SubQueryBuilder:
        self._acc.add("select", fragment)
        return self

    def from_(self, fragment: str) -> SubQueryBuilder:
        self._acc.add("from_", fragment)
        return self

    def where(self, fragment: str) -> SubQueryBuilder:
        self._acc.add("where", fragment)
        return self

    def set_parameter(
        self,
        name: str,
        value: Any,
        temporal_type: TemporalType | None = None,
    ) -> SubQueryBuilder:
        """Record a named parameter in the store shared with the parent."""
        self._acc.params.add(name, value, temporal_type)
        return self

    def to_plain(self) -> str:
        """Return the sub-query text without surrounding parentheses."""
        return render_clauses(self._acc, SUBQUERY_CLAUSES, self._options, distinct=self._distinct)

    def to_wrapped(self) -> str:
        """Return ``" (" + to_plain() + ") "`` for splicing after an operator."""
        return f" ({self.to_plain()}) "

    to_jpql = to_plain
    to_wrapped_jpql = to_wrapped

    def bind(self, handle: ExecutionHandle, result_type: type | None = None) -> Any:
        """Compile :meth:`to_plain` with ``handle`` and apply every shared parameter.

        Returns:
            The compiled query object returned by ``handle``, unchanged.
        """
        return compile_and_bind(handle, self.to_plain(), self._acc.params, result_type)

    create_query = bind

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_plain()!r})"
