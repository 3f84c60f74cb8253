"""jpqlkit – fluent builder for JPQL-style query text.

Public API
----------
``QueryBuilder``
    Collects SELECT / FROM / WHERE / GROUP BY / HAVING / ORDER BY fragments
    and named parameters, renders the query, and binds the parameters onto
    a query compiled by a caller-supplied execution handle.

``SubQueryBuilder``
    Restricted builder for sub-queries that share the parent's parameters.

``conjunction`` / ``disjunction``
    Parenthesized ``and`` / ``or`` composition of predicate fragments.

Re-exported types
-----------------
``TemporalType``, ``ParameterEntry``, ``ParameterStore``, ``RenderOptions``,
``ExecutionHandle``, ``CompiledQuery`` and all error classes.

Example::

    from jpqlkit import QueryBuilder, TemporalType, disjunction

    qb = (
        QueryBuilder.start()
        .select("cat.name")
        .from_("Cat cat")
        .where(disjunction("cat.sex = 'male'", "cat.sex = 'female'"))
        .where("cat.birthDate >= :since")
        .set_parameter("since", since, TemporalType.DATE)
    )
    query = qb.bind(entity_manager)
"""

from __future__ import annotations

from jpqlkit.compile.builder import QueryBuilder, SubQueryBuilder
from jpqlkit.compile.composer import compose, conjunction, disjunction
from jpqlkit.errors import InvalidArgumentError, JpqlKitError
from jpqlkit.execution.base import CompiledQuery, ExecutionHandle
from jpqlkit.schema.options import RenderOptions
from jpqlkit.schema.parameters import ParameterEntry, ParameterStore, TemporalType

__all__ = [
    "CompiledQuery",
    "ExecutionHandle",
    "InvalidArgumentError",
    "JpqlKitError",
    "ParameterEntry",
    "ParameterStore",
    "QueryBuilder",
    "RenderOptions",
    "SubQueryBuilder",
    "TemporalType",
    "compose",
    "conjunction",
    "disjunction",
]
