"""SQLAlchemy execution handle.

Runs rendered text through :func:`sqlalchemy.text` on a SQLAlchemy
``Connection`` or ``Session``.  The rendered text must be valid SQL for the
connected database; jpqlkit does not translate it.

Install the optional dependency before using this module::

    pip install "jpqlkit[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from jpqlkit import QueryBuilder, TemporalType
    from jpqlkit.execution.sqlalchemy import SQLAlchemyExecutionHandle

    engine = create_engine("sqlite:///pets.db")
    with engine.connect() as conn:
        qb = (
            QueryBuilder.start()
            .select("name")
            .from_("cat")
            .where("born >= :since")
            .set_parameter("since", date(2020, 1, 1), TemporalType.DATE)
        )
        rows = qb.bind(SQLAlchemyExecutionHandle(conn)).all()
"""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Date, DateTime, Time, bindparam, text
from sqlalchemy.sql.elements import TextClause

from jpqlkit.schema.parameters import TemporalType

logger = logging.getLogger(__name__)

_TEMPORAL_SQL_TYPES = {
    TemporalType.DATE: Date,
    TemporalType.TIMESTAMP: DateTime,
    TemporalType.TIME: Time,
}


class SQLAlchemyQuery:
    """A :class:`~jpqlkit.execution.base.CompiledQuery` over a text clause.

    Args:
        connection: SQLAlchemy ``Connection`` or ``Session`` used to execute.
        clause: The compiled text clause.
        result_type: Optional callable built from each row's mapping.
    """

    def __init__(
        self,
        connection: Any,
        clause: TextClause,
        result_type: type | None = None,
    ) -> None:
        self._connection = connection
        self._clause = clause
        self._result_type = result_type

    @property
    def clause(self) -> TextClause:
        return self._clause

    def set_parameter(
        self,
        name: str,
        value: Any,
        temporal_type: TemporalType | None = None,
    ) -> SQLAlchemyQuery:
        """Bind ``value`` to ``:name``; temporal values get a typed bind."""
        if temporal_type is None:
            param = bindparam(name, value=value)
        else:
            param = bindparam(name, value=value, type_=_TEMPORAL_SQL_TYPES[TemporalType(temporal_type)])
        self._clause = self._clause.bindparams(param)
        return self

    def execute(self) -> Any:
        """Execute the query and return the SQLAlchemy result."""
        logger.debug("Executing: %s", self._clause.text)
        return self._connection.execute(self._clause)

    def all(self) -> list[Any]:
        """Execute and return every row, converted to ``result_type`` if set."""
        result = self.execute()
        if self._result_type is None:
            return list(result)
        return [self._result_type(**row._mapping) for row in result]


class SQLAlchemyExecutionHandle:
    """An :class:`~jpqlkit.execution.base.ExecutionHandle` for SQLAlchemy.

    Args:
        connection: SQLAlchemy ``Connection`` or ``Session``.
    """

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def create_query(self, query: str, result_type: type | None = None) -> SQLAlchemyQuery:
        return SQLAlchemyQuery(self._connection, text(query), result_type)
