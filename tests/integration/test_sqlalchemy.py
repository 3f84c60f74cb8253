"""Integration tests: bind built queries onto SQLAlchemy (in-memory SQLite)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

sqlalchemy = pytest.importorskip("sqlalchemy")

from sqlalchemy import Date, Time, text  # noqa: E402

from jpqlkit import QueryBuilder, TemporalType  # noqa: E402
from jpqlkit.execution.sqlalchemy import SQLAlchemyExecutionHandle  # noqa: E402

_ROWS = [
    ("Tom", "grey", "male", "2015-03-01", 9),
    ("Felix", "black", "male", "2019-07-14", 5),
    ("Kitty", "white", "female", "2021-11-02", 3),
    ("Misty", "grey", "female", "2012-01-20", 12),
]


@dataclass
class CatRow:
    name: str
    age: int


@pytest.fixture
def connection():
    engine = sqlalchemy.create_engine("sqlite://")
    with engine.connect() as conn:
        conn.execute(
            text("CREATE TABLE cat (name TEXT, color TEXT, sex TEXT, born DATE, age INTEGER)")
        )
        for row in _ROWS:
            conn.execute(
                text("INSERT INTO cat VALUES (:name, :color, :sex, :born, :age)"),
                dict(zip(("name", "color", "sex", "born", "age"), row)),
            )
        yield conn
    engine.dispose()


def test_plain_and_temporal_parameters(connection):
    qb = QueryBuilder.start()
    (
        qb.select("cat.name")
        .from_("cat")
        .where(qb.disjunction("cat.color = :color", "cat.sex = :sex"))
        .where("cat.born >= :since")
        .set_parameter("color", "grey")
        .set_parameter("sex", "female")
        .set_parameter("since", date(2014, 1, 1), TemporalType.DATE)
        .order_by("cat.name")
    )
    rows = qb.bind(SQLAlchemyExecutionHandle(connection)).all()
    assert [r.name for r in rows] == ["Kitty", "Tom"]


def test_result_type_builds_instances(connection):
    qb = (
        QueryBuilder.start()
        .select("name")
        .select("age")
        .from_("cat")
        .where("age > :age")
        .set_parameter("age", 4)
        .order_by("age")
    )
    rows = qb.bind(SQLAlchemyExecutionHandle(connection), CatRow).all()
    assert rows == [CatRow("Felix", 5), CatRow("Tom", 9), CatRow("Misty", 12)]


def test_sub_query_parameters_reach_parent_query(connection):
    qb = QueryBuilder.start_distinct().select("c.color").from_("cat c")
    sub = (
        qb.sub_query_builder()
        .select("o.name")
        .from_("cat o")
        .where("o.age >= :minAge")
        .set_parameter("minAge", 9)
    )
    qb.where("c.name in" + sub.to_wrapped()).order_by("c.color")

    rows = qb.bind(SQLAlchemyExecutionHandle(connection)).all()
    assert [r.color for r in rows] == ["grey"]


def test_group_by_and_having(connection):
    qb = (
        QueryBuilder.start()
        .select("color")
        .select("count(*) AS n")
        .from_("cat")
        .group_by("color")
        .having("count(*) > :n")
        .set_parameter("n", 1)
    )
    rows = qb.bind(SQLAlchemyExecutionHandle(connection)).all()
    assert [(r.color, r.n) for r in rows] == [("grey", 2)]


def test_temporal_types_map_to_sql_types(connection):
    handle = SQLAlchemyExecutionHandle(connection)
    query = handle.create_query("SELECT :d AS d, :t AS t")
    query.set_parameter("d", date(2020, 1, 1), TemporalType.DATE)
    query.set_parameter("t", "12:00", TemporalType.TIME)
    binds = query.clause.compile().binds
    assert isinstance(binds["d"].type, Date)
    assert isinstance(binds["t"].type, Time)


def test_unknown_parameter_error_propagates(connection):
    qb = QueryBuilder.start().select("name").from_("cat").set_parameter("missing", 1)
    with pytest.raises(sqlalchemy.exc.ArgumentError):
        qb.bind(SQLAlchemyExecutionHandle(connection))
