"""Shared pytest fixtures for jpqlkit tests."""
from __future__ import annotations

from datetime import date, datetime

import pytest

from jpqlkit import QueryBuilder, TemporalType
from tests.fixtures import RecordingHandle

START_DATE = date(1970, 1, 1)
END_DATE = datetime(2012, 6, 30, 18, 45)


@pytest.fixture
def start_date() -> date:
    return START_DATE


@pytest.fixture
def end_date() -> datetime:
    return END_DATE


@pytest.fixture
def cat_builder() -> QueryBuilder:
    """Owner/cat aggregation query using every top-level clause."""
    builder = QueryBuilder.start()
    return (
        builder.select("cat.name")
        .select("cat.color")
        .select("sum(cat.age)")
        .from_("Cat cat")
        .from_("inner join cat.owner owner")
        .where("owner.lastName = :lastName")
        .set_parameter("lastName", "Smith")
        .where(builder.disjunction("cat.sex = 'male'", "cat.sex = 'female'"))
        .where(
            builder.conjunction(
                ["owner.birthDate >= :startDate", "owner.birthDate <= :endDate"]
            )
        )
        .set_parameter("startDate", START_DATE, TemporalType.DATE)
        .set_parameter("endDate", END_DATE, TemporalType.TIMESTAMP)
        .group_by("cat.name")
        .group_by("cat.color")
        .having("sum(cat.age) > 0")
        .order_by("cat.name")
        .order_by("cat.color")
    )


@pytest.fixture
def handle() -> RecordingHandle:
    return RecordingHandle()
