"""Integration tests for the XsdTime column type on an in-memory SQLite engine.

1) SQL NULL round-trips to Python None.
2) Values round-trip exactly, nanoseconds and offsets included.
3) The stored column holds canonical xs:time text.
4) Offset-less text written by other applications is completed on read.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest
import sqlalchemy as sa

from tests.fakes import RecordingResolver
from xstime.adapters.db.sa_types import XsdTime
from xstime.domain.value_objects import OffsetTimeOfDay, UtcOffset

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=redefined-outer-name

RESOLVED_OFFSET = UtcOffset(-240)


@pytest.fixture
def engine() -> Iterator[Engine]:
    """In-memory SQLite engine, disposed after the test."""
    test_engine = sa.create_engine("sqlite+pysqlite:///:memory:")
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def tmp_table(engine: Engine) -> Iterator[sa.Table]:
    """A table with a nullable XsdTime column."""
    metadata = sa.MetaData()
    table = sa.Table(
        "opening_hours",
        metadata,
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "opens_at",
            XsdTime(resolver=RecordingResolver(RESOLVED_OFFSET)),
            nullable=True,
        ),
    )
    metadata.create_all(engine)
    yield table
    metadata.drop_all(engine)


def test_null_roundtrip(engine: Engine, tmp_table: sa.Table) -> None:
    """NULL stays NULL and reads back as None."""
    with engine.begin() as conn:
        conn.execute(tmp_table.insert().values(id=1, opens_at=None))
        out = conn.execute(sa.select(tmp_table.c.opens_at)).scalar_one()
    assert out is None


@pytest.mark.parametrize(
    "value",
    [
        OffsetTimeOfDay.of(9, 0, 0),
        OffsetTimeOfDay.of(17, 30, 0, 123_456_789, UtcOffset(-300)),
        OffsetTimeOfDay.of(0, 0, 0, 1, UtcOffset(840)),
    ],
)
def test_value_roundtrip(
    engine: Engine, tmp_table: sa.Table, value: OffsetTimeOfDay
) -> None:
    """Values read back exactly as written."""
    with engine.begin() as conn:
        conn.execute(tmp_table.insert().values(id=1, opens_at=value))
        out = conn.execute(sa.select(tmp_table.c.opens_at)).scalar_one()
    assert out == value


def test_stored_text_is_canonical(engine: Engine, tmp_table: sa.Table) -> None:
    """The raw column holds strict canonical xs:time text."""
    value = OffsetTimeOfDay.of(7, 5, 0, 500_000_000, UtcOffset(60))
    with engine.begin() as conn:
        conn.execute(tmp_table.insert().values(id=1, opens_at=value))
        raw = conn.execute(sa.text("SELECT opens_at FROM opening_hours")).scalar_one()
    assert raw == "07:05:00.5+01:00"


def test_offsetless_text_completed_on_read(
    engine: Engine, tmp_table: sa.Table
) -> None:
    """Lenient, offset-less text gets the column resolver's offset."""
    with engine.begin() as conn:
        conn.execute(
            sa.text("INSERT INTO opening_hours (id, opens_at) VALUES (1, ' 8:15:00')")
        )
        out = conn.execute(sa.select(tmp_table.c.opens_at)).scalar_one()
    assert out == OffsetTimeOfDay.of(8, 15, 0, 0, RESOLVED_OFFSET)


def test_null_filtering(engine: Engine, tmp_table: sa.Table) -> None:
    """IS NULL / IS NOT NULL filters keep SQL NULL semantics."""
    with engine.begin() as conn:
        conn.execute(
            tmp_table.insert(),
            [
                {"id": 1, "opens_at": None},
                {"id": 2, "opens_at": OffsetTimeOfDay.of(10, 0, 0)},
            ],
        )
        nulls = conn.execute(
            sa.select(tmp_table.c.id).where(tmp_table.c.opens_at.is_(None))
        ).scalars()
        assert list(nulls) == [1]
        present = conn.execute(
            sa.select(tmp_table.c.id).where(tmp_table.c.opens_at.is_not(None))
        ).scalars()
        assert list(present) == [2]
