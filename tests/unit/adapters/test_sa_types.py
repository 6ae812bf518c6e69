"""Unit tests for xstime.adapters.db.sa_types.XsdTime.

These tests exercise the type decorator directly, without creating tables or
running against a real database engine. They verify:

- .python_type reports OffsetTimeOfDay.
- process_bind_param passes None through and formats values canonically.
- process_result_value passes None through and parses stored text,
  completing offset-less text with the type's resolver.
- process_literal_param integrates with SQL compilation.
"""

from __future__ import annotations

from datetime import time, timedelta, timezone

import pytest
import sqlalchemy as sa
from sqlalchemy.dialects.sqlite import dialect as SQLiteDialect

from tests.fakes import RecordingResolver
from xstime.adapters.db.sa_types import XsdTime
from xstime.domain.errors import InvalidValueError, XsdTimeParseError
from xstime.domain.value_objects import OffsetTimeOfDay, TimeOfDay, UtcOffset

# pylint: disable=magic-value-comparison

DIALECT = SQLiteDialect()


def test_python_type() -> None:
    """XsdTime.python_type should be OffsetTimeOfDay."""
    assert XsdTime().python_type is OffsetTimeOfDay


def test_bind_none_returns_none() -> None:
    """Binding None stores SQL NULL."""
    assert XsdTime().process_bind_param(None, DIALECT) is None


def test_bind_formats_canonically() -> None:
    """Values are stored in canonical xs:time form."""
    value = OffsetTimeOfDay.of(8, 5, 0, 120_000_000, UtcOffset(-90))
    assert XsdTime().process_bind_param(value, DIALECT) == "08:05:00.12-01:30"


def test_bind_accepts_aware_time() -> None:
    """Aware datetime.time values are converted before formatting."""
    value = time(8, 5, tzinfo=timezone(timedelta(hours=3)))
    assert XsdTime().process_bind_param(value, DIALECT) == "08:05:00+03:00"


def test_bind_rejects_naive_time() -> None:
    """Naive datetime.time values have no offset to store."""
    with pytest.raises(InvalidValueError):
        XsdTime().process_bind_param(time(8, 5), DIALECT)


def test_result_none_returns_none() -> None:
    """SQL NULL reads back as None."""
    assert XsdTime().process_result_value(None, DIALECT) is None


def test_result_parses_text() -> None:
    """Stored text (strict or lenient) parses to a value."""
    assert XsdTime().process_result_value(" 7:00:00z", DIALECT) == (
        OffsetTimeOfDay.of(7, 0, 0)
    )


def test_result_uses_type_resolver_for_missing_offset() -> None:
    """Offset-less stored text is completed by the type's resolver."""
    resolver = RecordingResolver(UtcOffset(300))
    out = XsdTime(resolver=resolver).process_result_value("07:00:00", DIALECT)
    assert out == OffsetTimeOfDay.of(7, 0, 0, 0, UtcOffset(300))
    assert resolver.calls == [TimeOfDay(7, 0, 0)]


def test_result_rejects_garbage() -> None:
    """Corrupt stored text surfaces as a parse error."""
    with pytest.raises(XsdTimeParseError):
        XsdTime().process_result_value("noon", DIALECT)


def test_process_literal_param_compile() -> None:
    """Literal compilation renders the canonical text as a string literal."""
    expr = sa.literal(OffsetTimeOfDay.of(23, 0, 0, 0, UtcOffset(60)), type_=XsdTime())
    stmt = sa.select(expr.label("t"))
    sql = str(stmt.compile(dialect=DIALECT, compile_kwargs={"literal_binds": True}))
    assert "'23:00:00+01:00'" in sql
