"""Building blocks for filter predicates.

Every operator returns a list of boolean SQL conditions. An absent value
yields an empty list, so optional filter fields compose to "unconstrained"
rather than to a never-matching condition.
"""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Iterable

from sqlalchemy import and_, func, true
from sqlalchemy.sql.elements import ColumnElement


def _has_text(value: str | None) -> bool:
    return value is not None and bool(str(value).strip())


def equals(column, value: Any) -> list[ColumnElement[bool]]:
    if value is None:
        return []
    return [column == value]


def equals_ignore_case(column, value: str | None) -> list[ColumnElement[bool]]:
    if not _has_text(value):
        return []
    return [func.lower(column) == func.lower(str(value))]


def contains_ignore_case(column, value: str | None) -> list[ColumnElement[bool]]:
    if not _has_text(value):
        return []
    # autoescape keeps user-supplied % and _ literal inside the LIKE pattern
    return [column.icontains(str(value), autoescape=True)]


def value_range(column, minimum: Any = None, maximum: Any = None) -> list[ColumnElement[bool]]:
    conditions: list[ColumnElement[bool]] = []
    if minimum is not None:
        conditions.append(column >= minimum)
    if maximum is not None:
        conditions.append(column <= maximum)
    return conditions


def relation_equals(relationship, target_column, value: Any) -> list[ColumnElement[bool]]:
    if value is None:
        return []
    return [relationship.has(target_column == value)]


def conjunction(conditions: Iterable[ColumnElement[bool]]) -> ColumnElement[bool]:
    items = list(conditions)
    if not items:
        return true()
    if len(items) == 1:
        return items[0]
    return and_(*items)


def day_bounds(start: date | None, end: date | None) -> tuple[datetime | None, datetime | None]:
    """Widen calendar-day bounds to cover whole days of a timestamp column."""
    lower = datetime.combine(_as_date(start), time.min) if start is not None else None
    upper = datetime.combine(_as_date(end), time.max) if end is not None else None
    return lower, upper


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value
