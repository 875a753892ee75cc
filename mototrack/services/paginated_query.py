from __future__ import annotations

import logging
from typing import Any, Mapping

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from mototrack.core.errors import SortFieldNotAllowedError
from mototrack.schemas.pagination import PageRequest, PageResult, SortDirection

_LOG = logging.getLogger("mototrack.query")


def resolve_sort_column(sortable: Mapping[str, Any], field: str):
    column = sortable.get(field)
    if column is None:
        raise SortFieldNotAllowedError(field, sorted(sortable))
    return column


def execute_page(
    db: Session,
    model,
    predicate: ColumnElement[bool],
    page_request: PageRequest,
    sortable: Mapping[str, Any],
) -> PageResult:
    """Run one page of ``model`` rows matching ``predicate``.

    Rows are ordered by the requested column and then by primary key, so rows
    sharing a sort value keep the same relative order on every page.
    """
    sort_column = resolve_sort_column(sortable, page_request.sort_field)
    ordering = asc(sort_column) if page_request.direction == SortDirection.ASC else desc(sort_column)

    q = db.query(model).filter(predicate)
    total = q.count()
    rows = (
        q.order_by(ordering, asc(model.id))
        .offset(page_request.offset)
        .limit(page_request.size)
        .all()
    )
    _LOG.debug(
        "page query model=%s sort=%s,%s page=%s size=%s total=%s",
        model.__tablename__,
        page_request.sort_field,
        page_request.direction.value,
        page_request.page,
        page_request.size,
        total,
    )
    return PageResult(items=rows, total=total, page=page_request.page, size=page_request.size)
