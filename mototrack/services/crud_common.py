from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mototrack.core.errors import EntityNotFoundError, RelatedEntityNotFoundError, StoreOperationError

_LOG = logging.getLogger("mototrack.services")


def _load_row_or_404(db: Session, model: type, row_id: uuid.UUID, entity: str, detail: str | None = None):
    row = db.get(model, row_id)
    if row is None:
        raise EntityNotFoundError(entity, detail)
    return row


def _load_related_or_404(db: Session, model: type, row_id: uuid.UUID | None, entity: str, detail: str | None = None):
    if row_id is None:
        return None
    row = db.get(model, row_id)
    if row is None:
        _LOG.warning("related %s %s not found", entity, row_id)
        raise RelatedEntityNotFoundError(entity, detail)
    return row


def _save_or_409(db: Session, row: Any, action: str) -> Any:
    try:
        db.add(row)
        db.flush()
        db.commit()
        db.refresh(row)
    except IntegrityError:
        db.rollback()
        _LOG.warning("%s %s rejected by integrity constraint", action, row.__tablename__)
        raise StoreOperationError()
    _LOG.info("%s %s id=%s", action, row.__tablename__, row.id)
    return row


def _delete_or_409(db: Session, row: Any) -> None:
    entity_id = row.id
    try:
        db.delete(row)
        db.commit()
    except IntegrityError:
        db.rollback()
        _LOG.warning("DELETE %s id=%s rejected by integrity constraint", row.__tablename__, entity_id)
        raise StoreOperationError("Não foi possível excluir o registro: existem dados vinculados")
    _LOG.info("DELETE %s id=%s", row.__tablename__, entity_id)
