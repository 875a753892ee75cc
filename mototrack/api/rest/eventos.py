import logging
import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from mototrack.api.pagination import page_request_params
from mototrack.core.deps import require_role
from mototrack.core.security import ROLE_ADMIN, ROLE_USER
from mototrack.db.session import get_db
from mototrack.schemas.entities import EventoOut, EventoUpsert
from mototrack.schemas.filters import EventoFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services import evento_service
from mototrack.services.evento_service import EVENTO_DEFAULT_SORT

_LOG = logging.getLogger("mototrack.api")

router = APIRouter()


@router.get("/filtro", response_model=PageResult[EventoOut])
def filter_eventos(
    filtro: EventoFilter = Depends(),
    page_request: PageRequest = Depends(page_request_params(EVENTO_DEFAULT_SORT)),
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_USER, ROLE_ADMIN)),
):
    _LOG.info("eventos filtro=%s page=%s", filtro.model_dump(exclude_none=True), page_request)
    return evento_service.query_eventos(db, filtro, page_request)


@router.get("/{evento_id}", response_model=EventoOut)
def get_evento(evento_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_USER, ROLE_ADMIN))):
    return evento_service.get_evento(db, evento_id)


@router.post("", status_code=201, response_model=EventoOut)
def create_evento(payload: EventoUpsert, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    return evento_service.create_evento(db, payload)


@router.put("/{evento_id}", response_model=EventoOut)
def update_evento(
    evento_id: uuid.UUID,
    payload: EventoUpsert,
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_ADMIN)),
):
    return evento_service.update_evento(db, evento_id, payload)


@router.delete("/{evento_id}", status_code=204)
def delete_evento(evento_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    evento_service.delete_evento(db, evento_id)
    return Response(status_code=204)
