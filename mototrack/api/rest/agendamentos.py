import logging
import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from mototrack.api.pagination import page_request_params
from mototrack.core.deps import require_role
from mototrack.core.security import ROLE_ADMIN, ROLE_USER
from mototrack.db.session import get_db
from mototrack.schemas.entities import AgendamentoOut, AgendamentoUpsert
from mototrack.schemas.filters import AgendamentoFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services import agendamento_service
from mototrack.services.agendamento_service import AGENDAMENTO_DEFAULT_SORT

_LOG = logging.getLogger("mototrack.api")

router = APIRouter()


@router.get("/filtro", response_model=PageResult[AgendamentoOut])
def filter_agendamentos(
    filtro: AgendamentoFilter = Depends(),
    page_request: PageRequest = Depends(page_request_params(AGENDAMENTO_DEFAULT_SORT)),
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_USER, ROLE_ADMIN)),
):
    _LOG.info("agendamentos filtro=%s page=%s", filtro.model_dump(exclude_none=True), page_request)
    return agendamento_service.query_agendamentos(db, filtro, page_request)


@router.get("/{agendamento_id}", response_model=AgendamentoOut)
def get_agendamento(agendamento_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_USER, ROLE_ADMIN))):
    return agendamento_service.get_agendamento(db, agendamento_id)


@router.post("", status_code=201, response_model=AgendamentoOut)
def create_agendamento(payload: AgendamentoUpsert, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    return agendamento_service.create_agendamento(db, payload)


@router.put("/{agendamento_id}", response_model=AgendamentoOut)
def update_agendamento(
    agendamento_id: uuid.UUID,
    payload: AgendamentoUpsert,
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_ADMIN)),
):
    return agendamento_service.update_agendamento(db, agendamento_id, payload)


@router.delete("/{agendamento_id}", status_code=204)
def delete_agendamento(agendamento_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    agendamento_service.delete_agendamento(db, agendamento_id)
    return Response(status_code=204)
