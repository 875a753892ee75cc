from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from mototrack.models.agendamento import Agendamento
from mototrack.models.moto import Moto
from mototrack.schemas.entities import AgendamentoOut, AgendamentoUpsert
from mototrack.schemas.filters import AgendamentoFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services.crud_common import _delete_or_409, _load_related_or_404, _load_row_or_404, _save_or_409
from mototrack.services.filter_compiler import AGENDAMENTO_FILTER
from mototrack.services.paginated_query import execute_page

AGENDAMENTO_SORTABLE = {
    "data_agendada": Agendamento.data_agendada,
    "descricao": Agendamento.descricao,
}
AGENDAMENTO_DEFAULT_SORT = "data_agendada,asc"
NOT_FOUND = "Agendamento não encontrado"
MOTO_NOT_FOUND = "Moto não encontrada"


def _to_out(row: Agendamento) -> AgendamentoOut:
    return AgendamentoOut(
        id=row.id,
        moto_id=row.moto_id,
        moto_placa=row.moto.placa if row.moto is not None else None,
        data_agendada=row.data_agendada,
        descricao=row.descricao,
    )


def query_agendamentos(
    db: Session, filtro: AgendamentoFilter | None, page_request: PageRequest
) -> PageResult[AgendamentoOut]:
    predicate = AGENDAMENTO_FILTER.compile(filtro)
    page = execute_page(db, Agendamento, predicate, page_request, AGENDAMENTO_SORTABLE)
    return page.map(_to_out)


def get_agendamento(db: Session, agendamento_id: uuid.UUID) -> AgendamentoOut:
    return _to_out(_load_row_or_404(db, Agendamento, agendamento_id, "Agendamento", NOT_FOUND))


def create_agendamento(db: Session, payload: AgendamentoUpsert) -> AgendamentoOut:
    row = Agendamento(**payload.model_dump(exclude={"moto_id"}))
    row.moto = _load_related_or_404(db, Moto, payload.moto_id, "Moto", MOTO_NOT_FOUND)
    return _to_out(_save_or_409(db, row, "CREATE"))


def update_agendamento(db: Session, agendamento_id: uuid.UUID, payload: AgendamentoUpsert) -> AgendamentoOut:
    row = _load_row_or_404(db, Agendamento, agendamento_id, "Agendamento", NOT_FOUND)
    for key, value in payload.model_dump(exclude={"moto_id"}).items():
        setattr(row, key, value)
    row.moto = _load_related_or_404(db, Moto, payload.moto_id, "Moto", MOTO_NOT_FOUND)
    return _to_out(_save_or_409(db, row, "UPDATE"))


def delete_agendamento(db: Session, agendamento_id: uuid.UUID) -> None:
    row = _load_row_or_404(db, Agendamento, agendamento_id, "Agendamento", NOT_FOUND)
    _delete_or_409(db, row)
