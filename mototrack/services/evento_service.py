from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from mototrack.models.evento import Evento
from mototrack.models.moto import Moto
from mototrack.schemas.entities import EventoOut, EventoUpsert
from mototrack.schemas.filters import EventoFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services.crud_common import _delete_or_409, _load_related_or_404, _load_row_or_404, _save_or_409
from mototrack.services.filter_compiler import EVENTO_FILTER
from mototrack.services.paginated_query import execute_page

EVENTO_SORTABLE = {
    "data_hora": Evento.data_hora,
    "tipo": Evento.tipo,
    "motivo": Evento.motivo,
    "localizacao": Evento.localizacao,
}
EVENTO_DEFAULT_SORT = "data_hora,desc"
NOT_FOUND = "Evento não encontrado"
MOTO_NOT_FOUND = "Moto não encontrada"


def _to_out(row: Evento) -> EventoOut:
    return EventoOut(
        id=row.id,
        moto_id=row.moto_id,
        moto_placa=row.moto.placa if row.moto is not None else None,
        tipo=row.tipo,
        motivo=row.motivo,
        data_hora=row.data_hora,
        localizacao=row.localizacao,
    )


def query_eventos(db: Session, filtro: EventoFilter | None, page_request: PageRequest) -> PageResult[EventoOut]:
    predicate = EVENTO_FILTER.compile(filtro)
    page = execute_page(db, Evento, predicate, page_request, EVENTO_SORTABLE)
    return page.map(_to_out)


def get_evento(db: Session, evento_id: uuid.UUID) -> EventoOut:
    return _to_out(_load_row_or_404(db, Evento, evento_id, "Evento", NOT_FOUND))


def create_evento(db: Session, payload: EventoUpsert) -> EventoOut:
    row = Evento(**payload.model_dump(exclude={"moto_id"}))
    row.moto = _load_related_or_404(db, Moto, payload.moto_id, "Moto", MOTO_NOT_FOUND)
    return _to_out(_save_or_409(db, row, "CREATE"))


def update_evento(db: Session, evento_id: uuid.UUID, payload: EventoUpsert) -> EventoOut:
    row = _load_row_or_404(db, Evento, evento_id, "Evento", NOT_FOUND)
    for key, value in payload.model_dump(exclude={"moto_id"}).items():
        setattr(row, key, value)
    row.moto = _load_related_or_404(db, Moto, payload.moto_id, "Moto", MOTO_NOT_FOUND)
    return _to_out(_save_or_409(db, row, "UPDATE"))


def delete_evento(db: Session, evento_id: uuid.UUID) -> None:
    row = _load_row_or_404(db, Evento, evento_id, "Evento", NOT_FOUND)
    _delete_or_409(db, row)
