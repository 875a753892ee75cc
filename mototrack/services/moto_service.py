from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from mototrack.models.filial import Filial
from mototrack.models.moto import Moto
from mototrack.schemas.entities import MotoOut, MotoUpsert
from mototrack.schemas.filters import MotoFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services.crud_common import _delete_or_409, _load_related_or_404, _load_row_or_404, _save_or_409
from mototrack.services.filter_compiler import MOTO_FILTER
from mototrack.services.paginated_query import execute_page

MOTO_SORTABLE = {
    "placa": Moto.placa,
    "modelo": Moto.modelo,
    "marca": Moto.marca,
    "ano": Moto.ano,
    "status": Moto.status,
    "data_criacao": Moto.data_criacao,
}
MOTO_DEFAULT_SORT = "placa,desc"
NOT_FOUND = "Moto não encontrada"
FILIAL_NOT_FOUND = "Filial não encontrada"


def query_motos(db: Session, filtro: MotoFilter | None, page_request: PageRequest) -> PageResult[MotoOut]:
    predicate = MOTO_FILTER.compile(filtro)
    page = execute_page(db, Moto, predicate, page_request, MOTO_SORTABLE)
    return page.map(MotoOut.model_validate)


def get_moto(db: Session, moto_id: uuid.UUID) -> MotoOut:
    return MotoOut.model_validate(_load_row_or_404(db, Moto, moto_id, "Moto", NOT_FOUND))


def create_moto(db: Session, payload: MotoUpsert) -> MotoOut:
    data = payload.model_dump(exclude={"filial_id"})
    row = Moto(**data)
    row.filial = _load_related_or_404(db, Filial, payload.filial_id, "Filial", FILIAL_NOT_FOUND)
    return MotoOut.model_validate(_save_or_409(db, row, "CREATE"))


def update_moto(db: Session, moto_id: uuid.UUID, payload: MotoUpsert) -> MotoOut:
    row = _load_row_or_404(db, Moto, moto_id, "Moto", NOT_FOUND)
    for key, value in payload.model_dump(exclude={"filial_id"}).items():
        setattr(row, key, value)
    # No filial_id in the payload detaches the moto from its filial.
    row.filial = _load_related_or_404(db, Filial, payload.filial_id, "Filial", FILIAL_NOT_FOUND)
    return MotoOut.model_validate(_save_or_409(db, row, "UPDATE"))


def delete_moto(db: Session, moto_id: uuid.UUID) -> None:
    row = _load_row_or_404(db, Moto, moto_id, "Moto", "Moto não encontrada para exclusão")
    _delete_or_409(db, row)
