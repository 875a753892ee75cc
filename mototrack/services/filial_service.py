from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from mototrack.models.filial import Filial
from mototrack.schemas.entities import FilialOut, FilialUpsert
from mototrack.schemas.filters import FilialFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services.crud_common import _delete_or_409, _load_row_or_404, _save_or_409
from mototrack.services.filter_compiler import FILIAL_FILTER
from mototrack.services.paginated_query import execute_page

FILIAL_SORTABLE = {
    "nome": Filial.nome,
    "cidade": Filial.cidade,
    "estado": Filial.estado,
}
FILIAL_DEFAULT_SORT = "nome,asc"
NOT_FOUND = "Filial não encontrada"


def query_filiais(db: Session, filtro: FilialFilter | None, page_request: PageRequest) -> PageResult[FilialOut]:
    predicate = FILIAL_FILTER.compile(filtro)
    page = execute_page(db, Filial, predicate, page_request, FILIAL_SORTABLE)
    return page.map(FilialOut.model_validate)


def get_filial(db: Session, filial_id: uuid.UUID) -> FilialOut:
    return FilialOut.model_validate(_load_row_or_404(db, Filial, filial_id, "Filial", NOT_FOUND))


def create_filial(db: Session, payload: FilialUpsert) -> FilialOut:
    row = Filial(**payload.model_dump())
    return FilialOut.model_validate(_save_or_409(db, row, "CREATE"))


def update_filial(db: Session, filial_id: uuid.UUID, payload: FilialUpsert) -> FilialOut:
    row = _load_row_or_404(db, Filial, filial_id, "Filial", NOT_FOUND)
    for key, value in payload.model_dump().items():
        setattr(row, key, value)
    return FilialOut.model_validate(_save_or_409(db, row, "UPDATE"))


def delete_filial(db: Session, filial_id: uuid.UUID) -> None:
    row = _load_row_or_404(db, Filial, filial_id, "Filial", "Filial não encontrada para exclusão")
    _delete_or_409(db, row)
