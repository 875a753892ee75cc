import logging
import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from mototrack.api.pagination import page_request_params
from mototrack.core.deps import require_role
from mototrack.core.security import ROLE_ADMIN, ROLE_USER
from mototrack.db.session import get_db
from mototrack.schemas.entities import FilialOut, FilialUpsert
from mototrack.schemas.filters import FilialFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services import filial_service
from mototrack.services.filial_service import FILIAL_DEFAULT_SORT

_LOG = logging.getLogger("mototrack.api")

router = APIRouter()


@router.get("/filtro", response_model=PageResult[FilialOut])
def filter_filiais(
    filtro: FilialFilter = Depends(),
    page_request: PageRequest = Depends(page_request_params(FILIAL_DEFAULT_SORT)),
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_USER, ROLE_ADMIN)),
):
    _LOG.info("filiais filtro=%s page=%s", filtro.model_dump(exclude_none=True), page_request)
    return filial_service.query_filiais(db, filtro, page_request)


@router.get("/{filial_id}", response_model=FilialOut)
def get_filial(filial_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_USER, ROLE_ADMIN))):
    return filial_service.get_filial(db, filial_id)


@router.post("", status_code=201, response_model=FilialOut)
def create_filial(payload: FilialUpsert, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    return filial_service.create_filial(db, payload)


@router.put("/{filial_id}", response_model=FilialOut)
def update_filial(
    filial_id: uuid.UUID,
    payload: FilialUpsert,
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_ADMIN)),
):
    return filial_service.update_filial(db, filial_id, payload)


@router.delete("/{filial_id}", status_code=204)
def delete_filial(filial_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    filial_service.delete_filial(db, filial_id)
    return Response(status_code=204)
