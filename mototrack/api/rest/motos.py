import logging
import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from mototrack.api.pagination import page_request_params
from mototrack.core.deps import require_role
from mototrack.core.security import ROLE_ADMIN, ROLE_USER
from mototrack.db.session import get_db
from mototrack.schemas.entities import MotoOut, MotoUpsert
from mototrack.schemas.filters import MotoFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services import moto_service
from mototrack.services.moto_service import MOTO_DEFAULT_SORT

_LOG = logging.getLogger("mototrack.api")

router = APIRouter()


@router.get("/filtro", response_model=PageResult[MotoOut])
def filter_motos(
    filtro: MotoFilter = Depends(),
    page_request: PageRequest = Depends(page_request_params(MOTO_DEFAULT_SORT)),
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_USER, ROLE_ADMIN)),
):
    _LOG.info("motos filtro=%s page=%s", filtro.model_dump(exclude_none=True), page_request)
    return moto_service.query_motos(db, filtro, page_request)


@router.get("/{moto_id}", response_model=MotoOut)
def get_moto(moto_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_USER, ROLE_ADMIN))):
    return moto_service.get_moto(db, moto_id)


@router.post("", status_code=201, response_model=MotoOut)
def create_moto(payload: MotoUpsert, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    return moto_service.create_moto(db, payload)


@router.put("/{moto_id}", response_model=MotoOut)
def update_moto(
    moto_id: uuid.UUID,
    payload: MotoUpsert,
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_ADMIN)),
):
    return moto_service.update_moto(db, moto_id, payload)


@router.delete("/{moto_id}", status_code=204)
def delete_moto(moto_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    moto_service.delete_moto(db, moto_id)
    return Response(status_code=204)
