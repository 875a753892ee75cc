import logging
import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from mototrack.api.pagination import page_request_params
from mototrack.core.deps import require_role
from mototrack.core.security import ROLE_ADMIN, ROLE_USER
from mototrack.db.session import get_db
from mototrack.schemas.entities import UsuarioOut, UsuarioUpsert
from mototrack.schemas.filters import UsuarioFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services import usuario_service
from mototrack.services.usuario_service import USUARIO_DEFAULT_SORT

_LOG = logging.getLogger("mototrack.api")

router = APIRouter()


@router.get("/filtro", response_model=PageResult[UsuarioOut])
def filter_usuarios(
    filtro: UsuarioFilter = Depends(),
    page_request: PageRequest = Depends(page_request_params(USUARIO_DEFAULT_SORT)),
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_USER, ROLE_ADMIN)),
):
    _LOG.info("usuarios filtro=%s page=%s", filtro.model_dump(exclude_none=True), page_request)
    return usuario_service.query_usuarios(db, filtro, page_request)


@router.get("/{usuario_id}", response_model=UsuarioOut)
def get_usuario(usuario_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_USER, ROLE_ADMIN))):
    return usuario_service.get_usuario(db, usuario_id)


@router.post("", status_code=201, response_model=UsuarioOut)
def create_usuario(payload: UsuarioUpsert, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    return usuario_service.create_usuario(db, payload)


@router.put("/{usuario_id}", response_model=UsuarioOut)
def update_usuario(
    usuario_id: uuid.UUID,
    payload: UsuarioUpsert,
    db: Session = Depends(get_db),
    user=Depends(require_role(ROLE_ADMIN)),
):
    return usuario_service.update_usuario(db, usuario_id, payload)


@router.delete("/{usuario_id}", status_code=204)
def delete_usuario(usuario_id: uuid.UUID, db: Session = Depends(get_db), user=Depends(require_role(ROLE_ADMIN))):
    usuario_service.delete_usuario(db, usuario_id)
    return Response(status_code=204)
