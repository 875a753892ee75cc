from __future__ import annotations

import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from mototrack.core.security import hash_password, verify_password
from mototrack.models.usuario import Usuario
from mototrack.schemas.entities import UsuarioOut, UsuarioUpsert
from mototrack.schemas.filters import UsuarioFilter
from mototrack.schemas.pagination import PageRequest, PageResult
from mototrack.services.crud_common import _delete_or_409, _load_row_or_404, _save_or_409
from mototrack.services.filter_compiler import USUARIO_FILTER
from mototrack.services.paginated_query import execute_page

USUARIO_SORTABLE = {
    "nome": Usuario.nome,
    "email": Usuario.email,
    "perfil": Usuario.perfil,
}
USUARIO_DEFAULT_SORT = "nome,asc"
NOT_FOUND = "Usuário não encontrado"


def query_usuarios(db: Session, filtro: UsuarioFilter | None, page_request: PageRequest) -> PageResult[UsuarioOut]:
    predicate = USUARIO_FILTER.compile(filtro)
    page = execute_page(db, Usuario, predicate, page_request, USUARIO_SORTABLE)
    return page.map(UsuarioOut.model_validate)


def get_usuario(db: Session, usuario_id: uuid.UUID) -> UsuarioOut:
    return UsuarioOut.model_validate(_load_row_or_404(db, Usuario, usuario_id, "Usuario", NOT_FOUND))


def create_usuario(db: Session, payload: UsuarioUpsert) -> UsuarioOut:
    data = payload.model_dump()
    data["senha"] = hash_password(payload.senha)
    return UsuarioOut.model_validate(_save_or_409(db, Usuario(**data), "CREATE"))


def update_usuario(db: Session, usuario_id: uuid.UUID, payload: UsuarioUpsert) -> UsuarioOut:
    row = _load_row_or_404(db, Usuario, usuario_id, "Usuario", NOT_FOUND)
    data = payload.model_dump()
    data["senha"] = hash_password(payload.senha)
    for key, value in data.items():
        setattr(row, key, value)
    return UsuarioOut.model_validate(_save_or_409(db, row, "UPDATE"))


def delete_usuario(db: Session, usuario_id: uuid.UUID) -> None:
    row = _load_row_or_404(db, Usuario, usuario_id, "Usuario", NOT_FOUND)
    _delete_or_409(db, row)


def authenticate_usuario(db: Session, email: str, senha: str) -> Usuario | None:
    normalized = str(email or "").strip().lower()
    if not normalized:
        return None
    row = db.query(Usuario).filter(func.lower(Usuario.email) == normalized).first()
    if row is None or not verify_password(senha, row.senha):
        return None
    return row
