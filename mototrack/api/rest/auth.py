from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from mototrack.core.config import settings
from mototrack.core.security import create_jwt, role_for_perfil
from mototrack.db.session import get_db
from mototrack.schemas.entities import LoginIn, TokenOut
from mototrack.services.usuario_service import authenticate_usuario

router = APIRouter()


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    user = authenticate_usuario(db, payload.email, payload.senha)
    if user is None:
        raise HTTPException(status_code=401, detail="Email ou senha inválidos")
    role = role_for_perfil(user.perfil)
    token = create_jwt(
        {"sub": str(user.id), "email": user.email, "role": role},
        settings.JWT_SECRET,
        timedelta(minutes=settings.JWT_TTL_MINUTES),
    )
    return TokenOut(access_token=token, role=role)
