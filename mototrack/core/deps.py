from fastapi import Depends, Cookie, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from mototrack.core.config import settings
from mototrack.core.security import decode_jwt

bearer = HTTPBearer(auto_error=False)

def get_current_user(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> dict:
    if not creds:
        raise HTTPException(status_code=401, detail="Token de autenticação ausente")
    try:
        return decode_jwt(creds.credentials, settings.JWT_SECRET)
    except Exception:
        raise HTTPException(status_code=401, detail="Token inválido")

def require_role(*roles: str):
    def _inner(user: dict = Depends(get_current_user)) -> dict:
        if user.get("role") not in roles:
            raise HTTPException(status_code=403, detail="Você não tem permissão para realizar esta ação.")
        return user
    return _inner

def get_ui_session(ui_jwt: str | None = Cookie(default=None, alias=settings.UI_COOKIE_NAME)) -> dict:
    if not ui_jwt:
        raise HTTPException(status_code=401, detail="Sessão ausente")
    try:
        return decode_jwt(ui_jwt, settings.JWT_SECRET)
    except Exception:
        raise HTTPException(status_code=401, detail="Sessão inválida")

def require_ui_role(*roles: str):
    def _inner(user: dict = Depends(get_ui_session)) -> dict:
        if user.get("role") not in roles:
            raise HTTPException(status_code=403, detail="Você não tem permissão para realizar esta ação.")
        return user
    return _inner
