from datetime import datetime, timedelta, timezone
from jose import jwt
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

ROLE_ADMIN = "ADMIN"
ROLE_USER = "USER"

# Usuario.perfil -> role claim carried in the token
PERFIL_ROLES = {
    "ADMINISTRADOR": ROLE_ADMIN,
    "GESTOR": ROLE_ADMIN,
    "ADMIN": ROLE_ADMIN,
    "OPERADOR": ROLE_USER,
}

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)

def role_for_perfil(perfil: str | None) -> str:
    normalized = str(perfil or "").strip().upper()
    return PERFIL_ROLES.get(normalized, ROLE_USER)

def create_jwt(payload: dict, secret: str, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    data = payload.copy()
    data.update({"iat": int(now.timestamp()), "exp": int((now + expires_delta).timestamp())})
    return jwt.encode(data, secret, algorithm="HS256")

def decode_jwt(token: str, secret: str) -> dict:
    return jwt.decode(token, secret, algorithms=["HS256"])
