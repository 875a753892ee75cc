from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from mototrack.db.session import Base
from mototrack.models.common import UUIDMixin

class Usuario(Base, UUIDMixin):
    __tablename__ = "tb_usuario"
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    senha: Mapped[str] = mapped_column(String(255), nullable=False)  # pbkdf2 hash
    perfil: Mapped[str] = mapped_column(String(30), nullable=False)  # OPERADOR|GESTOR|ADMINISTRADOR
