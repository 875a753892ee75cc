from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column
from mototrack.db.session import Base
from mototrack.models.common import UUIDMixin

class Filial(Base, UUIDMixin):
    __tablename__ = "tb_filial"
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    endereco: Mapped[str | None] = mapped_column(String(300), nullable=True)
    bairro: Mapped[str | None] = mapped_column(String(120), nullable=True)
    cidade: Mapped[str | None] = mapped_column(String(120), nullable=True, index=True)
    estado: Mapped[str | None] = mapped_column(String(60), nullable=True, index=True)
    cep: Mapped[str | None] = mapped_column(String(20), nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    raio_geofence_metros: Mapped[float | None] = mapped_column(Float, nullable=True)
