import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from mototrack.db.session import Base
from mototrack.models.common import UUIDMixin, utcnow
from mototrack.models.filial import Filial

class Moto(Base, UUIDMixin):
    __tablename__ = "tb_moto"
    placa: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    modelo: Mapped[str] = mapped_column(String(120), nullable=False)
    marca: Mapped[str] = mapped_column(String(120), nullable=False)
    ano: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(40), nullable=False, index=True)
    filial_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("tb_filial.id"), nullable=True, index=True
    )
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    # Set once on insert; services never write it back.
    data_criacao: Mapped[datetime] = mapped_column("dt_criacao", DateTime(timezone=True), default=utcnow)

    filial: Mapped[Filial | None] = relationship(Filial, lazy="joined")
