import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship
from mototrack.db.session import Base
from mototrack.models.common import UUIDMixin
from mototrack.models.moto import Moto

class Agendamento(Base, UUIDMixin):
    __tablename__ = "tb_agendamento"
    moto_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), ForeignKey("tb_moto.id"), nullable=False, index=True)
    data_agendada: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True, index=True)
    descricao: Mapped[str] = mapped_column(String(400), nullable=False)

    moto: Mapped[Moto] = relationship(Moto, lazy="joined")
