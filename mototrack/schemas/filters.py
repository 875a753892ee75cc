"""Filter descriptors bound from list-endpoint query strings.

Every field is optional and ``None`` means "no constraint". Blank strings are
kept as given; the query operators treat them as absent.
"""
from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class _FilterBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class MotoFilter(_FilterBase):
    id: Optional[uuid.UUID] = None
    placa: Optional[str] = None
    modelo: Optional[str] = None
    marca: Optional[str] = None
    status: Optional[str] = None
    ano_min: Optional[int] = None
    ano_max: Optional[int] = None
    data_criacao_inicio: Optional[datetime] = None
    data_criacao_fim: Optional[datetime] = None
    filial_id: Optional[uuid.UUID] = None


class EventoFilter(_FilterBase):
    id: Optional[uuid.UUID] = None
    moto_id: Optional[uuid.UUID] = None
    tipo: Optional[str] = None
    motivo: Optional[str] = None
    localizacao: Optional[str] = None
    # Calendar days, matched against the data_hora timestamp
    data_inicio: Optional[date] = None
    data_fim: Optional[date] = None


class UsuarioFilter(_FilterBase):
    nome: Optional[str] = None
    email: Optional[str] = None
    perfil: Optional[str] = None


class FilialFilter(_FilterBase):
    nome: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None


class AgendamentoFilter(_FilterBase):
    id: Optional[uuid.UUID] = None
    moto_id: Optional[uuid.UUID] = None
    descricao: Optional[str] = None
    data_agendada_inicio: Optional[datetime] = None
    data_agendada_fim: Optional[datetime] = None
