from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

PERFIS = {"OPERADOR", "GESTOR", "ADMINISTRADOR"}


def _required_text(value: str, message: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ValueError(message)
    return text


class FilialUpsert(BaseModel):
    nome: str
    endereco: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    raio_geofence_metros: Optional[float] = Field(default=None, ge=0)

    @field_validator("nome")
    @classmethod
    def validate_nome(cls, value: str) -> str:
        return _required_text(value, "O nome da filial é obrigatório.")


class MotoUpsert(BaseModel):
    placa: str
    modelo: str
    marca: str
    ano: int = Field(ge=2000)
    status: str
    filial_id: Optional[uuid.UUID] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @field_validator("placa")
    @classmethod
    def normalize_placa(cls, value: str) -> str:
        return _required_text(value, "A placa é obrigatória.").upper()

    @field_validator("modelo", "marca", "status")
    @classmethod
    def validate_text(cls, value: str) -> str:
        return _required_text(value, "Campo obrigatório.")


class UsuarioUpsert(BaseModel):
    nome: str
    email: str
    senha: str
    perfil: str

    @field_validator("nome", "senha")
    @classmethod
    def validate_text(cls, value: str) -> str:
        return _required_text(value, "Campo obrigatório.")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        email = str(value or "").strip().lower()
        local, _, domain = email.partition("@")
        if not local or "." not in domain:
            raise ValueError("Email inválido.")
        return email

    @field_validator("perfil")
    @classmethod
    def validate_perfil(cls, value: str) -> str:
        normalized = str(value or "").strip().upper()
        if normalized not in PERFIS:
            raise ValueError("perfil deve ser um de: OPERADOR, GESTOR, ADMINISTRADOR")
        return normalized


class EventoUpsert(BaseModel):
    moto_id: uuid.UUID
    tipo: str
    motivo: str
    data_hora: Optional[datetime] = None
    localizacao: Optional[str] = None

    @field_validator("tipo", "motivo")
    @classmethod
    def validate_text(cls, value: str) -> str:
        return _required_text(value, "Campo obrigatório.")


class AgendamentoUpsert(BaseModel):
    moto_id: uuid.UUID
    data_agendada: Optional[datetime] = None
    descricao: str

    @field_validator("descricao")
    @classmethod
    def validate_descricao(cls, value: str) -> str:
        return _required_text(value, "A descrição é obrigatória.")


class _OutBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class FilialOut(_OutBase):
    id: uuid.UUID
    nome: str
    endereco: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    estado: Optional[str] = None
    cep: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    raio_geofence_metros: Optional[float] = None


class MotoOut(_OutBase):
    id: uuid.UUID
    placa: str
    modelo: str
    marca: str
    ano: int
    status: str
    filial_id: Optional[uuid.UUID] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    data_criacao: Optional[datetime] = None


class UsuarioOut(_OutBase):
    id: uuid.UUID
    nome: str
    email: str
    perfil: str


class EventoOut(_OutBase):
    id: uuid.UUID
    moto_id: uuid.UUID
    moto_placa: Optional[str] = None
    tipo: str
    motivo: str
    data_hora: Optional[datetime] = None
    localizacao: Optional[str] = None


class AgendamentoOut(_OutBase):
    id: uuid.UUID
    moto_id: uuid.UUID
    moto_placa: Optional[str] = None
    data_agendada: Optional[datetime] = None
    descricao: str


class LoginIn(BaseModel):
    email: str
    senha: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    role: str
