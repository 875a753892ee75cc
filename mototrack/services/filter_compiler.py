"""Compile filter descriptors into SQLAlchemy predicates.

Each entity declares its filter surface as an ordered list of rules. A rule
binds one or two filter attributes to a column through one operator from
``query_operators``. ``FilterCompiler.compile`` ANDs whatever conditions the
rules produce; a missing filter, or one with every field absent, compiles to
``true()``.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Sequence

from sqlalchemy.sql.elements import ColumnElement

from mototrack.models.agendamento import Agendamento
from mototrack.models.evento import Evento
from mototrack.models.filial import Filial
from mototrack.models.moto import Moto
from mototrack.models.usuario import Usuario
from mototrack.services import query_operators as ops


def _field(filtro: Any, name: str) -> Any:
    if filtro is None:
        return None
    return getattr(filtro, name, None)


@dataclasses.dataclass(frozen=True, eq=False)
class Equals:
    field: str
    column: Any

    def conditions(self, filtro: Any) -> list[ColumnElement[bool]]:
        return ops.equals(self.column, _field(filtro, self.field))


@dataclasses.dataclass(frozen=True, eq=False)
class EqualsIgnoreCase:
    field: str
    column: Any

    def conditions(self, filtro: Any) -> list[ColumnElement[bool]]:
        return ops.equals_ignore_case(self.column, _field(filtro, self.field))


@dataclasses.dataclass(frozen=True, eq=False)
class ContainsIgnoreCase:
    field: str
    column: Any

    def conditions(self, filtro: Any) -> list[ColumnElement[bool]]:
        return ops.contains_ignore_case(self.column, _field(filtro, self.field))


@dataclasses.dataclass(frozen=True, eq=False)
class Range:
    min_field: str
    max_field: str
    column: Any
    # Applied to both bounds before they reach the range operator
    bounds: Callable[[Any, Any], tuple[Any, Any]] | None = None

    def conditions(self, filtro: Any) -> list[ColumnElement[bool]]:
        minimum = _field(filtro, self.min_field)
        maximum = _field(filtro, self.max_field)
        if self.bounds is not None:
            minimum, maximum = self.bounds(minimum, maximum)
        return ops.value_range(self.column, minimum, maximum)


def DayRange(min_field: str, max_field: str, column: Any) -> Range:
    """Range over a timestamp column whose bounds are calendar days."""
    return Range(min_field, max_field, column, bounds=ops.day_bounds)


@dataclasses.dataclass(frozen=True, eq=False)
class RelationEquals:
    field: str
    relationship: Any
    target_column: Any

    def conditions(self, filtro: Any) -> list[ColumnElement[bool]]:
        return ops.relation_equals(self.relationship, self.target_column, _field(filtro, self.field))


class FilterCompiler:
    def __init__(self, model: type, rules: Sequence[Any]):
        self.model = model
        self.rules = tuple(rules)

    @property
    def fields(self) -> tuple[str, ...]:
        names: list[str] = []
        for rule in self.rules:
            if isinstance(rule, Range):
                names.extend([rule.min_field, rule.max_field])
            else:
                names.append(rule.field)
        return tuple(names)

    def compile(self, filtro: Any = None) -> ColumnElement[bool]:
        conditions: list[ColumnElement[bool]] = []
        for rule in self.rules:
            conditions.extend(rule.conditions(filtro))
        return ops.conjunction(conditions)


MOTO_FILTER = FilterCompiler(
    Moto,
    [
        Equals("id", Moto.id),
        ContainsIgnoreCase("placa", Moto.placa),
        ContainsIgnoreCase("modelo", Moto.modelo),
        ContainsIgnoreCase("marca", Moto.marca),
        EqualsIgnoreCase("status", Moto.status),
        Range("ano_min", "ano_max", Moto.ano),
        Range("data_criacao_inicio", "data_criacao_fim", Moto.data_criacao),
        RelationEquals("filial_id", Moto.filial, Filial.id),
    ],
)

EVENTO_FILTER = FilterCompiler(
    Evento,
    [
        Equals("id", Evento.id),
        RelationEquals("moto_id", Evento.moto, Moto.id),
        EqualsIgnoreCase("tipo", Evento.tipo),
        ContainsIgnoreCase("motivo", Evento.motivo),
        ContainsIgnoreCase("localizacao", Evento.localizacao),
        DayRange("data_inicio", "data_fim", Evento.data_hora),
    ],
)

USUARIO_FILTER = FilterCompiler(
    Usuario,
    [
        ContainsIgnoreCase("nome", Usuario.nome),
        ContainsIgnoreCase("email", Usuario.email),
        EqualsIgnoreCase("perfil", Usuario.perfil),
    ],
)

FILIAL_FILTER = FilterCompiler(
    Filial,
    [
        ContainsIgnoreCase("nome", Filial.nome),
        ContainsIgnoreCase("cidade", Filial.cidade),
        ContainsIgnoreCase("estado", Filial.estado),
    ],
)

AGENDAMENTO_FILTER = FilterCompiler(
    Agendamento,
    [
        Equals("id", Agendamento.id),
        RelationEquals("moto_id", Agendamento.moto, Moto.id),
        ContainsIgnoreCase("descricao", Agendamento.descricao),
        Range("data_agendada_inicio", "data_agendada_fim", Agendamento.data_agendada),
    ],
)
