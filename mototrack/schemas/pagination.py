from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Callable, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field

from mototrack.core.config import settings
from mototrack.core.errors import InvalidPageRequestError

T = TypeVar("T")
U = TypeVar("U")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size and a single sort criterion."""

    page: int = 0
    size: int = 20
    sort_field: str = "id"
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidPageRequestError("O índice da página não pode ser negativo")
        if self.size < 1:
            raise InvalidPageRequestError("O tamanho da página deve ser positivo")
        if self.size > settings.MAX_PAGE_SIZE:
            raise InvalidPageRequestError(f"O tamanho da página não pode exceder {settings.MAX_PAGE_SIZE}")
        if not str(self.sort_field or "").strip():
            raise InvalidPageRequestError("Campo de ordenação ausente")

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def from_query(cls, page: int, size: int, sort: str) -> "PageRequest":
        field, direction = parse_sort(sort)
        return cls(page=page, size=size, sort_field=field, direction=direction)


def parse_sort(sort: str) -> tuple[str, SortDirection]:
    """Parse ``"<field>,<asc|desc>"``; a missing direction means ascending."""
    parts = [p.strip() for p in str(sort or "").split(",")]
    field = parts[0] if parts else ""
    if not field:
        raise InvalidPageRequestError("Campo de ordenação ausente")
    if len(parts) > 2:
        raise InvalidPageRequestError(f"Ordenação inválida: '{sort}'")
    raw_direction = parts[1].lower() if len(parts) == 2 else SortDirection.ASC.value
    try:
        direction = SortDirection(raw_direction)
    except ValueError:
        raise InvalidPageRequestError(f"Direção de ordenação inválida: '{parts[1]}'")
    return field, direction


class PageResult(BaseModel, Generic[T]):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: List[T] = []
    total: int = 0
    page: int = 0
    size: int = 0

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)

    def map(self, fn: Callable[[T], U]) -> "PageResult[U]":
        return PageResult(items=[fn(item) for item in self.items], total=self.total, page=self.page, size=self.size)
