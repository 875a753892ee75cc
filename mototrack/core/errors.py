from __future__ import annotations

from fastapi import HTTPException


class InvalidPageRequestError(HTTPException):
    """Pagination input the caller must fix: bad page, size or sort direction."""

    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class SortFieldNotAllowedError(InvalidPageRequestError):
    def __init__(self, field: str, allowed: list[str] | tuple[str, ...] = ()):
        self.field = field
        self.allowed = tuple(allowed)
        detail = f"Campo de ordenação inválido: '{field}'"
        if self.allowed:
            detail += f" (permitidos: {', '.join(self.allowed)})"
        super().__init__(detail)


class EntityNotFoundError(HTTPException):
    def __init__(self, entity: str, detail: str | None = None):
        self.entity = entity
        super().__init__(status_code=404, detail=detail or f"{entity} não encontrado(a)")


class RelatedEntityNotFoundError(HTTPException):
    """A write references a related row that does not exist."""

    def __init__(self, entity: str, detail: str | None = None):
        self.entity = entity
        super().__init__(status_code=404, detail=detail or f"{entity} não encontrado(a)")


class StoreOperationError(HTTPException):
    def __init__(self, detail: str = "Não foi possível concluir a operação"):
        super().__init__(status_code=409, detail=detail)
