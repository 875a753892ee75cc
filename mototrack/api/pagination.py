from fastapi import Query

from mototrack.core.config import settings
from mototrack.schemas.pagination import PageRequest


def page_request_params(default_sort: str):
    """Dependency building a PageRequest from ``page``, ``size`` and ``sort`` query params."""

    def _inner(
        page: int = Query(default=0, description="Índice da página, a partir de 0"),
        size: int = Query(default=settings.DEFAULT_PAGE_SIZE, description="Itens por página"),
        sort: str = Query(default=default_sort, description="campo,direção (ex: placa,desc)"),
    ) -> PageRequest:
        return PageRequest.from_query(page, size, sort)

    return _inner
