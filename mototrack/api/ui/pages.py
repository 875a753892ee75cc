"""Server-rendered list pages.

Each page binds the same filter descriptor and page request as the REST
``/filtro`` endpoint and calls the same service function; only the output
differs.
"""
import dataclasses
import logging
from pathlib import Path
from typing import Any, Callable

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from mototrack.api.pagination import page_request_params
from mototrack.core.deps import require_ui_role
from mototrack.core.security import ROLE_ADMIN, ROLE_USER
from mototrack.db.session import get_db
from mototrack.schemas.filters import AgendamentoFilter, EventoFilter, FilialFilter, MotoFilter, UsuarioFilter
from mototrack.schemas.pagination import PageRequest
from mototrack.services import agendamento_service, evento_service, filial_service, moto_service, usuario_service
from mototrack.services.filter_compiler import (
    AGENDAMENTO_FILTER,
    EVENTO_FILTER,
    FILIAL_FILTER,
    MOTO_FILTER,
    USUARIO_FILTER,
    FilterCompiler,
)

_LOG = logging.getLogger("mototrack.ui")

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

DENIED_MESSAGE = "Você não tem permissão para realizar esta ação."

router = APIRouter()


@dataclasses.dataclass(frozen=True)
class ListScreen:
    path: str
    title: str
    filter_cls: type
    compiler: FilterCompiler
    default_sort: str
    query: Callable[..., Any]
    columns: tuple[str, ...]


SCREENS = (
    ListScreen(
        "motos", "Motos", MotoFilter, MOTO_FILTER, moto_service.MOTO_DEFAULT_SORT, moto_service.query_motos,
        ("placa", "modelo", "marca", "ano", "status"),
    ),
    ListScreen(
        "filiais", "Filiais", FilialFilter, FILIAL_FILTER, filial_service.FILIAL_DEFAULT_SORT,
        filial_service.query_filiais, ("nome", "cidade", "estado"),
    ),
    ListScreen(
        "eventos", "Eventos", EventoFilter, EVENTO_FILTER, evento_service.EVENTO_DEFAULT_SORT,
        evento_service.query_eventos, ("moto_placa", "tipo", "motivo", "data_hora", "localizacao"),
    ),
    ListScreen(
        "usuarios", "Usuários", UsuarioFilter, USUARIO_FILTER, usuario_service.USUARIO_DEFAULT_SORT,
        usuario_service.query_usuarios, ("nome", "email", "perfil"),
    ),
    ListScreen(
        "agendamentos", "Agendamentos", AgendamentoFilter, AGENDAMENTO_FILTER,
        agendamento_service.AGENDAMENTO_DEFAULT_SORT, agendamento_service.query_agendamentos,
        ("moto_placa", "data_agendada", "descricao"),
    ),
)


def _register(screen: ListScreen) -> None:
    def list_page(
        request: Request,
        denied: str | None = None,
        filtro=Depends(screen.filter_cls),
        page_request: PageRequest = Depends(page_request_params(screen.default_sort)),
        db: Session = Depends(get_db),
        user: dict = Depends(require_ui_role(ROLE_USER, ROLE_ADMIN)),
    ):
        _LOG.info("UI >> listando %s | filtro=%s, page=%s", screen.path, filtro, page_request)
        page = screen.query(db, filtro, page_request)
        return templates.TemplateResponse(
            request,
            "list.html",
            {
                "screen": screen,
                "page": page,
                "filtro": filtro.model_dump(),
                "filter_fields": screen.compiler.fields,
                "sort": f"{page_request.sort_field},{page_request.direction.value}",
                "user": user,
                "msg_erro": DENIED_MESSAGE if denied == "1" else None,
            },
        )

    list_page.__name__ = f"list_{screen.path}_page"
    router.add_api_route(f"/{screen.path}", list_page, methods=["GET"], include_in_schema=False)


for _screen in SCREENS:
    _register(_screen)
