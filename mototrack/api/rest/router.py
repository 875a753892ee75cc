from fastapi import APIRouter
from mototrack.api.rest import agendamentos, auth, eventos, filiais, motos, usuarios

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(motos.router, prefix="/motos", tags=["Moto"])
router.include_router(filiais.router, prefix="/filiais", tags=["Filial"])
router.include_router(eventos.router, prefix="/eventos", tags=["Evento"])
router.include_router(usuarios.router, prefix="/usuarios", tags=["Usuario"])
router.include_router(agendamentos.router, prefix="/agendamentos", tags=["Agendamento"])
