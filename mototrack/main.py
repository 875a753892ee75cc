from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mototrack.core.config import settings
from mototrack.core.http_hardening import install_http_hardening
from mototrack.core.logging_config import configure_logging
from mototrack.api.rest.router import router as rest_router
from mototrack.api.ui.pages import router as ui_router

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.APP_NAME, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_http_hardening(app)

app.include_router(rest_router, prefix="/api")
app.include_router(ui_router, prefix="/ui")

@app.get("/", include_in_schema=False)
def landing():
    return JSONResponse({"service": settings.APP_NAME, "status": "ok"})

@app.get("/health")
def health():
    return {"status": "ok"}
