"""
SistemaExperto — Aplicación FastAPI

Expone el motor de reglas: diagnóstico, explicaciones y reporte en texto.

Ejecución:
    uvicorn sistema_experto.api.app:app --port 8000
    python scripts/run_api.py --config sistema.yaml
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time

from sistema_experto import __version__
from .config import config
from .dependencies import service_state
from .routes import (
    health_router,
    diagnosis_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Construye el motor de reglas antes de aceptar peticiones"""
    service_state.load()
    print(f"🩺 SistemaExperto {__version__}: {', '.join(service_state.engine.diseases)}")

    yield

    print("🩺 SistemaExperto detenido")


app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


@app.middleware("http")
async def trace_diagnosis_requests(request: Request, call_next):
    """Una línea por petición a la API: método, ruta, estado y tiempo"""
    started = time.time()
    response = await call_next(request)

    if request.url.path.startswith(config.api_prefix):
        elapsed_ms = (time.time() - started) * 1000
        print(f"   {request.method} {request.url.path} → {response.status_code} ({elapsed_ms:.1f}ms)")

    return response


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    # El núcleo no tiene errores previstos: cualquier excepción es un fallo
    print(f"❌ {request.url.path}: {exc!r}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Error interno del sistema experto",
            "detail": str(exc) if config.debug else None
        }
    )


app.include_router(health_router)
app.include_router(diagnosis_router, prefix=config.api_prefix)
