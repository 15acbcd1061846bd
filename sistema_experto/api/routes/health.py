"""
SistemaExperto — Health Routes

Health check e información del sistema.
"""

from fastapi import APIRouter, Depends

from sistema_experto import __version__
from ..dependencies import get_state, ServiceState
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    state: ServiceState = Depends(get_state)
) -> HealthResponse:
    """Estado del servidor y número de reglas cargadas"""
    return HealthResponse(
        status="ok" if state.is_loaded else "degraded",
        version=__version__,
        rules_loaded=len(state.engine.diseases) if state.engine else 0,
    )


@router.get("/")
async def root():
    """Página principal de la API"""
    return {
        "name": "SistemaExperto API",
        "version": __version__,
        "description": "Sistema experto de diagnóstico de enfermedades respiratorias",
        "docs": "/docs",
        "health": "/health",
    }
