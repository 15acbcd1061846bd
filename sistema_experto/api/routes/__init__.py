"""
SistemaExperto — API Routes

Exportación de todos los routers.
"""

from .health import router as health_router
from .diagnosis import router as diagnosis_router

__all__ = [
    'health_router',
    'diagnosis_router',
]
