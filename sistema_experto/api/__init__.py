"""
SistemaExperto — Módulo REST API

FastAPI REST API para el sistema experto.

Componentes:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Dependencias y estado

Ejecución:
    uvicorn sistema_experto.api.app:app --reload --port 8000

Documentación:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET  /                         - Root info
    GET  /health                   - Health check
    GET  /api/rules                - Enfermedades registradas
    POST /api/diagnose             - Diagnóstico completo
    POST /api/diagnose/explain     - Explicación de una enfermedad
    POST /api/diagnose/report      - Reporte en texto
"""

from .app import app
from .dependencies import service_state, get_state


__all__ = [
    "app",
    "service_state",
    "get_state",
]
