"""
SistemaExperto — API Configuration

Configuración del servidor FastAPI y ruta opcional al YAML del sistema.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Configuración del servidor API"""

    # Servidor
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # YAML con la configuración del sistema experto (opcional)
    config_path: Optional[str] = None

    # API
    api_prefix: str = "/api"
    api_title: str = "SistemaExperto API"
    api_description: str = "Sistema experto de diagnóstico de enfermedades respiratorias"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Crear la configuración desde variables de entorno"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            config_path=os.getenv("SISTEMA_EXPERTO_CONFIG"),
        )


# Configuración global
config = APIConfig.from_env()
