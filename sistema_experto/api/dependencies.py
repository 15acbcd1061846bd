"""
SistemaExperto — API Dependencies

Dependency Injection para FastAPI.
Construye el motor, las recomendaciones y el generador de reportes una vez.
"""

from pathlib import Path
from typing import Optional
import threading

from sistema_experto.config import ExpertSystemConfig, get_default_config, load_config
from sistema_experto.diagnosis_engine import DiagnosticEngine
from sistema_experto.recommendations import RecommendationEngine
from sistema_experto.reporting import ReportGenerator

from .config import config


def resolve_system_config(config_path: Optional[str]) -> ExpertSystemConfig:
    """
    Configuración del sistema experto para el servicio.

    Sin ruta se usa la configuración por defecto. Una ruta que no existe es
    un error, igual que en scripts/run_report.py.
    """
    if not config_path:
        return get_default_config()

    if not Path(config_path).exists():
        print(f"❌ Configuración no encontrada: {config_path}")
        raise FileNotFoundError(f"Config not found: {config_path}")

    print(f"📦 Configuración: {config_path}")
    return load_config(config_path)


class ServiceState:
    """
    Estado del servicio: motor + recomendaciones + reportes.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.is_loaded = False
        self.system_config: Optional[ExpertSystemConfig] = None
        self.engine: Optional[DiagnosticEngine] = None
        self.recommender: Optional[RecommendationEngine] = None
        self.reporter: Optional[ReportGenerator] = None

    def load(self, config_path: Optional[str] = None) -> None:
        """Construir los componentes (una sola vez)"""
        if self.is_loaded:
            return

        self.system_config = resolve_system_config(config_path or config.config_path)

        self.engine = DiagnosticEngine.from_config(self.system_config)
        self.recommender = RecommendationEngine(self.system_config.recommendations)
        self.reporter = ReportGenerator(
            engine=self.engine,
            recommender=self.recommender,
            config=self.system_config.report,
        )

        self.is_loaded = True
        print(f"   ✅ Motor listo: {len(self.engine.diseases)} reglas")


# Instancia global
service_state = ServiceState()


def get_state() -> ServiceState:
    """Dependency: estado del servicio (se carga en el primer uso)"""
    if not service_state.is_loaded:
        service_state.load()
    return service_state
