"""
SistemaExperto — Sistema experto de diagnóstico de enfermedades respiratorias

Arquitectura: reglas independientes + cascada de severidad + recomendaciones

Módulos:
- config: Configuración del sistema
- schemas: Modelos de datos (paciente, diagnóstico, reporte)
- rules: Reglas de diagnóstico por enfermedad
- diagnosis_engine: Motor de diagnóstico y severidad
- recommendations: Exámenes y tratamientos
- reporting: Reportes de texto y pacientes de ejemplo
- api: Backend API
"""

__version__ = "1.0.0"

from .config import ExpertSystemConfig, get_default_config
from .schemas import Symptom, Patient, Diagnosis, Severity, DiagnosticReport
from .diagnosis_engine import DiagnosticEngine
from .recommendations import RecommendationEngine
