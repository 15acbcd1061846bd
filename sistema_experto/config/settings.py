"""
SistemaExperto — Configuración del sistema

Todos los parámetros del sistema agrupados en dataclasses para:
- Tipado
- Acceso sencillo mediante config.rules.covid_max_days
- Serialización a YAML
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


# =============================================================================
# RULES CONFIGURATION
# =============================================================================

@dataclass
class RuleThresholdsConfig:
    """Umbrales de duración de las reglas (días)"""

    covid_max_days: int = 7          # COVID-19: duración <= 7
    bronchitis_min_days: int = 10    # Bronquitis: duración > 10
    flu_max_days: int = 10           # Gripe: duración <= 10


# =============================================================================
# RECOMMENDATIONS CONFIGURATION
# =============================================================================

@dataclass
class ExamLabels:
    """Nombres de los exámenes recomendados"""
    pcr: str = "PCR COVID-19"
    chest_xray: str = "Rayos X de Tórax"
    blood_count: str = "Hemograma Completo"
    oximetry: str = "Oximetría"


@dataclass
class TreatmentLabels:
    """Nombres de los tratamientos sugeridos"""
    hospitalization: str = "Hospitalización Urgente"
    antibiotics: str = "Antibióticos"
    antivirals: str = "Antivirales"
    antitussives: str = "Antitusivos"
    antihistamines: str = "Antihistamínicos"
    rest: str = "Reposo e Hidratación"
    anti_inflammatories: str = "Antiinflamatorios"


@dataclass
class RecommendationConfig:
    """Parámetros del sistema de recomendaciones"""

    # Fiebre alta con duración > N días -> hemograma
    fever_blood_count_min_days: int = 5

    # Gripe con factores de riesgo y duración <= N días -> antivirales
    flu_antiviral_max_days: int = 2

    exams: ExamLabels = field(default_factory=ExamLabels)
    treatments: TreatmentLabels = field(default_factory=TreatmentLabels)


# =============================================================================
# REPORT CONFIGURATION
# =============================================================================

@dataclass
class ReportConfig:
    """Parámetros del generador de reportes"""
    separator_width: int = 50
    no_diagnosis_text: str = "No se puede determinar con los síntomas actuales"
    no_exams_text: str = "Ninguno específico por el momento"
    no_treatments_text: str = "Consultar con médico"


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

def _build(cls, data: Optional[Dict[str, Any]]):
    """Construir un dataclass (posiblemente anidado) desde un dict"""
    if not data:
        return cls()

    kwargs = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        nested = _NESTED.get((cls, f.name))
        kwargs[f.name] = _build(nested, value) if nested else value
    return cls(**kwargs)


@dataclass
class ExpertSystemConfig:
    """
    Configuración principal de SistemaExperto

    Reúne todos los parámetros del sistema en un solo lugar.

    Ejemplo:
        config = ExpertSystemConfig()
        print(config.rules.covid_max_days)  # 7
        print(config.recommendations.treatments.rest)  # Reposo e Hidratación
    """

    # Metadatos
    version: str = "1.0.0"
    project_name: str = "SistemaExperto"

    # Componentes
    rules: RuleThresholdsConfig = field(default_factory=RuleThresholdsConfig)
    recommendations: RecommendationConfig = field(default_factory=RecommendationConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ExpertSystemConfig":
        """Crear la configuración desde un dict (p.ej. cargado de YAML)"""
        return _build(cls, data)


_NESTED = {
    (ExpertSystemConfig, "rules"): RuleThresholdsConfig,
    (ExpertSystemConfig, "recommendations"): RecommendationConfig,
    (ExpertSystemConfig, "report"): ReportConfig,
    (RecommendationConfig, "exams"): ExamLabels,
    (RecommendationConfig, "treatments"): TreatmentLabels,
}


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> ExpertSystemConfig:
    """Obtener la configuración por defecto"""
    return ExpertSystemConfig()
