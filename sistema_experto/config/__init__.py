"""SistemaExperto — Módulo de configuración"""
from .settings import (
    ExpertSystemConfig,
    get_default_config,
    RuleThresholdsConfig,
    RecommendationConfig,
    ExamLabels,
    TreatmentLabels,
    ReportConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "ExpertSystemConfig",
    "get_default_config",
    "RuleThresholdsConfig",
    "RecommendationConfig",
    "ExamLabels",
    "TreatmentLabels",
    "ReportConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
