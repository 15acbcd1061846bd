"""
SistemaExperto — Reglas de diagnóstico

Componentes:
- base.py: protocolo Rule y formato de explicaciones
- respiratory.py: las cinco reglas respiratorias y default_rules()

Añadir una enfermedad = escribir una clase nueva que cumpla Rule y
registrarla en default_rules().
"""

from .base import Rule, format_explanation, EXPLANATION_HEADER
from .respiratory import (
    Covid19Rule,
    PneumoniaRule,
    BronchitisRule,
    InfluenzaRule,
    RespiratoryAllergyRule,
    default_rules,
)


__all__ = [
    "Rule",
    "format_explanation",
    "EXPLANATION_HEADER",
    "Covid19Rule",
    "PneumoniaRule",
    "BronchitisRule",
    "InfluenzaRule",
    "RespiratoryAllergyRule",
    "default_rules",
]
