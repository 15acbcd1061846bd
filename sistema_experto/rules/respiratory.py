"""
SistemaExperto — Reglas de enfermedades respiratorias

Cinco reglas de diagnóstico diferencial:

| Enfermedad            | Requiere                                                       | Excluye                       | Duración |
|-----------------------|----------------------------------------------------------------|-------------------------------|----------|
| COVID-19              | fiebre_alta, tos_seca, perdida_olfato/perdida_gusto             | -                             | <= 7     |
| Neumonía              | fiebre_alta, dificultad_respirar, dolor_pecho, tos_*           | -                             | -        |
| Bronquitis            | tos_productiva, mucosidad                                      | dificultad_respirar           | > 10     |
| Gripe                 | fiebre_alta, dolor_muscular, tos_*                             | perdida_olfato                | <= 10    |
| Alergia Respiratoria  | estornudos, congestion_nasal                                   | fiebre_alta, fiebre_moderada  | -        |

Las líneas de la explicación siguen el orden de declaración de cada regla y
solo aparecen si su condición se cumple.
"""

from typing import List, Optional

from sistema_experto.config import RuleThresholdsConfig
from sistema_experto.schemas import Patient

from .base import Rule, format_explanation


class Covid19Rule:
    """COVID-19: fiebre alta + tos seca + pérdida de olfato/gusto, fase inicial"""

    disease_name = "COVID-19"

    def __init__(self, max_days: int = 7):
        self.max_days = max_days

    def evaluate(self, p: Patient) -> bool:
        return (
            p.has_symptom("fiebre_alta")
            and p.has_symptom("tos_seca")
            and (p.has_symptom("perdida_olfato") or p.has_symptom("perdida_gusto"))
            and p.duration_days <= self.max_days
        )

    def explain(self, p: Patient) -> str:
        lines = []
        if p.has_symptom("fiebre_alta"):
            lines.append("Fiebre alta (síntoma clave de COVID-19)")
        if p.has_symptom("tos_seca"):
            lines.append("Tos seca (común en COVID-19)")
        if p.has_symptom("perdida_olfato") or p.has_symptom("perdida_gusto"):
            lines.append("Pérdida de olfato/gusto (síntoma característico)")
        lines.append(f"Duración: {p.duration_days} días (típico de fase inicial)")
        return format_explanation(lines)


class PneumoniaRule:
    """Neumonía: fiebre alta + dificultad respiratoria + dolor de pecho + tos"""

    disease_name = "Neumonía"

    def evaluate(self, p: Patient) -> bool:
        return (
            p.has_symptom("fiebre_alta")
            and p.has_symptom("dificultad_respirar")
            and p.has_symptom("dolor_pecho")
            and (p.has_symptom("tos_productiva") or p.has_symptom("tos_seca"))
        )

    def explain(self, p: Patient) -> str:
        lines = []
        if p.has_symptom("fiebre_alta"):
            lines.append("Fiebre alta")
        if p.has_symptom("dificultad_respirar"):
            lines.append("Dificultad respiratoria (síntoma grave)")
        if p.has_symptom("dolor_pecho"):
            lines.append("Dolor en el pecho")
        return format_explanation(lines)


class BronchitisRule:
    """Bronquitis: tos productiva con mucosidad prolongada, sin dificultad respiratoria"""

    disease_name = "Bronquitis"

    def __init__(self, min_days: int = 10):
        self.min_days = min_days

    def evaluate(self, p: Patient) -> bool:
        return (
            p.has_symptom("tos_productiva")
            and p.has_symptom("mucosidad")
            and p.duration_days > self.min_days
            and not p.has_symptom("dificultad_respirar")
        )

    def explain(self, p: Patient) -> str:
        lines = []
        if p.has_symptom("tos_productiva") and p.has_symptom("mucosidad"):
            lines.append("Tos con mucosidad")
        lines.append(f"Duración prolongada: {p.duration_days} días")
        return format_explanation(lines)


class InfluenzaRule:
    """Gripe: fiebre alta + dolor muscular + tos, sin pérdida de olfato"""

    disease_name = "Gripe"

    def __init__(self, max_days: int = 10):
        self.max_days = max_days

    def evaluate(self, p: Patient) -> bool:
        return (
            p.has_symptom("fiebre_alta")
            and p.has_symptom("dolor_muscular")
            and (p.has_symptom("tos_seca") or p.has_symptom("tos_productiva"))
            and not p.has_symptom("perdida_olfato")
            and p.duration_days <= self.max_days
        )

    def explain(self, p: Patient) -> str:
        lines = []
        if p.has_symptom("fiebre_alta"):
            lines.append("Fiebre alta")
        if p.has_symptom("dolor_muscular"):
            lines.append("Dolor muscular (muy común en gripe)")
        if not p.has_symptom("perdida_olfato"):
            lines.append("Ausencia de pérdida de olfato (descarta COVID-19)")
        return format_explanation(lines)


class RespiratoryAllergyRule:
    """Alergia respiratoria: estornudos + congestión nasal, sin fiebre"""

    disease_name = "Alergia Respiratoria"

    def evaluate(self, p: Patient) -> bool:
        return (
            p.has_symptom("estornudos")
            and p.has_symptom("congestion_nasal")
            and not p.has_symptom("fiebre_alta")
            and not p.has_symptom("fiebre_moderada")
        )

    def explain(self, p: Patient) -> str:
        lines = []
        if p.has_symptom("estornudos"):
            lines.append("Estornudos frecuentes")
        if p.has_symptom("congestion_nasal"):
            lines.append("Congestión nasal")
        if not p.has_symptom("fiebre_alta") and not p.has_symptom("fiebre_moderada"):
            lines.append("Ausencia de fiebre (descarta infección)")
        return format_explanation(lines)


def default_rules(thresholds: Optional[RuleThresholdsConfig] = None) -> List[Rule]:
    """
    Conjunto fijo de reglas en orden de registro.

    El orden determina el orden de los diagnósticos devueltos.
    """
    thresholds = thresholds or RuleThresholdsConfig()
    return [
        Covid19Rule(max_days=thresholds.covid_max_days),
        PneumoniaRule(),
        BronchitisRule(min_days=thresholds.bronchitis_min_days),
        InfluenzaRule(max_days=thresholds.flu_max_days),
        RespiratoryAllergyRule(),
    ]
