"""
SistemaExperto — Contrato de las reglas de diagnóstico

Una regla es cualquier objeto con:
- disease_name: enfermedad que diagnostica
- evaluate(patient) -> bool: ¿coincide el paciente?
- explain(patient) -> str: explicación legible

No hay clase base común: cada enfermedad es una implementación
independiente que cumple el protocolo Rule.
"""

from typing import List, Protocol, runtime_checkable

from sistema_experto.schemas import Patient


EXPLANATION_HEADER = "El paciente presenta:"


@runtime_checkable
class Rule(Protocol):
    """Predicado sobre un paciente + generador de explicación"""

    disease_name: str

    def evaluate(self, patient: Patient) -> bool:
        ...

    def explain(self, patient: Patient) -> str:
        ...


def format_explanation(lines: List[str]) -> str:
    """Explicación: cabecera + una línea '  ✓ ...' por condición"""
    body = "".join(f"  ✓ {line}\n" for line in lines)
    return f"{EXPLANATION_HEADER}\n{body}"
