"""
SistemaExperto — Esquemas de resultados del diagnóstico

Modelos Pydantic para:
- Severity: nivel de severidad (CRITICA > ALTA > MEDIA > BAJA)
- Diagnosis: resultado de una regla que coincide con un paciente
- DiagnosticReport: resultado completo para un paciente
"""

from typing import Dict, List
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Nivel de severidad"""
    CRITICA = "CRITICA"
    ALTA = "ALTA"
    MEDIA = "MEDIA"
    BAJA = "BAJA"

    @property
    def rank(self) -> int:
        """Posición ordinal: 3 = CRITICA ... 0 = BAJA"""
        return _SEVERITY_RANK[self]

    def __str__(self) -> str:
        return self.value


_SEVERITY_RANK = {
    Severity.BAJA: 0,
    Severity.MEDIA: 1,
    Severity.ALTA: 2,
    Severity.CRITICA: 3,
}


class Diagnosis(BaseModel):
    """
    Diagnóstico producido por una regla.

    Se crea en cada evaluación y nunca se modifica.

    Ejemplo:
        diagnosis = Diagnosis(
            disease="COVID-19",
            explanation="El paciente presenta:\\n  ✓ Fiebre alta ...",
            reported_symptoms=["fiebre_alta", "tos_seca", "perdida_olfato"]
        )
    """
    model_config = ConfigDict(frozen=True)

    disease: str = Field(..., description="Nombre de la enfermedad")
    explanation: str = Field(..., description="Explicación legible")

    # Todos los síntomas reportados por el paciente (no filtrados por regla)
    reported_symptoms: List[str] = Field(default_factory=list)


class DiagnosticReport(BaseModel):
    """
    Resultado completo del sistema experto para un paciente.

    Contiene exactamente lo que necesita el generador de reportes.
    """
    patient_id: str
    symptoms: List[str] = Field(default_factory=list)
    duration_days: int
    risk_factors: List[str] = Field(default_factory=list)

    diagnoses: List[Diagnosis] = Field(default_factory=list)
    severity: Severity

    exams: List[str] = Field(default_factory=list)
    treatments: List[str] = Field(default_factory=list)

    @property
    def diseases(self) -> List[str]:
        """Nombres de las enfermedades diagnosticadas"""
        return [d.disease for d in self.diagnoses]

    def to_summary(self) -> Dict:
        """Resumen corto para la UI"""
        return {
            "patient_id": self.patient_id,
            "diseases": self.diseases,
            "severity": self.severity.value,
            "exams": len(self.exams),
            "treatments": len(self.treatments),
        }
