"""
SistemaExperto API — Pydantic Models

Modelos para peticiones y respuestas de la REST API.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from sistema_experto.schemas import Patient


# === Request Models ===

class PatientRequest(BaseModel):
    """Datos del paciente a diagnosticar"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "patient_id": "paciente1",
                "duration_days": 3,
                "symptoms": ["fiebre_alta", "tos_seca", "perdida_olfato"],
                "risk_factors": [],
            }
        }
    )

    patient_id: str = Field(..., description="ID del paciente")
    duration_days: int = Field(..., description="Duración de los síntomas (días)")
    symptoms: List[str] = Field(default_factory=list, description="Síntomas reportados")
    risk_factors: List[str] = Field(default_factory=list, description="Factores de riesgo")

    def to_patient(self) -> Patient:
        """Construir el paciente mediante las operaciones de alta"""
        patient = Patient(patient_id=self.patient_id, duration_days=self.duration_days)
        for name in self.symptoms:
            patient.add_symptom(name)
        for factor in self.risk_factors:
            patient.add_risk_factor(factor)
        return patient


class ExplainRequest(PatientRequest):
    """Petición de explicación de una enfermedad"""
    disease: str = Field(..., description="Enfermedad a explicar")


# === Response Models ===

class ExplainResponse(BaseModel):
    """Explicación de una enfermedad (null si no se diagnosticó)"""
    disease: str
    diagnosed: bool
    explanation: Optional[str] = None


class ReportTextResponse(BaseModel):
    """Reporte en texto"""
    patient_id: str
    text: str


class RulesResponse(BaseModel):
    """Enfermedades en orden de registro"""
    diseases: List[str] = Field(default_factory=list)
    total: int = 0


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "ok"
    version: str = "1.0.0"
    rules_loaded: int = 0
