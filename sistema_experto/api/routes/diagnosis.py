"""
SistemaExperto — Diagnosis Routes

Endpoints de diagnóstico, explicación y reporte.
"""

from fastapi import APIRouter, Depends

from sistema_experto.schemas import DiagnosticReport
from ..dependencies import get_state, ServiceState
from ..models import (
    PatientRequest,
    ExplainRequest,
    ExplainResponse,
    ReportTextResponse,
    RulesResponse,
)

router = APIRouter(tags=["Diagnosis"])


@router.get("/rules", response_model=RulesResponse)
async def list_rules(
    state: ServiceState = Depends(get_state)
) -> RulesResponse:
    """Enfermedades que el motor puede diagnosticar, en orden de registro"""
    diseases = state.engine.diseases
    return RulesResponse(diseases=diseases, total=len(diseases))


@router.post("/diagnose", response_model=DiagnosticReport)
async def diagnose(
    request: PatientRequest,
    state: ServiceState = Depends(get_state)
) -> DiagnosticReport:
    """
    Diagnóstico completo de un paciente.

    Ejemplo:
    ```json
    {
        "patient_id": "paciente1",
        "duration_days": 3,
        "symptoms": ["fiebre_alta", "tos_seca", "perdida_olfato"]
    }
    ```
    """
    return state.reporter.build_report(request.to_patient())


@router.post("/diagnose/explain", response_model=ExplainResponse)
async def explain(
    request: ExplainRequest,
    state: ServiceState = Depends(get_state)
) -> ExplainResponse:
    """¿Por qué se diagnosticó una enfermedad? (explanation = null si no)"""
    explanation = state.engine.explain(request.to_patient(), request.disease)
    return ExplainResponse(
        disease=request.disease,
        diagnosed=explanation is not None,
        explanation=explanation,
    )


@router.post("/diagnose/report", response_model=ReportTextResponse)
async def report_text(
    request: PatientRequest,
    state: ServiceState = Depends(get_state)
) -> ReportTextResponse:
    """Reporte completo en texto"""
    return ReportTextResponse(
        patient_id=request.patient_id,
        text=state.reporter.full_report(request.to_patient()),
    )
