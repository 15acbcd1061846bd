"""
SistemaExperto — Módulo de esquemas de datos (schemas)

Modelos Pydantic para validación y serialización de datos.

Componentes:
- patient.py: Symptom, Patient
- diagnosis.py: Severity, Diagnosis, DiagnosticReport

Ejemplo de uso:
    from sistema_experto.schemas import Patient, Symptom

    patient = Patient(patient_id="paciente1", duration_days=3)
    patient.add_symptom("fiebre_alta")
    patient.add_symptom(Symptom(name="tos_seca"))

    # Serialización a JSON
    json_data = patient.model_dump_json()

    # Deserialización desde JSON
    patient_loaded = Patient.model_validate_json(json_data)
"""

# Patient schemas
from .patient import (
    Symptom,
    Patient,
)

# Diagnosis schemas
from .diagnosis import (
    Severity,
    Diagnosis,
    DiagnosticReport,
)


__all__ = [
    # Patient
    "Symptom",
    "Patient",

    # Diagnosis
    "Severity",
    "Diagnosis",
    "DiagnosticReport",
]
