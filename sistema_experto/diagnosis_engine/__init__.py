"""
SistemaExperto — Motor de diagnóstico (Diagnosis Engine)

Componentes:
- DiagnosticEngine: evaluación de reglas, severidad y explicaciones

Ejemplo de uso:
    from sistema_experto.diagnosis_engine import DiagnosticEngine
    from sistema_experto.schemas import Patient

    engine = DiagnosticEngine()

    patient = Patient(patient_id="paciente2", duration_days=5)
    for name in ["fiebre_alta", "tos_productiva", "dificultad_respirar", "dolor_pecho"]:
        patient.add_symptom(name)

    diagnoses = engine.evaluate(patient)
    print([d.disease for d in diagnoses])    # ['Neumonía']
    print(engine.severity(patient).value)    # ALTA
"""

from .engine import DiagnosticEngine, PNEUMONIA


__all__ = [
    "DiagnosticEngine",
    "PNEUMONIA",
]
