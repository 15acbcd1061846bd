"""SistemaExperto — Pacientes de ejemplo"""
from typing import List

from sistema_experto.schemas import Patient


def covid_patient() -> Patient:
    p = Patient(patient_id="paciente1", duration_days=3)
    for name in ["fiebre_alta", "tos_seca", "dolor_muscular",
                 "perdida_olfato", "perdida_gusto", "fatiga"]:
        p.add_symptom(name)
    return p


def pneumonia_patient() -> Patient:
    p = Patient(patient_id="paciente2", duration_days=5)
    for name in ["fiebre_alta", "tos_productiva", "dificultad_respirar",
                 "dolor_pecho", "saturacion_baja"]:
        p.add_symptom(name)
    p.add_risk_factor("edad_avanzada")
    p.add_risk_factor("fumador")
    return p


def allergy_patient() -> Patient:
    p = Patient(patient_id="paciente3", duration_days=7)
    for name in ["estornudos", "congestion_nasal", "mucosidad", "dolor_cabeza"]:
        p.add_symptom(name)
    return p


def sample_patients() -> List[Patient]:
    """Los tres pacientes de demostración, creados de nuevo en cada llamada"""
    return [covid_patient(), pneumonia_patient(), allergy_patient()]
