"""
Tests del módulo recommendations

Ejecución: pytest tests/test_recommendations.py -v
"""

import pytest

from sistema_experto.diagnosis_engine import DiagnosticEngine
from sistema_experto.recommendations import RecommendationEngine, unique
from sistema_experto.schemas import Diagnosis, Patient, Severity


def _patient(symptoms, duration=3, risk_factors=()):
    patient = Patient(patient_id="test", duration_days=duration)
    for name in symptoms:
        patient.add_symptom(name)
    for factor in risk_factors:
        patient.add_risk_factor(factor)
    return patient


@pytest.fixture
def engine():
    return DiagnosticEngine()


@pytest.fixture
def recommender():
    return RecommendationEngine()


def _run(engine, recommender, patient):
    diagnoses = engine.evaluate(patient)
    severity = engine.severity(patient)
    return (
        recommender.recommend_exams(patient, diagnoses),
        recommender.recommend_treatments(patient, diagnoses, severity),
    )


def test_unique_keeps_first_occurrence():
    assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert unique([]) == []


def test_scenario_covid(engine, recommender):
    """Escenario A: PCR y antiinflamatorios"""
    patient = _patient(["fiebre_alta", "tos_seca", "perdida_olfato", "perdida_gusto"], 3)

    exams, treatments = _run(engine, recommender, patient)

    assert exams == ["PCR COVID-19"]
    assert treatments == ["Antiinflamatorios"]

    print(f"✓ Escenario A: {exams} / {treatments}")


def test_scenario_pneumonia_critical(engine, recommender):
    """Escenario B: solo hospitalización urgente"""
    patient = _patient(
        ["fiebre_alta", "tos_productiva", "dificultad_respirar", "dolor_pecho", "saturacion_baja"],
        5
    )

    exams, treatments = _run(engine, recommender, patient)

    assert treatments == ["Hospitalización Urgente"]
    assert exams == ["Rayos X de Tórax", "Hemograma Completo", "Oximetría"]

    print(f"✓ Escenario B: {exams} / {treatments}")


def test_scenario_allergy(engine, recommender):
    """Escenario C: antihistamínicos y reposo"""
    patient = _patient(["estornudos", "congestion_nasal", "mucosidad"], 7)

    exams, treatments = _run(engine, recommender, patient)

    assert exams == []
    assert treatments == ["Antihistamínicos", "Reposo e Hidratación"]

    print(f"✓ Escenario C: {treatments}")


def test_chest_xray_not_duplicated(engine, recommender):
    """Neumonía + dificultad respiratoria: rayos X una sola vez"""
    patient = _patient(["fiebre_alta", "dificultad_respirar", "dolor_pecho", "tos_seca"], 8)

    exams, _ = _run(engine, recommender, patient)

    assert exams.count("Rayos X de Tórax") == 1
    assert exams.count("Hemograma Completo") == 1
    assert exams == ["Rayos X de Tórax", "Hemograma Completo", "Oximetría"]

    print(f"✓ Sin duplicados: {exams}")


def test_breathing_difficulty_exams_without_diagnosis(recommender):
    """Dificultad respiratoria sin diagnóstico: oximetría + rayos X"""
    patient = _patient(["dificultad_respirar"], 1)

    assert recommender.recommend_exams(patient, []) == ["Oximetría", "Rayos X de Tórax"]


def test_prolonged_fever_blood_count(recommender):
    """Fiebre alta con duración > 5: hemograma"""
    assert recommender.recommend_exams(_patient(["fiebre_alta"], 6), []) == ["Hemograma Completo"]
    assert recommender.recommend_exams(_patient(["fiebre_alta"], 5), []) == []


def test_comorbidity_treatments(engine, recommender):
    """COVID-19 + Neumonía con severidad ALTA"""
    patient = _patient(
        ["fiebre_alta", "tos_seca", "perdida_olfato", "dificultad_respirar", "dolor_pecho"],
        3
    )

    exams, treatments = _run(engine, recommender, patient)

    assert engine.severity(patient) == Severity.ALTA
    assert exams == ["PCR COVID-19", "Rayos X de Tórax", "Hemograma Completo", "Oximetría"]
    assert treatments == ["Antivirales", "Antibióticos", "Antiinflamatorios"]

    print(f"✓ Comorbilidad: {treatments}")


def test_influenza_antivirals(engine, recommender):
    """Gripe: antivirales solo con factores de riesgo y duración <= 2"""
    symptoms = ["fiebre_alta", "dolor_muscular", "tos_seca"]

    _, with_risk = _run(engine, recommender, _patient(symptoms, 2, ["asma"]))
    _, without_risk = _run(engine, recommender, _patient(symptoms, 2))
    _, late = _run(engine, recommender, _patient(symptoms, 3, ["asma"]))

    assert with_risk == ["Antivirales", "Antiinflamatorios"]
    assert without_risk == ["Antiinflamatorios"]
    assert late == ["Antiinflamatorios"]

    print(f"✓ Gripe: {with_risk}")


def test_bronchitis_treatments(engine, recommender):
    """Bronquitis: antitusivos y reposo (BAJA)"""
    patient = _patient(["tos_productiva", "mucosidad"], 12)

    exams, treatments = _run(engine, recommender, patient)

    assert exams == []
    assert treatments == ["Antitusivos", "Reposo e Hidratación"]


def test_covid_antivirals_only_when_high(recommender):
    """COVID-19: antivirales solo con severidad ALTA"""
    patient = _patient(["tos_seca"], 2)
    diagnoses = [Diagnosis(disease="COVID-19", explanation="")]

    assert recommender.recommend_treatments(patient, diagnoses, Severity.ALTA) == ["Antivirales"]
    assert recommender.recommend_treatments(patient, diagnoses, Severity.MEDIA) == []
    assert recommender.recommend_treatments(patient, diagnoses, Severity.BAJA) == [
        "Reposo e Hidratación"
    ]


def test_no_diagnosis_fallbacks(recommender):
    """Sin diagnósticos: listas vacías o reposo"""
    patient = _patient([], 0)

    assert recommender.recommend_exams(patient, []) == []
    assert recommender.recommend_treatments(patient, [], Severity.MEDIA) == []
    assert recommender.recommend_treatments(patient, [], Severity.BAJA) == ["Reposo e Hidratación"]


def test_recommendations_are_idempotent(engine, recommender):
    """Dos llamadas dan el mismo resultado"""
    patient = _patient(["fiebre_alta", "dificultad_respirar", "dolor_pecho", "tos_seca"], 8)

    assert _run(engine, recommender, patient) == _run(engine, recommender, patient)


def test_custom_labels():
    """Etiquetas desde la configuración"""
    from sistema_experto.config import RecommendationConfig, TreatmentLabels

    config = RecommendationConfig(treatments=TreatmentLabels(hospitalization="UCI"))
    recommender = RecommendationEngine(config)

    assert recommender.recommend_treatments(_patient([], 1), [], Severity.CRITICA) == ["UCI"]
