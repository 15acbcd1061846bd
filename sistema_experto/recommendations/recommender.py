"""
SistemaExperto — Sistema de recomendaciones

RecommendationEngine deriva, a partir de los diagnósticos y del paciente:
- exámenes recomendados
- tratamientos sugeridos

Ambas listas se devuelven sin duplicados, conservando el orden de la
primera aparición.
"""

from typing import Iterable, List, Optional

from sistema_experto.config import RecommendationConfig
from sistema_experto.schemas import Diagnosis, Patient, Severity
from sistema_experto.rules import (
    Covid19Rule,
    PneumoniaRule,
    BronchitisRule,
    InfluenzaRule,
    RespiratoryAllergyRule,
)


COVID19 = Covid19Rule.disease_name
PNEUMONIA = PneumoniaRule.disease_name
BRONCHITIS = BronchitisRule.disease_name
INFLUENZA = InfluenzaRule.disease_name
ALLERGY = RespiratoryAllergyRule.disease_name


def unique(items: Iterable[str]) -> List[str]:
    """Quitar duplicados conservando el orden"""
    return list(dict.fromkeys(items))


class RecommendationEngine:
    """
    Recomendaciones de exámenes y tratamientos.

    Ejemplo:
        recommender = RecommendationEngine()
        diagnoses = engine.evaluate(patient)
        severity = engine.severity(patient)

        exams = recommender.recommend_exams(patient, diagnoses)
        treatments = recommender.recommend_treatments(patient, diagnoses, severity)
    """

    def __init__(self, config: Optional[RecommendationConfig] = None):
        self.config = config or RecommendationConfig()

    def recommend_exams(
        self,
        patient: Patient,
        diagnoses: List[Diagnosis]
    ) -> List[str]:
        """
        Exámenes recomendados.

        Args:
            patient: Paciente
            diagnoses: Diagnósticos del motor (en orden)

        Returns:
            Lista de exámenes sin duplicados
        """
        labels = self.config.exams
        exams = []

        for diagnosis in diagnoses:
            if diagnosis.disease == COVID19:
                exams.append(labels.pcr)
            elif diagnosis.disease == PNEUMONIA:
                exams.append(labels.chest_xray)
                exams.append(labels.blood_count)

        if patient.has_symptom("dificultad_respirar"):
            exams.append(labels.oximetry)
            if labels.chest_xray not in exams:
                exams.append(labels.chest_xray)

        if (patient.has_symptom("fiebre_alta")
                and patient.duration_days > self.config.fever_blood_count_min_days):
            if labels.blood_count not in exams:
                exams.append(labels.blood_count)

        return unique(exams)

    def recommend_treatments(
        self,
        patient: Patient,
        diagnoses: List[Diagnosis],
        severity: Severity
    ) -> List[str]:
        """
        Tratamientos sugeridos.

        Con severidad CRITICA solo se sugiere la hospitalización urgente.

        Args:
            patient: Paciente
            diagnoses: Diagnósticos del motor (en orden)
            severity: Severidad calculada por el motor

        Returns:
            Lista de tratamientos sin duplicados
        """
        labels = self.config.treatments

        if severity == Severity.CRITICA:
            return [labels.hospitalization]

        treatments = []

        for diagnosis in diagnoses:
            if diagnosis.disease == PNEUMONIA:
                treatments.append(labels.antibiotics)
            elif diagnosis.disease == COVID19:
                if severity == Severity.ALTA:
                    treatments.append(labels.antivirals)
            elif diagnosis.disease == INFLUENZA:
                if (patient.has_risk_factors
                        and patient.duration_days <= self.config.flu_antiviral_max_days):
                    treatments.append(labels.antivirals)
            elif diagnosis.disease == BRONCHITIS:
                treatments.append(labels.antitussives)
            elif diagnosis.disease == ALLERGY:
                treatments.append(labels.antihistamines)

        if severity == Severity.BAJA:
            treatments.append(labels.rest)

        if patient.has_symptom("fiebre_alta"):
            treatments.append(labels.anti_inflammatories)

        return unique(treatments)
