"""
SistemaExperto — Motor de diagnóstico

DiagnosticEngine ejecuta el conjunto fijo de reglas sobre un paciente:
1. evaluate: todas las reglas, en orden de registro -> diagnósticos
2. severity: cascada ordenada CRITICA -> ALTA -> MEDIA -> BAJA
3. explain: explicación de una enfermedad diagnosticada (o None)

Las reglas son independientes: varias pueden coincidir con el mismo
paciente (diagnóstico diferencial) y ninguna ve el resultado de otra.
"""

from typing import List, Optional, Sequence

from sistema_experto.config import ExpertSystemConfig, get_default_config
from sistema_experto.schemas import Diagnosis, Patient, Severity
from sistema_experto.rules import Rule, default_rules


PNEUMONIA = "Neumonía"


class DiagnosticEngine:
    """
    Motor de diagnóstico basado en reglas.

    Ejemplo de uso:
        engine = DiagnosticEngine()

        patient = Patient(patient_id="paciente1", duration_days=3)
        for name in ["fiebre_alta", "tos_seca", "perdida_olfato"]:
            patient.add_symptom(name)

        for d in engine.evaluate(patient):
            print(d.disease)

        print(engine.severity(patient))     # Severity.MEDIA
        print(engine.explain(patient, "COVID-19"))
    """

    def __init__(
        self,
        rules: Optional[Sequence[Rule]] = None,
        config: Optional[ExpertSystemConfig] = None,
        verbose: bool = False
    ):
        """
        Args:
            rules: Reglas en orden de registro (por defecto default_rules)
            config: Configuración del sistema
            verbose: Mostrar la traza de evaluación
        """
        self.config = config or get_default_config()
        if rules is None:
            rules = default_rules(self.config.rules)

        # Lista fija, construida una sola vez
        self._rules = tuple(rules)
        self.verbose = verbose

    @classmethod
    def from_config(
        cls,
        config: ExpertSystemConfig,
        verbose: bool = False
    ) -> "DiagnosticEngine":
        """Crear el motor con las reglas por defecto y la configuración dada"""
        return cls(config=config, verbose=verbose)

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    @property
    def diseases(self) -> List[str]:
        """Enfermedades que el motor puede diagnosticar, en orden de registro"""
        return [r.disease_name for r in self._rules]

    # =========================================================================
    # EVALUATION
    # =========================================================================

    def evaluate(self, patient: Patient) -> List[Diagnosis]:
        """
        Ejecutar todas las reglas sobre el paciente.

        Args:
            patient: Paciente

        Returns:
            Diagnósticos en orden de registro de las reglas
        """
        diagnoses = []

        for rule in self._rules:
            matched = rule.evaluate(patient)

            if self.verbose:
                mark = "✓" if matched else "✗"
                print(f"   {mark} {rule.disease_name} [{patient.patient_id}]")

            if matched:
                diagnoses.append(Diagnosis(
                    disease=rule.disease_name,
                    explanation=rule.explain(patient),
                    reported_symptoms=self.relevant_symptoms(patient, rule),
                ))

        return diagnoses

    def relevant_symptoms(self, patient: Patient, rule: Rule) -> List[str]:
        """
        Síntomas asociados a un diagnóstico.

        Devuelve todos los síntomas reportados por el paciente, sin filtrar
        por los que usa la regla.
        """
        return patient.symptom_names

    # =========================================================================
    # SEVERITY
    # =========================================================================

    def severity(self, patient: Patient) -> Severity:
        """
        Calcular la severidad (la primera rama que se cumple gana).

        1. CRITICA: saturacion_baja + dificultad_respirar
        2. ALTA: Neumonía diagnosticada, o dificultad_respirar + fiebre_alta
        3. MEDIA: fiebre_alta
        4. BAJA: en otro caso
        """
        level = self._classify(patient)

        if self.verbose:
            print(f"   Severidad [{patient.patient_id}]: {level.value}")

        return level

    def _classify(self, patient: Patient) -> Severity:
        if (patient.has_symptom("saturacion_baja")
                and patient.has_symptom("dificultad_respirar")):
            return Severity.CRITICA

        # Se reevalúa en cada llamada: el paciente pudo cambiar
        diagnoses = self.evaluate(patient)
        if any(d.disease == PNEUMONIA for d in diagnoses):
            return Severity.ALTA

        if (patient.has_symptom("dificultad_respirar")
                and patient.has_symptom("fiebre_alta")):
            return Severity.ALTA

        if patient.has_symptom("fiebre_alta"):
            return Severity.MEDIA

        return Severity.BAJA

    # =========================================================================
    # EXPLANATION
    # =========================================================================

    def explain(self, patient: Patient, disease: str) -> Optional[str]:
        """
        Explicación de una enfermedad diagnosticada.

        Returns:
            Texto de la explicación, o None si la enfermedad no se
            diagnosticó para este paciente
        """
        for diagnosis in self.evaluate(patient):
            if diagnosis.disease == disease:
                return diagnosis.explanation
        return None

    def __repr__(self) -> str:
        return f"DiagnosticEngine(rules={self.diseases})"
