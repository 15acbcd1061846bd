"""
SistemaExperto — Generador de reportes

Compone el texto del reporte a partir de las salidas del núcleo:
diagnósticos, severidad, exámenes y tratamientos.
"""

from typing import List, Optional

from sistema_experto.config import ReportConfig
from sistema_experto.diagnosis_engine import DiagnosticEngine
from sistema_experto.recommendations import RecommendationEngine
from sistema_experto.schemas import DiagnosticReport, Patient


class ReportGenerator:
    """
    Generador de reportes de diagnóstico.

    Ejemplo:
        generator = ReportGenerator()
        print(generator.full_report(patient))
        print(generator.explanation_text(patient, "COVID-19"))
    """

    def __init__(
        self,
        engine: Optional[DiagnosticEngine] = None,
        recommender: Optional[RecommendationEngine] = None,
        config: Optional[ReportConfig] = None
    ):
        self.engine = engine or DiagnosticEngine()
        self.recommender = recommender or RecommendationEngine(
            self.engine.config.recommendations
        )
        self.config = config or self.engine.config.report

    def build_report(self, patient: Patient) -> DiagnosticReport:
        """Ejecutar el núcleo completo para un paciente"""
        diagnoses = self.engine.evaluate(patient)
        severity = self.engine.severity(patient)

        return DiagnosticReport(
            patient_id=patient.patient_id,
            symptoms=patient.symptom_names,
            duration_days=patient.duration_days,
            risk_factors=list(patient.risk_factors),
            diagnoses=diagnoses,
            severity=severity,
            exams=self.recommender.recommend_exams(patient, diagnoses),
            treatments=self.recommender.recommend_treatments(patient, diagnoses, severity),
        )

    def render_report(self, report: DiagnosticReport) -> str:
        """Texto legible del reporte"""
        lines = [f"=== DIAGNÓSTICO PARA {report.patient_id} ===", ""]

        lines.append("SÍNTOMAS REPORTADOS:")
        lines.extend(f"  - {s}" for s in report.symptoms)

        lines += ["", f"DURACIÓN: {report.duration_days} días"]

        if report.risk_factors:
            lines += ["", "FACTORES DE RIESGO:"]
            lines.extend(f"  - {f}" for f in report.risk_factors)

        lines += ["", "POSIBLES ENFERMEDADES:"]
        lines += self._section(
            [f"  * {d}" for d in report.diseases],
            self.config.no_diagnosis_text
        )

        lines += ["", f"SEVERIDAD: {report.severity.value}"]

        lines += ["", "EXÁMENES RECOMENDADOS:"]
        lines += self._section(
            [f"  - {e}" for e in report.exams],
            self.config.no_exams_text
        )

        lines += ["", "TRATAMIENTOS SUGERIDOS:"]
        lines += self._section(
            [f"  - {t}" for t in report.treatments],
            self.config.no_treatments_text
        )

        lines += ["", "=" * self.config.separator_width, ""]
        return "\n".join(lines)

    def full_report(self, patient: Patient) -> str:
        return self.render_report(self.build_report(patient))

    def explanation_text(self, patient: Patient, disease: str) -> str:
        """
        ¿Por qué se diagnosticó una enfermedad?

        Si la enfermedad no se diagnosticó, lo indica en el texto.
        """
        explanation = self.engine.explain(patient, disease)
        if explanation is None:
            return f"No se diagnosticó {disease} para este paciente."

        return f"EXPLICACIÓN: ¿Por qué se diagnosticó {disease}?\n\n{explanation}"

    @staticmethod
    def _section(items: List[str], empty_text: str) -> List[str]:
        return items if items else [f"  {empty_text}"]
