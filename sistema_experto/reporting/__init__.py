"""
SistemaExperto — Reportes

Componentes:
- report.py: ReportGenerator (reporte completo y explicaciones)
- samples.py: pacientes de demostración

Ejemplo de uso:
    from sistema_experto.reporting import ReportGenerator, sample_patients

    generator = ReportGenerator()
    for patient in sample_patients():
        print(generator.full_report(patient))
"""

from .report import ReportGenerator
from .samples import (
    covid_patient,
    pneumonia_patient,
    allergy_patient,
    sample_patients,
)


__all__ = [
    "ReportGenerator",
    "covid_patient",
    "pneumonia_patient",
    "allergy_patient",
    "sample_patients",
]
