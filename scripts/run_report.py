#!/usr/bin/env python3
"""
SistemaExperto — Reportes de los pacientes de ejemplo

Ejecución:
    python scripts/run_report.py
    python scripts/run_report.py --verbose
    python scripts/run_report.py --config config.yaml --explain COVID-19
"""

import sys
import argparse
from pathlib import Path

# Añadimos la raíz del proyecto al path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sistema_experto.config import get_default_config, load_config
from sistema_experto.diagnosis_engine import DiagnosticEngine
from sistema_experto.reporting import ReportGenerator, sample_patients


def main():
    parser = argparse.ArgumentParser(description='SistemaExperto — reportes de ejemplo')
    parser.add_argument('--config', default=None, help='YAML con la configuración del sistema')
    parser.add_argument('--explain', default='COVID-19',
                        help='Enfermedad a explicar para el primer paciente')
    parser.add_argument('--verbose', action='store_true', help='Mostrar la traza de las reglas')

    args = parser.parse_args()

    config = load_config(args.config) if args.config else get_default_config()
    engine = DiagnosticEngine.from_config(config, verbose=args.verbose)
    generator = ReportGenerator(engine=engine)

    patients = sample_patients()

    for i, patient in enumerate(patients):
        print(generator.full_report(patient))
        if i == 0 and args.explain:
            print(generator.explanation_text(patient, args.explain))


if __name__ == "__main__":
    main()
