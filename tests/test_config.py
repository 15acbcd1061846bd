"""Test del módulo config"""
from sistema_experto.config import (
    ExpertSystemConfig,
    get_default_config,
    load_config,
    save_config,
)


def test_default_config():
    """Valores por defecto"""
    config = get_default_config()

    assert config.project_name == "SistemaExperto"
    assert config.rules.covid_max_days == 7
    assert config.rules.bronchitis_min_days == 10
    assert config.rules.flu_max_days == 10
    assert config.recommendations.fever_blood_count_min_days == 5
    assert config.recommendations.flu_antiviral_max_days == 2
    assert config.recommendations.exams.chest_xray == "Rayos X de Tórax"
    assert config.recommendations.treatments.hospitalization == "Hospitalización Urgente"
    assert config.report.separator_width == 50

    print(f"✓ Default config: {config.project_name} {config.version}")


def test_from_dict_partial():
    """Claves ausentes toman el valor por defecto"""
    config = ExpertSystemConfig.from_dict({
        "rules": {"covid_max_days": 14},
        "recommendations": {"treatments": {"rest": "Reposo"}},
    })

    assert config.rules.covid_max_days == 14
    assert config.rules.flu_max_days == 10
    assert config.recommendations.treatments.rest == "Reposo"
    assert config.recommendations.treatments.antivirals == "Antivirales"
    assert config.report.no_exams_text == "Ninguno específico por el momento"

    assert ExpertSystemConfig.from_dict(None) == ExpertSystemConfig()

    print("✓ from_dict parcial")


def test_yaml_save_and_load(tmp_path):
    """Guardar y cargar YAML"""
    config = ExpertSystemConfig()
    config.rules.bronchitis_min_days = 14
    config.recommendations.exams.oximetry = "Pulsioximetría"

    path = tmp_path / "configs" / "sistema.yaml"
    save_config(config, str(path))

    assert path.exists()

    loaded = load_config(str(path))
    assert loaded == config
    assert loaded.rules.bronchitis_min_days == 14
    assert loaded.recommendations.exams.oximetry == "Pulsioximetría"

    print(f"✓ YAML: {path.name}")


def demo():
    print("=" * 50)
    print("SistemaExperto — Test de configuración")
    print("=" * 50)

    config = get_default_config()

    print(f"Versión: {config.version}")
    print(f"COVID-19 <= {config.rules.covid_max_days} días")
    print(f"Bronquitis > {config.rules.bronchitis_min_days} días")
    print(f"Gripe <= {config.rules.flu_max_days} días")

    print("=" * 50)
    print("✅ ¡Correcto!")


if __name__ == "__main__":
    demo()
