"""
SistemaExperto — Esquemas de datos del paciente

Modelos Pydantic para:
- Symptom: un síntoma identificado por su nombre
- Patient: síntomas, duración y factores de riesgo de un paciente
"""

from typing import List, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Symptom(BaseModel):
    """
    Síntoma del paciente.

    La identidad del síntoma es su nombre (sensible a mayúsculas, sin
    normalizar). Inmutable una vez creado.

    Ejemplo:
        symptom = Symptom(name="fiebre_alta")
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"name": "fiebre_alta"}},
    )

    name: str = Field(..., description="Nombre canónico del síntoma")

    def __str__(self) -> str:
        return self.name


class Patient(BaseModel):
    """
    Paciente con sus síntomas, la duración de los síntomas y los factores
    de riesgo.

    El id y la duración se fijan al construir el paciente. Los síntomas y
    factores de riesgo solo se añaden: no existe operación de borrado.

    Ejemplo:
        patient = Patient(patient_id="paciente1", duration_days=3)
        patient.add_symptom("fiebre_alta")
        patient.add_symptom(Symptom(name="tos_seca"))
        patient.add_risk_factor("fumador")
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "patient_id": "paciente1",
                "duration_days": 3,
                "symptoms": [{"name": "fiebre_alta"}, {"name": "tos_seca"}],
                "risk_factors": ["edad_avanzada"],
            }
        }
    )

    patient_id: str = Field(..., frozen=True, description="ID del paciente")
    duration_days: int = Field(
        ...,
        frozen=True,
        description="Duración de los síntomas en días (sin validar)"
    )

    # Síntomas (orden de inserción, sin duplicados por nombre).
    # Tuplas de solo lectura: únicamente cambian con add_symptom/add_risk_factor
    symptoms: Tuple[Symptom, ...] = Field(default=(), frozen=True)

    # Factores de riesgo (texto libre, se admiten duplicados)
    risk_factors: Tuple[str, ...] = Field(default=(), frozen=True)

    @field_validator("symptoms", mode="before")
    @classmethod
    def coerce_names(cls, v):
        """Permitir nombres de síntomas como cadenas"""
        if isinstance(v, (list, tuple)):
            return [Symptom(name=s) if isinstance(s, str) else s for s in v]
        return v

    @field_validator("symptoms")
    @classmethod
    def drop_duplicates(cls, v: Tuple[Symptom, ...]) -> Tuple[Symptom, ...]:
        """Eliminar duplicados por nombre conservando la primera aparición"""
        seen = set()
        unique = []
        for s in v:
            if s.name not in seen:
                seen.add(s.name)
                unique.append(s)
        return tuple(unique)

    @property
    def symptom_names(self) -> List[str]:
        """Nombres de los síntomas en orden de inserción"""
        return [s.name for s in self.symptoms]

    @property
    def has_risk_factors(self) -> bool:
        return len(self.risk_factors) > 0

    def has_symptom(self, name: str) -> bool:
        """¿El paciente presenta el síntoma?"""
        return any(s.name == name for s in self.symptoms)

    def add_symptom(self, symptom: Union[Symptom, str]) -> None:
        """Añadir un síntoma (se ignora si ya existe con el mismo nombre)"""
        if isinstance(symptom, str):
            symptom = Symptom(name=symptom)

        if not self.has_symptom(symptom.name):
            self._append("symptoms", symptom)

    def add_risk_factor(self, factor: str) -> None:
        """Añadir un factor de riesgo"""
        self._append("risk_factors", factor)

    def _append(self, name: str, item) -> None:
        # Los campos son frozen: se sustituye la tupla sin pasar por __setattr__
        self.__dict__[name] = self.__dict__[name] + (item,)
