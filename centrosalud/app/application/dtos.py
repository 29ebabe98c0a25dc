"""
Registros light: la única forma de dato que entra y sale de los servicios.

Son bolsas de campos mutables sin validación; la validación vive en los
servicios. Un MedicoLight (o PacienteLight en una lectura concreta) hace
además de identidad de quien solicita la operación.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class PersonaLight:
    id: int = 0
    nombre: str = ""


@dataclass(slots=True)
class MedicoLight(PersonaLight):
    num_colegiado: int = 0
    puede_tomar_decisiones: bool = True


@dataclass(slots=True)
class PacienteLight(PersonaLight):
    num_utente: int = 0


@dataclass(slots=True)
class ExamenLight:
    id: int = 0
    tipo: str = ""
    fecha: datetime = datetime.min
    paciente_id: int = 0
    resultado: Optional[str] = None
    coste: float = 0.0


@dataclass(slots=True)
class DiagnosticoLight:
    id: int = 0
    fecha: datetime = datetime.min
    cita_id: int = 0
    descripcion: str = ""


@dataclass(slots=True)
class CitaLight:
    id: int = 0
    paciente_id: int = 0
    medico_id: int = 0
    fecha: datetime = datetime.min
