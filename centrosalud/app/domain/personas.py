"""
Entidades de dominio relacionadas con personas.

Médico y paciente no heredan de una clase Persona: ambos contienen un
DatosPersona (valor inmutable) y exponen id/nombre a través de él.

Igualdad:
- DatosPersona: solo por id.
- Medico: igual que su persona (id).
- Paciente: id y número de utente.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional

from centrosalud.app.domain.value_objects import _format_date, _parse_date


@dataclass(frozen=True, slots=True, eq=False)
class DatosPersona:
    id: int = 0
    nombre: str = ""
    genero: str = ""
    fecha_nacimiento: Optional[date] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatosPersona):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "genero": self.genero,
            "fecha_nacimiento": _format_date(self.fecha_nacimiento),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DatosPersona":
        return cls(
            id=int(data["id"]),
            nombre=data.get("nombre") or "",
            genero=data.get("genero") or "",
            fecha_nacimiento=_parse_date(data.get("fecha_nacimiento")),
        )


@dataclass(slots=True, eq=False)
class Medico:
    """Médico. num_colegiado y especialidad no se asignan al crearlo desde un registro light."""

    persona: DatosPersona = field(default_factory=DatosPersona)
    especialidad: str = ""
    num_colegiado: int = 0
    puede_tomar_decisiones: bool = True
    citas_repositorio_id: int = 0

    @property
    def id(self) -> int:
        return self.persona.id

    @property
    def nombre(self) -> str:
        return self.persona.nombre

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Medico):
            return NotImplemented
        return self.persona == other.persona

    def __hash__(self) -> int:
        return hash(self.persona)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "persona": self.persona.to_dict(),
            "especialidad": self.especialidad,
            "num_colegiado": self.num_colegiado,
            "puede_tomar_decisiones": self.puede_tomar_decisiones,
            "citas_repositorio_id": self.citas_repositorio_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Medico":
        return cls(
            persona=DatosPersona.from_dict(data["persona"]),
            especialidad=data.get("especialidad") or "",
            num_colegiado=int(data.get("num_colegiado", 0)),
            puede_tomar_decisiones=bool(data.get("puede_tomar_decisiones", True)),
            citas_repositorio_id=int(data.get("citas_repositorio_id", 0)),
        )


@dataclass(slots=True, eq=False)
class Paciente:
    persona: DatosPersona = field(default_factory=DatosPersona)
    num_utente: int = 0
    diagnosticos_repositorio_id: int = 0
    citas_repositorio_id: int = 0

    @property
    def id(self) -> int:
        return self.persona.id

    @property
    def nombre(self) -> str:
        return self.persona.nombre

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Paciente):
            return NotImplemented
        return self.persona == other.persona and self.num_utente == other.num_utente

    def __hash__(self) -> int:
        return hash(self.persona)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "persona": self.persona.to_dict(),
            "num_utente": self.num_utente,
            "diagnosticos_repositorio_id": self.diagnosticos_repositorio_id,
            "citas_repositorio_id": self.citas_repositorio_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Paciente":
        return cls(
            persona=DatosPersona.from_dict(data["persona"]),
            num_utente=int(data.get("num_utente", 0)),
            diagnosticos_repositorio_id=int(data.get("diagnosticos_repositorio_id", 0)),
            citas_repositorio_id=int(data.get("citas_repositorio_id", 0)),
        )
