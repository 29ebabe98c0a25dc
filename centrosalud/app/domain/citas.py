"""Entidad de dominio Cita (consulta médica)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from centrosalud.app.domain.value_objects import _format_datetime, _parse_datetime


@dataclass(slots=True, eq=False)
class Cita:
    """
    Cita entre un paciente y un médico.

    examenes_repositorio_id, diagnosticos_repositorio_id y coste no se
    rellenan en ningún flujo: quedan a cero.
    """

    id: int = 0
    fecha: datetime = datetime.min
    paciente_id: int = 0
    medico_id: int = 0
    examenes_repositorio_id: int = 0
    diagnosticos_repositorio_id: int = 0
    coste: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cita):
            return NotImplemented
        return (
            self.id == other.id
            and self.fecha == other.fecha
            and self.paciente_id == other.paciente_id
            and self.medico_id == other.medico_id
        )

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fecha": _format_datetime(self.fecha),
            "paciente_id": self.paciente_id,
            "medico_id": self.medico_id,
            "examenes_repositorio_id": self.examenes_repositorio_id,
            "diagnosticos_repositorio_id": self.diagnosticos_repositorio_id,
            "coste": self.coste,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cita":
        return cls(
            id=int(data["id"]),
            fecha=_parse_datetime(data.get("fecha")) or datetime.min,
            paciente_id=int(data.get("paciente_id", 0)),
            medico_id=int(data.get("medico_id", 0)),
            examenes_repositorio_id=int(data.get("examenes_repositorio_id", 0)),
            diagnosticos_repositorio_id=int(data.get("diagnosticos_repositorio_id", 0)),
            coste=float(data.get("coste", 0.0)),
        )
