"""Entidad de dominio Diagnostico."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from centrosalud.app.domain.value_objects import _format_datetime, _parse_datetime, _texto_vacio


@dataclass(slots=True, eq=False)
class Diagnostico:
    id: int = 0
    descripcion: str = ""
    fecha: datetime = datetime.min
    cita_id: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagnostico):
            return NotImplemented
        return self.descripcion == other.descripcion and self.fecha == other.fecha

    __hash__ = None  # type: ignore[assignment]

    def agregar_texto_descripcion(self, texto: Optional[str]) -> bool:
        """Añade texto al final de la descripción; nunca reescribe lo anterior."""
        if _texto_vacio(texto):
            return False
        self.descripcion = f"{self.descripcion} {texto}" if self.descripcion else texto
        return True

    def asociar_cita(self, cita_id: int) -> bool:
        # Sin guarda: una re-asociación sustituye a la anterior.
        self.cita_id = cita_id
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "descripcion": self.descripcion,
            "fecha": _format_datetime(self.fecha),
            "cita_id": self.cita_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Diagnostico":
        return cls(
            id=int(data["id"]),
            descripcion=data.get("descripcion") or "",
            fecha=_parse_datetime(data.get("fecha")) or datetime.min,
            cita_id=int(data.get("cita_id", 0)),
        )
