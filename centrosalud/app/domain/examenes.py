"""Entidad de dominio Examen."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from centrosalud.app.domain.value_objects import _format_datetime, _parse_datetime, _texto_vacio


@dataclass(slots=True, eq=False)
class Examen:
    """
    Examen clínico de un paciente.

    La igualdad compara el "tipo de examen al mismo precio" (tipo, coste),
    no la identidad. El orden natural es ascendente por coste.
    """

    id: int = 0
    fecha: datetime = datetime.min
    paciente_id: int = 0
    tipo: str = ""
    resultado: Optional[str] = None
    coste: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Examen):
            return NotImplemented
        return self.tipo == other.tipo and self.coste == other.coste

    # Mutable en tipo/coste: no se puede usar como clave de dict/set.
    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: "Examen") -> bool:
        if not isinstance(other, Examen):
            return NotImplemented
        return self.coste < other.coste

    def actualizar_resultado(self, nuevo_resultado: Optional[str]) -> bool:
        if _texto_vacio(nuevo_resultado):
            return False
        self.resultado = nuevo_resultado
        return True

    def actualizar_coste(self, nuevo_coste: float) -> bool:
        """El coste tiene que ser estrictamente positivo."""
        if nuevo_coste <= 0:
            return False
        self.coste = float(nuevo_coste)
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fecha": _format_datetime(self.fecha),
            "paciente_id": self.paciente_id,
            "tipo": self.tipo,
            "resultado": self.resultado,
            "coste": self.coste,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Examen":
        return cls(
            id=int(data["id"]),
            fecha=_parse_datetime(data.get("fecha")) or datetime.min,
            paciente_id=int(data.get("paciente_id", 0)),
            tipo=data.get("tipo") or "",
            resultado=data.get("resultado"),
            coste=float(data.get("coste", 0.0)),
        )
