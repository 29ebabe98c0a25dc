# infrastructure/memoria/repos_citas.py
"""
Repositorio en memoria para Citas.

Responsabilidades:
- Alta/baja/búsqueda de citas por id
- Conversión CitaLight <-> Cita

No contiene:
- Comprobación de que paciente o médico existan
- Cálculo de costes
"""

from __future__ import annotations

from typing import Any, Dict

from centrosalud.app.application.dtos import CitaLight
from centrosalud.app.domain.citas import Cita
from centrosalud.app.domain.repositorios import RepositorioCitas
from centrosalud.app.infrastructure.memoria.base import RepositorioEnMemoria


class RepositorioCitasMemoria(RepositorioEnMemoria[Cita, CitaLight], RepositorioCitas):
    TIPO = "citas"
    ENTIDAD = "una cita"

    def _entidad_desde_dict(self, data: Dict[str, Any]) -> Cita:
        return Cita.from_dict(data)

    def _entidad_desde_light(self, light: CitaLight) -> Cita:
        return Cita(
            id=light.id,
            fecha=light.fecha,
            paciente_id=light.paciente_id,
            medico_id=light.medico_id,
        )

    def _light_desde_entidad(self, entidad: Cita) -> CitaLight:
        return CitaLight(
            id=entidad.id,
            paciente_id=entidad.paciente_id,
            medico_id=entidad.medico_id,
            fecha=entidad.fecha,
        )
