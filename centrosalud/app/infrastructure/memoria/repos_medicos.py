# infrastructure/memoria/repos_medicos.py
"""Repositorio en memoria para Médicos."""

from __future__ import annotations

from typing import Any, Dict, Optional

from centrosalud.app.application.dtos import MedicoLight
from centrosalud.app.domain.personas import DatosPersona, Medico
from centrosalud.app.domain.repositorios import RepositorioMedicos
from centrosalud.app.infrastructure.memoria.base import RepositorioEnMemoria


class RepositorioMedicosMemoria(RepositorioEnMemoria[Medico, MedicoLight], RepositorioMedicos):
    TIPO = "medicos"
    ENTIDAD = "un médico"

    def obtener_citas_id(self, medico_id: int) -> Optional[int]:
        medico = self.get_by_id(medico_id)
        return medico.citas_repositorio_id if medico is not None else None

    def _entidad_desde_dict(self, data: Dict[str, Any]) -> Medico:
        return Medico.from_dict(data)

    def _entidad_desde_light(self, light: MedicoLight) -> Medico:
        # num_colegiado del registro no se guarda: el médico nace con 0.
        return Medico(
            persona=DatosPersona(id=light.id, nombre=light.nombre),
            puede_tomar_decisiones=light.puede_tomar_decisiones,
        )

    def _light_desde_entidad(self, entidad: Medico) -> MedicoLight:
        return MedicoLight(
            id=entidad.id,
            nombre=entidad.nombre,
            num_colegiado=entidad.num_colegiado,
            puede_tomar_decisiones=entidad.puede_tomar_decisiones,
        )
