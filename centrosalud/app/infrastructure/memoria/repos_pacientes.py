# infrastructure/memoria/repos_pacientes.py
"""Repositorio en memoria para Pacientes."""

from __future__ import annotations

from typing import Any, Dict, Optional

from centrosalud.app.application.dtos import PacienteLight
from centrosalud.app.domain.personas import DatosPersona, Paciente
from centrosalud.app.domain.repositorios import RepositorioPacientes
from centrosalud.app.infrastructure.memoria.base import RepositorioEnMemoria


class RepositorioPacientesMemoria(RepositorioEnMemoria[Paciente, PacienteLight], RepositorioPacientes):
    TIPO = "pacientes"
    ENTIDAD = "un paciente"

    def obtener_citas_id(self, paciente_id: int) -> Optional[int]:
        paciente = self.get_by_id(paciente_id)
        return paciente.citas_repositorio_id if paciente is not None else None

    def _entidad_desde_dict(self, data: Dict[str, Any]) -> Paciente:
        return Paciente.from_dict(data)

    def _entidad_desde_light(self, light: PacienteLight) -> Paciente:
        return Paciente(
            persona=DatosPersona(id=light.id, nombre=light.nombre),
            num_utente=light.num_utente,
        )

    def _light_desde_entidad(self, entidad: Paciente) -> PacienteLight:
        return PacienteLight(
            id=entidad.id,
            nombre=entidad.nombre,
            num_utente=entidad.num_utente,
        )
