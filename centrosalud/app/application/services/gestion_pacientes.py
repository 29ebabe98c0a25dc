from __future__ import annotations

from pathlib import Path
from typing import Optional

from centrosalud.app.application.dtos import MedicoLight, PacienteLight
from centrosalud.app.application.security import (
    CLAVE_ELIMINACION_POR_DEFECTO,
    exigir_argumento,
    exigir_autorizacion,
    verificar_clave,
)
from centrosalud.app.application.services.exportacion import exportar_repositorio
from centrosalud.app.bootstrap_logging import get_logger
from centrosalud.app.infrastructure.memoria.repos_pacientes import RepositorioPacientesMemoria

LOGGER = get_logger(__name__)


class GestionPacientes:
    def __init__(self, repo: RepositorioPacientesMemoria, clave_eliminacion: str = CLAVE_ELIMINACION_POR_DEFECTO) -> None:
        self._repo = repo
        self._clave_eliminacion = clave_eliminacion

    def agregar_paciente(self, paciente: Optional[PacienteLight], medico: Optional[MedicoLight]) -> bool:
        exigir_argumento(paciente, "paciente")
        exigir_autorizacion(medico, "agregar_paciente")
        ok = self._repo.add_light(paciente)
        LOGGER.info("paciente_agregado paciente_id=%s", paciente.id)
        return ok

    def eliminar_paciente(self, paciente_id: int, clave: Optional[str]) -> bool:
        if not verificar_clave(clave, self._clave_eliminacion):
            LOGGER.warning("eliminacion_denegada paciente_id=%s motivo=clave", paciente_id)
            return False
        ok = self._repo.remove(paciente_id)
        if ok:
            LOGGER.info("paciente_eliminado paciente_id=%s", paciente_id)
        return ok

    def existe_paciente(self, paciente_id: int, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "existe_paciente")
        return self._repo.exists(paciente_id)

    def obtener_paciente(self, paciente_id: int, medico: Optional[MedicoLight]) -> Optional[PacienteLight]:
        exigir_autorizacion(medico, "obtener_paciente")
        return self._repo.get_light(paciente_id)

    def obtener_citas_id(self, paciente_id: int, medico: Optional[MedicoLight]) -> Optional[int]:
        exigir_autorizacion(medico, "obtener_citas_id")
        return self._repo.obtener_citas_id(paciente_id)

    def exportar_pacientes(self, destino: str | Path) -> bool:
        return exportar_repositorio(self._repo, destino, LOGGER)
