from __future__ import annotations

from pathlib import Path
from typing import Optional

from centrosalud.app.application.dtos import MedicoLight
from centrosalud.app.application.security import (
    CLAVE_ELIMINACION_POR_DEFECTO,
    exigir_autorizacion,
    verificar_clave,
)
from centrosalud.app.application.services.exportacion import exportar_repositorio
from centrosalud.app.bootstrap_logging import get_logger
from centrosalud.app.infrastructure.memoria.repos_medicos import RepositorioMedicosMemoria

LOGGER = get_logger(__name__)


class GestionMedicos:
    def __init__(self, repo: RepositorioMedicosMemoria, clave_eliminacion: str = CLAVE_ELIMINACION_POR_DEFECTO) -> None:
        self._repo = repo
        self._clave_eliminacion = clave_eliminacion

    def agregar_medico(self, medico: Optional[MedicoLight]) -> bool:
        # El propio registro hace de identidad: un médico sin capacidad de decisión no se da de alta.
        exigir_autorizacion(medico, "agregar_medico")
        ok = self._repo.add_light(medico)
        LOGGER.info("medico_agregado medico_id=%s", medico.id)
        return ok

    def eliminar_medico(self, medico_id: int, clave: Optional[str]) -> bool:
        if not verificar_clave(clave, self._clave_eliminacion):
            LOGGER.warning("eliminacion_denegada medico_id=%s motivo=clave", medico_id)
            return False
        ok = self._repo.remove(medico_id)
        if ok:
            LOGGER.info("medico_eliminado medico_id=%s", medico_id)
        return ok

    def existe_medico(self, medico_id: int, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "existe_medico")
        return self._repo.exists(medico_id)

    def obtener_medico(self, medico_id: int, medico: Optional[MedicoLight]) -> Optional[MedicoLight]:
        exigir_autorizacion(medico, "obtener_medico")
        return self._repo.get_light(medico_id)

    def obtener_citas_id(self, medico_id: int, medico: Optional[MedicoLight]) -> Optional[int]:
        exigir_autorizacion(medico, "obtener_citas_id")
        return self._repo.obtener_citas_id(medico_id)

    def exportar_medicos(self, destino: str | Path) -> bool:
        return exportar_repositorio(self._repo, destino, LOGGER)
