from __future__ import annotations

from pathlib import Path
from typing import Optional

from centrosalud.app.application.dtos import CitaLight, MedicoLight, PacienteLight
from centrosalud.app.application.security import exigir_argumento, exigir_autorizacion
from centrosalud.app.application.services.exportacion import exportar_repositorio
from centrosalud.app.bootstrap_logging import get_logger
from centrosalud.app.infrastructure.memoria.repos_citas import RepositorioCitasMemoria

LOGGER = get_logger(__name__)


class GestionCitas:
    def __init__(self, repo: RepositorioCitasMemoria) -> None:
        self._repo = repo

    def agregar_cita(self, cita: Optional[CitaLight], medico: Optional[MedicoLight]) -> bool:
        exigir_argumento(cita, "cita")
        exigir_autorizacion(medico, "agregar_cita")
        ok = self._repo.add_light(cita)
        LOGGER.info("cita_agregada cita_id=%s paciente_id=%s", cita.id, cita.paciente_id)
        return ok

    def eliminar_cita(self, cita_id: int, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "eliminar_cita")
        ok = self._repo.remove(cita_id)
        if ok:
            LOGGER.info("cita_eliminada cita_id=%s", cita_id)
        else:
            LOGGER.warning("cita_no_encontrada cita_id=%s", cita_id)
        return ok

    def existe_cita(self, cita_id: int, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "existe_cita")
        return self._repo.exists(cita_id)

    def existe_cita_paciente(self, cita_id: int, paciente: Optional[PacienteLight]) -> bool:
        # Basta con que el paciente se identifique; no se comprueba que la cita sea suya.
        exigir_argumento(paciente, "paciente")
        return self._repo.exists(cita_id)

    def obtener_cita(self, cita_id: int, medico: Optional[MedicoLight]) -> Optional[CitaLight]:
        exigir_autorizacion(medico, "obtener_cita")
        return self._repo.get_light(cita_id)

    def exportar_citas(self, destino: str | Path) -> bool:
        return exportar_repositorio(self._repo, destino, LOGGER)
