from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from centrosalud.app.application.dtos import DiagnosticoLight, MedicoLight
from centrosalud.app.application.security import exigir_argumento, exigir_autorizacion
from centrosalud.app.application.services.exportacion import exportar_repositorio
from centrosalud.app.bootstrap_logging import get_logger
from centrosalud.app.domain.exceptions import ValidationError
from centrosalud.app.domain.value_objects import es_anterior
from centrosalud.app.infrastructure.memoria.repos_diagnosticos import RepositorioDiagnosticosMemoria

LOGGER = get_logger(__name__)


class GestionDiagnosticos:
    """
    Diagnósticos: solo un médico con capacidad de decisión los crea, lee o
    amplía. La asociación con una cita no tiene puerta.
    """

    def __init__(
        self,
        repo: RepositorioDiagnosticosMemoria,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._reloj = reloj

    def agregar_diagnostico(self, diagnostico: Optional[DiagnosticoLight], medico: Optional[MedicoLight]) -> bool:
        exigir_argumento(diagnostico, "diagnostico")
        exigir_autorizacion(medico, "agregar_diagnostico")
        if es_anterior(diagnostico.fecha, self._reloj()):
            LOGGER.warning("diagnostico_rechazado diagnostico_id=%s motivo=fecha_pasada", diagnostico.id)
            raise ValidationError("La fecha del diagnóstico no puede ser anterior al momento actual.")
        ok = self._repo.add_light(diagnostico)
        LOGGER.info("diagnostico_agregado diagnostico_id=%s", diagnostico.id)
        return ok

    def eliminar_diagnostico(self, diagnostico_id: int, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "eliminar_diagnostico")
        ok = self._repo.remove(diagnostico_id)
        if ok:
            LOGGER.info("diagnostico_eliminado diagnostico_id=%s", diagnostico_id)
        else:
            LOGGER.warning("diagnostico_no_encontrado diagnostico_id=%s", diagnostico_id)
        return ok

    def existe_diagnostico(self, diagnostico_id: int, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "existe_diagnostico")
        return self._repo.exists(diagnostico_id)

    def obtener_diagnostico(self, diagnostico_id: int, medico: Optional[MedicoLight]) -> Optional[DiagnosticoLight]:
        exigir_autorizacion(medico, "obtener_diagnostico")
        return self._repo.get_light(diagnostico_id)

    def asociar_cita(self, diagnostico_id: int, cita_id: int) -> bool:
        return self._repo.asociar_cita(diagnostico_id, cita_id)

    def obtener_cita_id(self, diagnostico_id: int) -> Optional[int]:
        return self._repo.obtener_cita_id(diagnostico_id)

    def agregar_texto_descripcion(self, diagnostico_id: int, texto: str, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "agregar_texto_descripcion")
        ok = self._repo.agregar_texto_descripcion(diagnostico_id, texto)
        if not ok:
            LOGGER.warning("descripcion_no_ampliada diagnostico_id=%s", diagnostico_id)
        return ok

    def exportar_diagnosticos(self, destino: str | Path) -> bool:
        return exportar_repositorio(self._repo, destino, LOGGER)
