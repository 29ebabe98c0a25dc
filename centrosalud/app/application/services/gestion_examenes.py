from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from centrosalud.app.application.dtos import ExamenLight, MedicoLight
from centrosalud.app.application.security import exigir_argumento, exigir_autorizacion
from centrosalud.app.application.services.exportacion import exportar_repositorio
from centrosalud.app.bootstrap_logging import get_logger
from centrosalud.app.domain.exceptions import ValidationError
from centrosalud.app.domain.value_objects import es_anterior
from centrosalud.app.infrastructure.memoria.repos_examenes import RepositorioExamenesMemoria

LOGGER = get_logger(__name__)


class GestionExamenes:
    def __init__(
        self,
        repo: RepositorioExamenesMemoria,
        reloj: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repo = repo
        self._reloj = reloj

    def agregar_examen(self, examen: Optional[ExamenLight], medico: Optional[MedicoLight]) -> bool:
        exigir_argumento(examen, "examen")
        exigir_autorizacion(medico, "agregar_examen")
        if es_anterior(examen.fecha, self._reloj()):
            LOGGER.warning("examen_rechazado examen_id=%s motivo=fecha_pasada", examen.id)
            raise ValidationError("La fecha del examen no puede ser anterior al momento actual.")
        ok = self._repo.add_light(examen)
        LOGGER.info("examen_agregado examen_id=%s tipo=%s", examen.id, examen.tipo)
        return ok

    def eliminar_examen(self, examen_id: int, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "eliminar_examen")
        ok = self._repo.remove(examen_id)
        if ok:
            LOGGER.info("examen_eliminado examen_id=%s", examen_id)
        else:
            LOGGER.warning("examen_no_encontrado examen_id=%s", examen_id)
        return ok

    def existe_examen(self, examen_id: int) -> bool:
        return self._repo.exists(examen_id)

    def obtener_examen(self, examen_id: int) -> Optional[ExamenLight]:
        return self._repo.get_light(examen_id)

    def actualizar_resultado(self, examen_id: int, resultado: str, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "actualizar_resultado")
        return self._repo.actualizar_resultado(examen_id, resultado)

    def actualizar_coste(self, examen_id: int, coste: float, medico: Optional[MedicoLight]) -> bool:
        """
        Negativo: se rechaza aquí sin tocar el repositorio.
        Cero: llega a la entidad, que también lo rechaza.
        """
        exigir_autorizacion(medico, "actualizar_coste")
        if coste < 0:
            LOGGER.warning("coste_rechazado examen_id=%s coste=%s", examen_id, coste)
            return False
        ok = self._repo.actualizar_coste(examen_id, coste)
        if ok:
            LOGGER.info("coste_actualizado examen_id=%s coste=%s", examen_id, coste)
        return ok

    def ordenar_por_coste(self, medico: Optional[MedicoLight]) -> bool:
        exigir_autorizacion(medico, "ordenar_por_coste")
        return self._repo.ordenar_por_coste()

    def coste_total(self) -> float:
        return self._repo.calcular_coste_total()

    def exportar_examenes(self, destino: str | Path) -> bool:
        return exportar_repositorio(self._repo, destino, LOGGER)
