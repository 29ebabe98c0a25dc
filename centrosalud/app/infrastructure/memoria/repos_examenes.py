# infrastructure/memoria/repos_examenes.py
"""
Repositorio en memoria para Exámenes.

Además del contrato genérico:
- coste total de la colección
- actualización de resultado y coste (la entidad decide si acepta el valor)
- ordenación in situ por coste ascendente (orden natural de Examen)
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from centrosalud.app.application.dtos import ExamenLight
from centrosalud.app.domain.examenes import Examen
from centrosalud.app.domain.repositorios import RepositorioExamenes
from centrosalud.app.infrastructure.memoria.base import RepositorioEnMemoria

logger = logging.getLogger(__name__)


class RepositorioExamenesMemoria(RepositorioEnMemoria[Examen, ExamenLight], RepositorioExamenes):
    TIPO = "examenes"
    ENTIDAD = "un examen"

    def calcular_coste_total(self) -> float:
        return sum(examen.coste for examen in self._coleccion())

    def actualizar_resultado(self, examen_id: int, resultado: str) -> bool:
        examen = self.get_by_id(examen_id)
        if examen is None:
            return False
        return examen.actualizar_resultado(resultado)

    def actualizar_coste(self, examen_id: int, coste: float) -> bool:
        examen = self.get_by_id(examen_id)
        if examen is None:
            return False
        return examen.actualizar_coste(coste)

    def ordenar_por_coste(self) -> bool:
        if self._items is None:
            return False
        # sort() es estable: empates de coste conservan el orden de inserción.
        self._items.sort()
        logger.debug("examenes_ordenados repositorio=%s n=%s", self.repositorio_id, len(self._items))
        return True

    def _entidad_desde_dict(self, data: Dict[str, Any]) -> Examen:
        return Examen.from_dict(data)

    def _entidad_desde_light(self, light: ExamenLight) -> Examen:
        examen = Examen(
            id=light.id,
            fecha=light.fecha,
            paciente_id=light.paciente_id,
            tipo=light.tipo,
            resultado=light.resultado,
        )
        # Nace con coste 0; el del registro solo entra si la entidad lo acepta (> 0).
        examen.actualizar_coste(light.coste)
        return examen

    def _light_desde_entidad(self, entidad: Examen) -> ExamenLight:
        return ExamenLight(
            id=entidad.id,
            tipo=entidad.tipo,
            fecha=entidad.fecha,
            paciente_id=entidad.paciente_id,
            resultado=entidad.resultado,
            coste=entidad.coste,
        )
