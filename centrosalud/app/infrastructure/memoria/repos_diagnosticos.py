# infrastructure/memoria/repos_diagnosticos.py
"""
Repositorio en memoria para Diagnósticos.

Además del contrato genérico:
- asociar un diagnóstico a una cita (sin comprobar que la cita exista)
- ampliar la descripción (solo añadir, nunca reescribir)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from centrosalud.app.application.dtos import DiagnosticoLight
from centrosalud.app.domain.diagnosticos import Diagnostico
from centrosalud.app.domain.repositorios import RepositorioDiagnosticos
from centrosalud.app.infrastructure.memoria.base import RepositorioEnMemoria

logger = logging.getLogger(__name__)


class RepositorioDiagnosticosMemoria(RepositorioEnMemoria[Diagnostico, DiagnosticoLight], RepositorioDiagnosticos):
    TIPO = "diagnosticos"
    ENTIDAD = "un diagnóstico"

    def asociar_cita(self, diagnostico_id: int, cita_id: int) -> bool:
        diagnostico = self.get_by_id(diagnostico_id)
        if diagnostico is None:
            logger.debug("asociar_cita_sin_diagnostico id=%s", diagnostico_id)
            return False
        return diagnostico.asociar_cita(cita_id)

    def obtener_cita_id(self, diagnostico_id: int) -> Optional[int]:
        diagnostico = self.get_by_id(diagnostico_id)
        return diagnostico.cita_id if diagnostico is not None else None

    def agregar_texto_descripcion(self, diagnostico_id: int, texto: str) -> bool:
        diagnostico = self.get_by_id(diagnostico_id)
        if diagnostico is None:
            return False
        return diagnostico.agregar_texto_descripcion(texto)

    def _entidad_desde_dict(self, data: Dict[str, Any]) -> Diagnostico:
        return Diagnostico.from_dict(data)

    def _entidad_desde_light(self, light: DiagnosticoLight) -> Diagnostico:
        return Diagnostico(
            id=light.id,
            descripcion=light.descripcion or "",
            fecha=light.fecha,
            cita_id=light.cita_id,
        )

    def _light_desde_entidad(self, entidad: Diagnostico) -> DiagnosticoLight:
        return DiagnosticoLight(
            id=entidad.id,
            fecha=entidad.fecha,
            cita_id=entidad.cita_id,
            descripcion=entidad.descripcion,
        )
