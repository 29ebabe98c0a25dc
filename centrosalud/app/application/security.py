from __future__ import annotations

import hmac
from typing import Optional, TypeVar

from centrosalud.app.application.dtos import MedicoLight
from centrosalud.app.domain.exceptions import ArgumentoNuloError, MedicoNoAutorizadoError

V = TypeVar("V")

CLAVE_ELIMINACION_POR_DEFECTO = "0000"


def exigir_argumento(valor: Optional[V], parametro: str) -> V:
    if valor is None:
        raise ArgumentoNuloError(parametro)
    return valor


def exigir_autorizacion(medico: Optional[MedicoLight], operacion: str, parametro: str = "medico") -> MedicoLight:
    """
    Puerta de decisión: identidad presente y con permiso para decidir.

    Solo se consulta puede_tomar_decisiones; el id del médico no se contrasta
    con ningún repositorio.
    """
    medico = exigir_argumento(medico, parametro)
    if not medico.puede_tomar_decisiones:
        raise MedicoNoAutorizadoError(operacion)
    return medico


def verificar_clave(clave: Optional[str], esperada: str) -> bool:
    """Clave de eliminación de médicos/pacientes. No es autenticación real."""
    if clave is None:
        return False
    return hmac.compare_digest(str(clave).encode("utf-8"), esperada.encode("utf-8"))
