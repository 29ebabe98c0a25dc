# domain/enums.py
from __future__ import annotations

from enum import IntEnum


class CodigoError(IntEnum):
    """Códigos de diagnóstico de los tres errores tipados del dominio."""

    COLECCION_NO_INICIALIZADA = 0
    MEDICO_NO_AUTORIZADO = 101
    ENTIDAD_YA_EXISTE = 123
