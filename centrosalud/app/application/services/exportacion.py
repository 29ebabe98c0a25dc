from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from centrosalud.app.domain.exceptions import ExportacionError


class _Exportable(Protocol):
    TIPO: str

    def exportar(self, destino: str | Path) -> bool: ...


def exportar_repositorio(repositorio: _Exportable, destino: str | Path, logger: logging.LoggerAdapter) -> bool:
    """Exporta y reduce cualquier fallo a ExportacionError con el mensaje original."""
    try:
        return repositorio.exportar(destino)
    except Exception as exc:
        logger.error("exportacion_fallida tipo=%s destino=%s error=%s", repositorio.TIPO, destino, exc)
        raise ExportacionError(str(exc)) from exc
