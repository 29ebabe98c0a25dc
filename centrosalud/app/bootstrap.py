# bootstrap.py
"""
Bootstrap de configuración de CentroSalud.

Responsabilidades:
- Resolver el directorio de snapshots (arg > env > defecto)
- Leer la clave de eliminación y las opciones de log del entorno

No contiene lógica de dominio ni de aplicación.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import getenv
from pathlib import Path

from centrosalud.app.application.security import CLAVE_ELIMINACION_POR_DEFECTO
from centrosalud.app.bootstrap_logging import get_logger

LOGGER = get_logger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ConfiguracionCentro:
    data_dir: Path
    clave_eliminacion: str = CLAVE_ELIMINACION_POR_DEFECTO
    log_level: str = "INFO"
    log_json: bool = False

    def ruta_snapshot(self, tipo: str) -> Path:
        return self.data_dir / f"{tipo}.json"


def data_dir() -> Path:
    """Directorio por defecto de los snapshots."""
    return Path("./data")


def resolve_data_dir(data_dir_arg: str | None = None, *, emit_log: bool = True) -> Path:
    """Resuelve el directorio de datos desde arg/env/default con trazabilidad en logs."""
    if data_dir_arg:
        resolved = Path(data_dir_arg).expanduser().resolve()
        source = "arg"
    else:
        configured = getenv("CENTROSALUD_DATA_DIR")
        if configured:
            resolved = Path(configured).expanduser().resolve()
            source = "env"
        else:
            resolved = data_dir().expanduser().resolve()
            source = "default"
    if emit_log:
        LOGGER.info("data_dir_resolved path=%s source=%s", resolved, source)
    return resolved


def cargar_configuracion(
    data_dir_arg: str | None = None,
    log_level_arg: str | None = None,
    json_logs_arg: bool | None = None,
) -> ConfiguracionCentro:
    log_level = (log_level_arg or getenv("CENTROSALUD_LOG_LEVEL") or "INFO").upper()
    if json_logs_arg is None:
        log_json = (getenv("CENTROSALUD_LOG_JSON") or "").strip().lower() in _TRUE_VALUES
    else:
        log_json = json_logs_arg
    clave = getenv("CENTROSALUD_CLAVE_ELIMINACION") or CLAVE_ELIMINACION_POR_DEFECTO
    return ConfiguracionCentro(
        data_dir=resolve_data_dir(data_dir_arg),
        clave_eliminacion=clave,
        log_level=log_level,
        log_json=log_json,
    )
