from __future__ import annotations

import argparse
import uuid
from pathlib import Path
from typing import Callable, Sequence

from centrosalud.app.bootstrap import cargar_configuracion
from centrosalud.app.bootstrap_logging import configure_logging, get_logger, set_run_context
from centrosalud.app.container import build_container
from centrosalud.app.crash_handler import install_global_exception_hook
from centrosalud.app.demo import ejecutar_demo
from centrosalud.app.domain.exceptions import ExportacionError

LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gestión de un centro de salud en memoria")
    parser.add_argument("--data-dir", help="Directorio de snapshots (CENTROSALUD_DATA_DIR)")
    parser.add_argument("--log-level", help="Nivel de log (CENTROSALUD_LOG_LEVEL)")
    parser.add_argument("--log-dir", default="./logs", help="Directorio de ficheros de log")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Logs en formato JSON")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("demo", help="Ejecuta el recorrido de demostración")
    subparsers.add_parser("exportar", help="Ejecuta la demo y exporta los cinco repositorios")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    config = cargar_configuracion(args.data_dir, args.log_level, args.json_logs)
    configure_logging("centrosalud-cli", Path(args.log_dir), level=config.log_level, json=config.log_json)
    set_run_context(uuid.uuid4().hex[:8])
    install_global_exception_hook(LOGGER)

    config.data_dir.mkdir(parents=True, exist_ok=True)
    container = build_container(config)
    ejecutar_demo(container, config.data_dir)

    if args.command == "exportar":
        return _exportar_todo(container.servicios_exportables(), config.ruta_snapshot)
    return 0


def _exportar_todo(exportadores: dict[str, Callable[..., bool]], ruta_snapshot: Callable[[str], Path]) -> int:
    fallos = 0
    for tipo, exportar in exportadores.items():
        destino = ruta_snapshot(tipo)
        try:
            exportar(destino)
        except ExportacionError as exc:
            fallos += 1
            print(f"Error al exportar {tipo}: {exc}")
            continue
        print(f"Exportado {tipo} -> {destino}")
    return 1 if fallos else 0


if __name__ == "__main__":
    raise SystemExit(main())
