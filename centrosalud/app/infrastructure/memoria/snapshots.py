"""
Snapshot de repositorio en fichero JSON.

Contenido: formato, tipo de repositorio, id de la instancia y la colección
completa en su orden. Solo lo entiende leer_snapshot(); no es un formato de
intercambio.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from centrosalud.app.domain.exceptions import ExportacionError

FORMATO_SNAPSHOT = "centrosalud.snapshot.v1"


@dataclass(frozen=True, slots=True)
class SnapshotRepositorio:
    tipo: str
    repositorio_id: int
    items: list[dict[str, Any]]


def escribir_snapshot(destino: str | Path, snapshot: SnapshotRepositorio) -> None:
    """Escribe (sobrescribe) el snapshot; cualquier fallo sale como ExportacionError."""
    path = Path(destino)
    payload = {
        "formato": FORMATO_SNAPSHOT,
        "tipo": snapshot.tipo,
        "repositorio_id": snapshot.repositorio_id,
        "items": snapshot.items,
    }
    try:
        with path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    except (OSError, TypeError, ValueError) as exc:
        raise ExportacionError(str(exc)) from exc


def leer_snapshot(origen: str | Path, *, tipo_esperado: str | None = None) -> SnapshotRepositorio:
    path = Path(origen)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        raise ExportacionError(str(exc)) from exc
    return _validar_payload(data, path, tipo_esperado)


def _validar_payload(data: Any, path: Path, tipo_esperado: str | None) -> SnapshotRepositorio:
    if not isinstance(data, dict) or data.get("formato") != FORMATO_SNAPSHOT:
        raise ExportacionError(f"Snapshot inválido en '{path}': formato desconocido.")
    tipo = data.get("tipo")
    if tipo_esperado is not None and tipo != tipo_esperado:
        raise ExportacionError(f"Snapshot de '{tipo}' no se puede cargar en un repositorio de '{tipo_esperado}'.")
    items = data.get("items")
    if not isinstance(items, list):
        raise ExportacionError(f"Snapshot inválido en '{path}': se esperaba una lista de items.")
    try:
        repositorio_id = int(data.get("repositorio_id", 0))
    except (TypeError, ValueError) as exc:
        raise ExportacionError(f"Snapshot inválido en '{path}': repositorio_id no numérico.") from exc
    return SnapshotRepositorio(tipo=str(tipo), repositorio_id=repositorio_id, items=items)
