from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, Generic, List, Optional, TypeVar

from centrosalud.app.domain.exceptions import (
    ColeccionNoInicializadaError,
    EntidadYaExisteError,
    ExportacionError,
    OperacionInvalidaError,
)
from centrosalud.app.domain.repositorios import Repositorio, T
from centrosalud.app.infrastructure.memoria.snapshots import (
    SnapshotRepositorio,
    escribir_snapshot,
    leer_snapshot,
)

logger = logging.getLogger(__name__)

L = TypeVar("L")


class RepositorioEnMemoria(Repositorio[T], Generic[T, L]):
    """
    Repositorio respaldado por una lista ordenada.

    Búsqueda lineal por id. Una colección None (nunca inicializada) es un
    error de montaje distinto de una colección vacía.
    """

    TIPO = ""
    ENTIDAD = ""

    def __init__(self, repositorio_id: int) -> None:
        self._repositorio_id = repositorio_id
        self._items: Optional[List[T]] = []

    @property
    def repositorio_id(self) -> int:
        return self._repositorio_id

    # -----------------------------------------------------------------
    # Contrato genérico
    # -----------------------------------------------------------------

    def add(self, item: T) -> bool:
        self._coleccion().append(item)
        return True

    def remove(self, entidad_id: int) -> bool:
        items = self._coleccion()
        for index, item in enumerate(items):
            if item.id == entidad_id:
                del items[index]
                return True
        return False

    def exists(self, entidad_id: int) -> bool:
        return self.get_by_id(entidad_id) is not None

    def get_by_id(self, entidad_id: int) -> Optional[T]:
        return next((item for item in self._coleccion() if item.id == entidad_id), None)

    def list_all(self) -> List[T]:
        return list(self._coleccion())

    def __len__(self) -> int:
        return len(self._coleccion())

    # -----------------------------------------------------------------
    # Registros light
    # -----------------------------------------------------------------

    def add_light(self, light: L) -> bool:
        entidad_id = light.id  # type: ignore[attr-defined]
        if self.exists(entidad_id):
            raise EntidadYaExisteError(self.ENTIDAD, entidad_id)
        if not self.add(self._entidad_desde_light(light)):
            raise OperacionInvalidaError(f"No se pudo añadir {self.ENTIDAD} con id {entidad_id}.")
        return True

    def get_light(self, entidad_id: int) -> Optional[L]:
        entidad = self.get_by_id(entidad_id)
        return self._light_desde_entidad(entidad) if entidad is not None else None

    # -----------------------------------------------------------------
    # Snapshot
    # -----------------------------------------------------------------

    def exportar(self, destino: str | Path) -> bool:
        snapshot = SnapshotRepositorio(
            tipo=self.TIPO,
            repositorio_id=self._repositorio_id,
            items=[self._entidad_a_dict(item) for item in self._coleccion()],
        )
        escribir_snapshot(destino, snapshot)
        logger.info("snapshot_exportado tipo=%s items=%s", self.TIPO, len(snapshot.items))
        return True

    def importar(self, origen: str | Path) -> int:
        """Sustituye la colección por la del snapshot; devuelve cuántos items cargó."""
        snapshot = leer_snapshot(origen, tipo_esperado=self.TIPO)
        try:
            items = [self._entidad_desde_dict(data) for data in snapshot.items]
        except (KeyError, TypeError, ValueError) as exc:
            raise ExportacionError(str(exc)) from exc
        self._items = items
        logger.info("snapshot_importado tipo=%s items=%s origen_id=%s", self.TIPO, len(items), snapshot.repositorio_id)
        return len(items)

    # -----------------------------------------------------------------
    # Internos
    # -----------------------------------------------------------------

    def _coleccion(self) -> List[T]:
        if self._items is None:
            raise ColeccionNoInicializadaError(self.TIPO)
        return self._items

    def _entidad_a_dict(self, entidad: T) -> Dict[str, Any]:
        return entidad.to_dict()  # type: ignore[attr-defined]

    @abstractmethod
    def _entidad_desde_dict(self, data: Dict[str, Any]) -> T:
        raise NotImplementedError

    @abstractmethod
    def _entidad_desde_light(self, light: L) -> T:
        raise NotImplementedError

    @abstractmethod
    def _light_desde_entidad(self, entidad: T) -> L:
        raise NotImplementedError
