from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from centrosalud.app.domain.citas import Cita
from centrosalud.app.domain.diagnosticos import Diagnostico
from centrosalud.app.domain.examenes import Examen
from centrosalud.app.domain.personas import Medico, Paciente
from centrosalud.app.domain.value_objects import Identificable

T = TypeVar("T", bound=Identificable)


class Repositorio(ABC, Generic[T]):
    """
    Contrato (interfaz) genérico de repositorio.

    ABC + abstractmethod:
    - ABC: marca la clase como base abstracta (no debe instanciarse directamente).
    - abstractmethod: obliga a las implementaciones (memoria, ficheros...) a implementar estos métodos.
    """

    @abstractmethod
    def add(self, item: T) -> bool:
        """Añade la entidad al final de la colección."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, entidad_id: int) -> bool:
        """Elimina la primera entidad con ese id; False si no existe."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, entidad_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, entidad_id: int) -> Optional[T]:
        """Devuelve la primera entidad con ese id o None."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[T]:
        raise NotImplementedError


class RepositorioCitas(Repositorio[Cita]):
    """Contrato para repositorios de citas."""


class RepositorioDiagnosticos(Repositorio[Diagnostico]):
    """Contrato para repositorios de diagnósticos."""

    @abstractmethod
    def asociar_cita(self, diagnostico_id: int, cita_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def obtener_cita_id(self, diagnostico_id: int) -> Optional[int]:
        raise NotImplementedError

    @abstractmethod
    def agregar_texto_descripcion(self, diagnostico_id: int, texto: str) -> bool:
        raise NotImplementedError


class RepositorioExamenes(Repositorio[Examen]):
    """Contrato para repositorios de exámenes."""

    @abstractmethod
    def calcular_coste_total(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def actualizar_resultado(self, examen_id: int, resultado: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def actualizar_coste(self, examen_id: int, coste: float) -> bool:
        raise NotImplementedError

    @abstractmethod
    def ordenar_por_coste(self) -> bool:
        """Ordena in situ por coste ascendente; False si la colección no existe."""
        raise NotImplementedError


class RepositorioMedicos(Repositorio[Medico]):
    """Contrato para repositorios de médicos."""

    @abstractmethod
    def obtener_citas_id(self, medico_id: int) -> Optional[int]:
        raise NotImplementedError


class RepositorioPacientes(Repositorio[Paciente]):
    """Contrato para repositorios de pacientes."""

    @abstractmethod
    def obtener_citas_id(self, paciente_id: int) -> Optional[int]:
        raise NotImplementedError
