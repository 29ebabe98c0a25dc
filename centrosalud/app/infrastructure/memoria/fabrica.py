from __future__ import annotations

from centrosalud.app.infrastructure.memoria.contadores import GeneradorIdsRepositorio
from centrosalud.app.infrastructure.memoria.repos_citas import RepositorioCitasMemoria
from centrosalud.app.infrastructure.memoria.repos_diagnosticos import RepositorioDiagnosticosMemoria
from centrosalud.app.infrastructure.memoria.repos_examenes import RepositorioExamenesMemoria
from centrosalud.app.infrastructure.memoria.repos_medicos import RepositorioMedicosMemoria
from centrosalud.app.infrastructure.memoria.repos_pacientes import RepositorioPacientesMemoria


class FabricaRepositorios:
    """Crea repositorios numerados con el generador que se le pasa."""

    def __init__(self, generador: GeneradorIdsRepositorio | None = None) -> None:
        self._generador = generador or GeneradorIdsRepositorio()

    @property
    def generador(self) -> GeneradorIdsRepositorio:
        return self._generador

    def citas(self) -> RepositorioCitasMemoria:
        return RepositorioCitasMemoria(self._generador.siguiente(RepositorioCitasMemoria.TIPO))

    def diagnosticos(self) -> RepositorioDiagnosticosMemoria:
        return RepositorioDiagnosticosMemoria(self._generador.siguiente(RepositorioDiagnosticosMemoria.TIPO))

    def examenes(self) -> RepositorioExamenesMemoria:
        return RepositorioExamenesMemoria(self._generador.siguiente(RepositorioExamenesMemoria.TIPO))

    def medicos(self) -> RepositorioMedicosMemoria:
        return RepositorioMedicosMemoria(self._generador.siguiente(RepositorioMedicosMemoria.TIPO))

    def pacientes(self) -> RepositorioPacientesMemoria:
        return RepositorioPacientesMemoria(self._generador.siguiente(RepositorioPacientesMemoria.TIPO))
