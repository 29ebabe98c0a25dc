from centrosalud.app.infrastructure.memoria.contadores import GeneradorIdsRepositorio
from centrosalud.app.infrastructure.memoria.fabrica import FabricaRepositorios
from centrosalud.app.infrastructure.memoria.repos_citas import RepositorioCitasMemoria
from centrosalud.app.infrastructure.memoria.repos_diagnosticos import RepositorioDiagnosticosMemoria
from centrosalud.app.infrastructure.memoria.repos_examenes import RepositorioExamenesMemoria
from centrosalud.app.infrastructure.memoria.repos_medicos import RepositorioMedicosMemoria
from centrosalud.app.infrastructure.memoria.repos_pacientes import RepositorioPacientesMemoria

__all__ = [
    "FabricaRepositorios",
    "GeneradorIdsRepositorio",
    "RepositorioCitasMemoria",
    "RepositorioDiagnosticosMemoria",
    "RepositorioExamenesMemoria",
    "RepositorioMedicosMemoria",
    "RepositorioPacientesMemoria",
]
