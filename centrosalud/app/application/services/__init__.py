from centrosalud.app.application.services.gestion_citas import GestionCitas
from centrosalud.app.application.services.gestion_diagnosticos import GestionDiagnosticos
from centrosalud.app.application.services.gestion_examenes import GestionExamenes
from centrosalud.app.application.services.gestion_medicos import GestionMedicos
from centrosalud.app.application.services.gestion_pacientes import GestionPacientes

__all__ = [
    "GestionCitas",
    "GestionDiagnosticos",
    "GestionExamenes",
    "GestionMedicos",
    "GestionPacientes",
]
